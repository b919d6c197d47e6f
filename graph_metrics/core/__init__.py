
from .config import METRICS_CONFIG, API_CONFIG, MetricsConfig, ApiConfig
from .models import NodeRef, EdgeRef, Diagram, NodeMetrics, GraphMetrics
from .sparse_network import IndexedGraph
from .graph import DiagramGraphBuilder
from .shortest_paths import ShortestPathEngine, ShortestPaths

__all__ = [
    'METRICS_CONFIG',
    'API_CONFIG',
    'ApiConfig',
    'MetricsConfig',
    'NodeRef',
    'EdgeRef',
    'Diagram',
    'NodeMetrics',
    'GraphMetrics',
    'IndexedGraph',
    'DiagramGraphBuilder',
    'ShortestPathEngine',
    'ShortestPaths',
]
