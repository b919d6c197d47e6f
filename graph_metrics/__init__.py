"""Motor de métricas de topología y centralidad para diagramas."""

from .core import (
    METRICS_CONFIG,
    MetricsConfig,
    NodeRef,
    EdgeRef,
    Diagram,
    NodeMetrics,
    GraphMetrics,
)
from .analysis import (
    MetricsAggregator,
    calculate_graph_metrics,
    find_hub_nodes,
    find_bridge_nodes,
    find_peripheral_nodes,
)

__version__ = '1.0.0'

__all__ = [
    'METRICS_CONFIG',
    'MetricsConfig',
    'NodeRef',
    'EdgeRef',
    'Diagram',
    'NodeMetrics',
    'GraphMetrics',
    'MetricsAggregator',
    'calculate_graph_metrics',
    'find_hub_nodes',
    'find_bridge_nodes',
    'find_peripheral_nodes',
]
