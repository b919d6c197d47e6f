"""
Módulo de análisis de métricas - Arquitectura modular siguiendo SOLID.

Exporta:
- Analyzers especializados (grado, betweenness, closeness, clustering, WCC)
- Coordinador (MetricsAggregator) y calculate_graph_metrics
- Consultas sobre GraphMetrics
"""

# Analyzers base
from .base import GraphAnalyzer

# Analyzers especializados
from .degree_analyzer import DegreeAnalyzer
from .betweenness_analyzer import BetweennessAnalyzer
from .closeness_analyzer import ClosenessAnalyzer
from .clustering_analyzer import ClusteringAnalyzer
from .connectivity_analyzer import ConnectivityAnalyzer

# Coordinador
from .analyzers import MetricsAggregator, calculate_graph_metrics

# Consultas
from .queries import find_hub_nodes, find_bridge_nodes, find_peripheral_nodes

__all__ = [
    # Base
    'GraphAnalyzer',

    # Analyzers especializados
    'DegreeAnalyzer',
    'BetweennessAnalyzer',
    'ClosenessAnalyzer',
    'ClusteringAnalyzer',
    'ConnectivityAnalyzer',

    # Coordinador
    'MetricsAggregator',
    'calculate_graph_metrics',

    # Consultas
    'find_hub_nodes',
    'find_bridge_nodes',
    'find_peripheral_nodes'
]
