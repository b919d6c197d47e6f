"""Consultas sobre un GraphMetrics ya calculado: hubs, puentes y periféricos."""
import math
from typing import List, Optional

from ..core.config import METRICS_CONFIG, MetricsConfig
from ..core.models import GraphMetrics, NodeMetrics, sort_by_degree


def find_hub_nodes(metrics: GraphMetrics, threshold: Optional[float] = None,
                   config: MetricsConfig = METRICS_CONFIG) -> List[NodeMetrics]:
    """
    Nodos con grado >= threshold, ordenados por grado descendente.

    Sin threshold se usa config.hub_degree_factor * grado promedio (mínimo min_hub_degree).
    """
    cutoff = config.hub_cutoff(metrics.average_degree) if threshold is None else threshold
    return sort_by_degree([node for node in metrics.nodes if node.degree >= cutoff])


def find_bridge_nodes(metrics: GraphMetrics, threshold: Optional[float] = None,
                      config: MetricsConfig = METRICS_CONFIG) -> List[NodeMetrics]:
    """Nodos con betweenness >= threshold (por defecto config.default_bridge_threshold), descendente."""
    cutoff = config.default_bridge_threshold if threshold is None else threshold
    sorted_nodes = sorted(metrics.nodes, key=lambda n: n.betweenness, reverse=True)
    return [node for node in sorted_nodes if node.betweenness >= cutoff]


def find_peripheral_nodes(metrics: GraphMetrics, threshold: Optional[float] = None) -> List[NodeMetrics]:
    """Nodos con closeness <= threshold (por defecto la media), ordenados ascendentemente."""
    if not metrics.nodes:
        return []

    if threshold is None:
        threshold = math.fsum(node.closeness for node in metrics.nodes) / len(metrics.nodes)

    sorted_nodes = sorted(metrics.nodes, key=lambda n: n.closeness)
    # La media puede quedar un ulp por debajo de un valor común a todos los nodos
    return [node for node in sorted_nodes
            if node.closeness <= threshold or math.isclose(node.closeness, threshold)]
