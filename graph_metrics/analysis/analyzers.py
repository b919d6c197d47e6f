"""Módulo coordinador de métricas - Patrón Fachada."""
from typing import Dict, Any

from .degree_analyzer import DegreeAnalyzer
from .betweenness_analyzer import BetweennessAnalyzer
from .closeness_analyzer import ClosenessAnalyzer
from .clustering_analyzer import ClusteringAnalyzer
from .connectivity_analyzer import ConnectivityAnalyzer
from ..core.config import METRICS_CONFIG, MetricsConfig
from ..core.graph import DiagramGraphBuilder
from ..core.models import GraphMetrics, NodeMetrics, sort_by_degree
from ..core.shortest_paths import ShortestPathEngine
from ..core.sparse_network import IndexedGraph
from ..utils.logger import get_logger

logger = get_logger(__name__)


class MetricsAggregator:
    """Coordina los analizadores y fusiona sus resultados en GraphMetrics (SRP, DIP)."""

    def __init__(self, config: MetricsConfig = METRICS_CONFIG):
        self.config = config
        self.builder = DiagramGraphBuilder(config)
        self.analyzers = {
            'degree': DegreeAnalyzer(),
            'betweenness': BetweennessAnalyzer(),
            'closeness': ClosenessAnalyzer(),
            'clustering': ClusteringAnalyzer(),
            'connectivity': ConnectivityAnalyzer()
        }

    def run_all_analyses(self, graph: IndexedGraph) -> Dict[str, Dict]:
        """Ejecuta todos los análisis sobre el mismo grafo de solo lectura."""
        engine = ShortestPathEngine(graph, self.config)
        return {
            name: analyzer.analyze(graph, engine=engine)
            for name, analyzer in self.analyzers.items()
        }

    def get_all_metrics(self, results: Dict[str, Dict]) -> Dict[str, Any]:
        """
        Extrae métricas esenciales de todos los análisis (para backend).

        Args:
            results: Resultados de run_all_analyses()

        Returns:
            Diccionario con métricas esenciales de todos los analyzers
        """
        metrics = {}

        for name, analyzer in self.analyzers.items():
            if name in results:
                metrics[name] = analyzer.get_metrics(results[name])

        return metrics

    def print_report(self, results: Dict[str, Dict]):
        for name, analyzer in self.analyzers.items():
            if name in results:
                analyzer.print_results(results[name])

    def merge(self, graph: IndexedGraph, results: Dict[str, Dict]) -> GraphMetrics:
        """Fusiona los resultados por vértice y ordena por grado descendente."""
        degree = results['degree']
        betweenness = results['betweenness']['betweenness']
        closeness = results['closeness']['closeness']
        clustering = results['clustering']['clustering']

        nodes = [
            NodeMetrics(
                node_id=node_id,
                in_degree=int(degree['in_degree'][idx]),
                out_degree=int(degree['out_degree'][idx]),
                degree=int(degree['degree'][idx]),
                betweenness=float(betweenness[idx]),
                closeness=float(closeness[idx]),
                clustering=float(clustering[idx])
            )
            for idx, node_id in enumerate(graph.idx_to_node)
        ]

        return GraphMetrics(
            node_count=degree['node_count'],
            edge_count=degree['edge_count'],
            average_degree=float(degree['average_degree']),
            density=float(degree['density']),
            is_connected=bool(results['connectivity']['is_connected']),
            nodes=tuple(sort_by_degree(nodes)),
            warnings=tuple(graph.warnings)
        )

    def calculate(self, diagram) -> GraphMetrics:
        graph = self.builder.build(diagram)
        metrics = self.merge(graph, self.run_all_analyses(graph))

        logger.debug(
            f"Métricas calculadas: nodos={metrics.node_count}, aristas={metrics.edge_count}, "
            f"densidad={metrics.density:.4f}, conectado={metrics.is_connected}"
        )
        return metrics


def calculate_graph_metrics(diagram, config: MetricsConfig = METRICS_CONFIG) -> GraphMetrics:
    """
    Calcula métricas de topología y centralidad de un diagrama.

    Args:
        diagram: Diagram o mapping {'nodes': [...], 'edges': [...]}
        config: Configuración (p. ej. max_workers para pasadas en paralelo)

    Returns:
        Snapshot inmutable con métricas globales y por nodo
    """
    return MetricsAggregator(config).calculate(diagram)
