"""Analizador de closeness: alcanzables / suma de distancias."""
import numpy as np
from typing import Dict, Any

from .base import GraphAnalyzer, top_values
from ..core.shortest_paths import ShortestPathEngine, ShortestPaths
from ..core.sparse_network import IndexedGraph


class ClosenessAnalyzer(GraphAnalyzer):
    """Closeness restringida a vértices alcanzables (grafos desconectados incluidos)."""

    def analyze(self, graph: IndexedGraph, engine: ShortestPathEngine = None, **kwargs) -> Dict[str, Any]:
        engine = engine or ShortestPathEngine(graph)
        closeness = np.array(engine.run_sources(self.source_closeness), dtype=np.float64)

        return {'node_ids': list(graph.idx_to_node), 'closeness': closeness}

    @staticmethod
    def source_closeness(paths: ShortestPaths) -> float:
        """0 para vértices aislados o con todas las distancias en cero (pesos 0)."""
        reachable = paths.reachable()
        if not reachable:
            return 0.0

        total_distance = sum(paths.dist[t] for t in reachable)
        if total_distance <= 0:
            return 0.0

        return len(reachable) / total_distance

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        values = results['closeness']
        return {
            'mean_closeness': round(float(values.mean()), 4) if len(values) else 0.0,
            'bottom_5_closeness': [
                {'node_id': node_id, 'closeness': round(value, 4)}
                for node_id, value in top_values(results['node_ids'], values, reverse=False)
            ]
        }

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis de closeness."""
        values = results['closeness']
        print(f"\n{'='*60}")
        print("CLOSENESS")
        print(f"{'='*60}")

        if len(values) == 0:
            print("Sin nodos")
            return

        print(f"Closeness promedio: {values.mean():.4f}")
        for i, (node_id, value) in enumerate(top_values(results['node_ids'], values, k=10), 1):
            print(f"{i:2d}. {node_id}: {value:.4f}")
