"""Analizador de coeficiente de clustering local."""
import numpy as np
from typing import Dict, Any

from .base import GraphAnalyzer, top_values
from ..core.sparse_network import IndexedGraph


class ClusteringAnalyzer(GraphAnalyzer):
    """Fracción de pares de vecinos (no dirigidos) conectados entre sí."""

    def analyze(self, graph: IndexedGraph, **kwargs) -> Dict[str, Any]:
        n = graph.num_nodes
        clustering = np.zeros(n, dtype=np.float64)

        if n > 0:
            # Matriz binaria simétrica sin lazos: diag(A^3)/2 = triángulos por vértice
            A = graph.matrix.astype(np.float64)
            triangles = np.asarray((A @ A).multiply(A).sum(axis=1)).ravel() / 2.0
            k = np.diff(graph.indptr).astype(np.float64)

            possible_pairs = k * (k - 1) / 2.0
            mask = k >= 2
            clustering[mask] = triangles[mask] / possible_pairs[mask]

        return {'node_ids': list(graph.idx_to_node), 'clustering': clustering}

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        values = results['clustering']
        return {
            'average_clustering': round(float(values.mean()), 4) if len(values) else 0.0,
            'fully_clustered': [
                node_id for node_id, value in zip(results['node_ids'], values.tolist())
                if value == 1.0
            ]
        }

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis de clustering."""
        values = results['clustering']
        print(f"\n{'='*60}")
        print("COEFICIENTE DE CLUSTERING")
        print(f"{'='*60}")
        print(f"Clustering promedio: {values.mean() if len(values) else 0.0:.4f}")

        for i, (node_id, value) in enumerate(top_values(results['node_ids'], values, k=10), 1):
            if value > 0:
                print(f"{i:2d}. {node_id}: {value:.3f}")
