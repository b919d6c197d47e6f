"""Analizador de grado (entrada/salida/total), grado promedio y densidad."""
import numpy as np
from typing import Dict, Any

from .base import GraphAnalyzer, top_values
from ..core.sparse_network import IndexedGraph


class DegreeAnalyzer(GraphAnalyzer):
    """Cuenta aristas incidentes por vértice sobre la vista dirigida (multi-grafo)."""

    def analyze(self, graph: IndexedGraph, **kwargs) -> Dict[str, Any]:
        n = graph.num_nodes
        edge_count = graph.get_edge_count()

        in_degree = np.bincount(graph.targets, minlength=n).astype(np.int64)
        out_degree = np.bincount(graph.sources, minlength=n).astype(np.int64)

        # Grafo dirigido: aristas posibles = n * (n-1)
        possible_edges = n * (n - 1)

        return {
            'node_ids': list(graph.idx_to_node),
            'in_degree': in_degree,
            'out_degree': out_degree,
            'degree': in_degree + out_degree,
            'node_count': n,
            'edge_count': edge_count,
            'average_degree': edge_count / n if n > 0 else 0.0,
            'density': edge_count / possible_edges if possible_edges > 0 else 0.0
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'node_count': results['node_count'],
            'edge_count': results['edge_count'],
            'average_degree': round(results['average_degree'], 4),
            'density': round(results['density'], 4),
            'max_degree': int(results['degree'].max()) if results['node_count'] else 0,
            'top_5_degree': [
                {'node_id': node_id, 'degree': int(value)}
                for node_id, value in top_values(results['node_ids'], results['degree'])
            ]
        }

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis de grado."""
        print(f"\n{'='*60}")
        print("GRADO Y DENSIDAD")
        print(f"{'='*60}")
        print(f"Nodos: {results['node_count']}")
        print(f"Aristas: {results['edge_count']}")
        print(f"Grado promedio: {results['average_degree']:.3f}")
        print(f"Densidad: {results['density']:.4f}")

        for i, (node_id, value) in enumerate(top_values(results['node_ids'], results['degree'], k=10), 1):
            if value > 0:
                print(f"{i:2d}. {node_id}: grado {int(value)}")
