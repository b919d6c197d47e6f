"""Analizador de Componentes Conexas Débilmente (WCC)."""
from typing import Dict, Any

from .base import GraphAnalyzer
from ..core.shortest_paths import ShortestPathEngine
from ..core.sparse_network import IndexedGraph


class ConnectivityAnalyzer(GraphAnalyzer):
    """Conectividad débil: se ignora la dirección de las aristas."""

    def analyze(self, graph: IndexedGraph, engine: ShortestPathEngine = None, **kwargs) -> Dict[str, Any]:
        engine = engine or ShortestPathEngine(graph)

        if graph.num_nodes == 0:
            return {'is_connected': True, 'num_components': 0, 'sizes': [],
                    'giant_component': 0, 'components': []}

        components = [graph.map_indices_to_ids(c) for c in engine.weak_components()]
        components.sort(key=len, reverse=True)

        return {
            'is_connected': len(components) == 1,
            'num_components': len(components),
            'sizes': [len(c) for c in components],
            'giant_component': len(components[0]),
            'components': components
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'is_connected': results['is_connected'],
            'num_components': results['num_components'],
            'giant_component_size': results['giant_component'],
            'top_3_sizes': results['sizes'][:3],
            'fragmentation_index': self._calculate_fragmentation(results)
        }

    def _calculate_fragmentation(self, results: Dict[str, Any]) -> float:
        """Calcula índice de fragmentación (1 = muy fragmentado, 0 = conectado)."""
        total_nodes = sum(results['sizes'])
        if total_nodes == 0:
            return 0.0

        return 1.0 - (results['giant_component'] / total_nodes)

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis WCC."""
        print(f"\n{'='*60}")
        print("COMPONENTES CONEXAS (WCC)")
        print(f"{'='*60}")
        print(f"Conectado: {'sí' if results['is_connected'] else 'no'}")
        print(f"Número de componentes: {results['num_components']}")
        print(f"Tamaño componente gigante: {results['giant_component']}")
        print(f"Distribución de tamaños: {results['sizes'][:10]}")
        print(f"Índice de fragmentación: {self._calculate_fragmentation(results):.3f}")
