"""Módulo base para analizadores de métricas - Principio de Segregación de Interfaces (ISP)."""
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Tuple

import numpy as np

from ..core.sparse_network import IndexedGraph


class GraphAnalyzer(ABC):
    """Clase base abstracta para analizadores del grafo indexado (SRP, OCP, ISP)."""

    @abstractmethod
    def analyze(self, graph: IndexedGraph, **kwargs) -> Dict[str, Any]:
        """Realiza análisis y devuelve resultados (arrays por índice de vértice)."""
        pass

    @abstractmethod
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Extrae métricas esenciales para APIs/backend."""
        pass

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis (opcional - para CLI)."""
        pass


def top_values(node_ids: List[str], values: np.ndarray, k: int = 5,
               reverse: bool = True) -> List[Tuple[str, float]]:
    """Top-k (ID, valor) ordenado por valor; empates en orden de vértice."""
    ranked = sorted(zip(node_ids, values.tolist()), key=lambda x: x[1], reverse=reverse)
    return ranked[:k]
