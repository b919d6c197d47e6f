"""Motor de caminos mínimos sobre la vista no dirigida (BFS o Dijkstra)."""
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from heapq import heappush, heappop
from itertools import count
from typing import Callable, Dict, List, TypeVar

import numpy as np
from scipy.sparse.csgraph import connected_components

from .config import METRICS_CONFIG, MetricsConfig
from .sparse_network import IndexedGraph

T = TypeVar('T')


@dataclass
class ShortestPaths:
    """
    Resultado de una pasada desde `source`.

    Solo contiene vértices alcanzables: los inalcanzables no tienen entrada
    en `dist`, `sigma` ni `predecessors`.
    """
    source: int
    order: List[int] = field(default_factory=list)             # Orden de asentamiento (distancia no decreciente)
    dist: Dict[int, float] = field(default_factory=dict)
    sigma: Dict[int, int] = field(default_factory=dict)        # Número de caminos mínimos
    predecessors: Dict[int, List[int]] = field(default_factory=dict)

    def reachable(self) -> List[int]:
        """Vértices alcanzables distintos de la fuente."""
        return [v for v in self.order if v != self.source]

    def distances(self, graph: IndexedGraph) -> Dict[str, float]:
        """Distancias por ID de nodo (fuente incluida con 0)."""
        return {graph.idx_to_node[v]: self.dist[v] for v in self.order}


class ShortestPathEngine:
    """
    Sustrato compartido por betweenness y closeness.

    Usa BFS cuando todas las adyacencias cuestan 1 y Dijkstra con cola de
    prioridad en otro caso. El grafo es de solo lectura, así que las pasadas
    por fuente pueden repartirse entre hilos.
    """

    def __init__(self, graph: IndexedGraph, config: MetricsConfig = METRICS_CONFIG):
        self.graph = graph
        self.max_workers = config.max_workers
        self.weighted = not graph.has_unit_weights

    def single_source(self, source: int) -> ShortestPaths:
        if self.weighted:
            return self._dijkstra(source)
        return self._bfs(source)

    def _bfs(self, source: int) -> ShortestPaths:
        adjacency = self.graph.adjacency
        paths = ShortestPaths(source=source)
        dist, sigma, preds = paths.dist, paths.sigma, paths.predecessors

        dist[source] = 0.0
        sigma[source] = 1
        preds[source] = []
        queue = deque([source])

        while queue:
            v = queue.popleft()
            paths.order.append(v)
            next_dist = dist[v] + 1.0

            for w, _ in adjacency[v]:
                if w not in dist:
                    dist[w] = next_dist
                    sigma[w] = 0
                    preds[w] = []
                    queue.append(w)
                if dist[w] == next_dist:
                    sigma[w] += sigma[v]
                    preds[w].append(v)

        return paths

    def _dijkstra(self, source: int) -> ShortestPaths:
        adjacency = self.graph.adjacency
        paths = ShortestPaths(source=source)
        dist, sigma, preds = paths.dist, paths.sigma, paths.predecessors

        seen = {source: 0.0}
        tentative_sigma = {source: 1}
        tentative_preds = {source: []}
        counter = count()  # Desempate estable en el heap
        heap = [(0.0, next(counter), source)]

        while heap:
            d, _, v = heappop(heap)
            if v in dist:
                continue

            dist[v] = d
            sigma[v] = tentative_sigma[v]
            preds[v] = tentative_preds[v]
            paths.order.append(v)

            for w, cost in adjacency[v]:
                if w in dist:
                    continue
                alt = d + cost
                if w not in seen or alt < seen[w]:
                    seen[w] = alt
                    tentative_sigma[w] = sigma[v]
                    tentative_preds[w] = [v]
                    heappush(heap, (alt, next(counter), w))
                elif alt == seen[w]:
                    tentative_sigma[w] += sigma[v]
                    tentative_preds[w].append(v)

        return paths

    def run_sources(self, fn: Callable[[ShortestPaths], T]) -> List[T]:
        """
        Aplica `fn` a la pasada de cada vértice fuente.

        Los resultados se devuelven en orden de vértice, con o sin pool de hilos.
        """
        sources = range(self.graph.num_nodes)

        if self.max_workers <= 1 or self.graph.num_nodes < 2:
            return [fn(self.single_source(s)) for s in sources]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda s: fn(self.single_source(s)), sources))

    def is_weakly_connected(self) -> bool:
        """Un único recorrido desde el vértice 0 alcanza a todos (vacuo para n <= 1)."""
        n = self.graph.num_nodes
        if n <= 1:
            return True

        visited = np.zeros(n, dtype=bool)
        visited[0] = True
        stack = [0]
        while stack:
            v = stack.pop()
            for w, _ in self.graph.adjacency[v]:
                if not visited[w]:
                    visited[w] = True
                    stack.append(w)

        return bool(visited.all())

    def weak_components(self) -> List[List[int]]:
        """Componentes débiles como listas de índices, en orden del primer vértice."""
        n = self.graph.num_nodes
        if n == 0:
            return []

        _, labels = connected_components(self.graph.matrix, directed=False)

        components: Dict[int, List[int]] = {}
        for idx, label in enumerate(labels.tolist()):
            components.setdefault(label, []).append(idx)
        return list(components.values())
