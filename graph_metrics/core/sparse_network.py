"""Grafo indexado: IDs mapeados una vez a índices densos, adyacencia en formato CSR."""
import numpy as np
import scipy.sparse as sp
import networkx as nx
from typing import Dict, Iterable, List, Tuple


class IndexedGraph:
    """
    Vista dirigida (listas de aristas) y vista no dirigida (CSR) del mismo diagrama.

    Ambas vistas se construyen una sola vez desde la lista de aristas y son de
    solo lectura durante el cálculo de métricas.
    """

    def __init__(self):
        self.num_nodes = 0
        self.node_to_idx: Dict[str, int] = {}  # Mapeo ID → índice
        self.idx_to_node: List[str] = []       # Mapeo índice → ID

        # Vista dirigida (multi-grafo): una entrada por arista del diagrama
        self.sources = np.empty(0, dtype=np.int64)
        self.targets = np.empty(0, dtype=np.int64)
        self.weights = np.empty(0, dtype=np.float64)

        # Vista no dirigida en CSR (sin lazos, pares paralelos fusionados)
        self.indptr = np.zeros(1, dtype=np.int64)
        self.indices = np.empty(0, dtype=np.int64)
        self.data = np.empty(0, dtype=np.float64)
        self.matrix: sp.csr_matrix = sp.csr_matrix((0, 0), dtype=np.int8)
        self.adjacency: List[List[Tuple[int, float]]] = []

        self.warnings: List[str] = []

    def add_node(self, node_id: str) -> int:
        """Agrega un vértice si no existe (unión idempotente) y retorna su índice."""
        idx = self.node_to_idx.get(node_id)
        if idx is None:
            idx = self.num_nodes
            self.node_to_idx[node_id] = idx
            self.idx_to_node.append(node_id)
            self.num_nodes += 1
        return idx

    def build_from_edges(self,
                         node_ids: Iterable[str],
                         edges: List[Tuple[str, str, float]]):
        """
        Construye ambas vistas.

        Args:
            node_ids: IDs declarados, en orden de declaración
            edges: Lista de (source, target, weight) con pesos ya resueltos
        """
        for node_id in node_ids:
            self.add_node(node_id)

        src_idx, dst_idx, weights = [], [], []
        for u, v, w in edges:
            src_idx.append(self.add_node(u))
            dst_idx.append(self.add_node(v))
            weights.append(float(w))

        self.sources = np.array(src_idx, dtype=np.int64)
        self.targets = np.array(dst_idx, dtype=np.int64)
        self.weights = np.array(weights, dtype=np.float64)

        self._build_undirected(src_idx, dst_idx, weights)

    def _build_undirected(self, src_idx: List[int], dst_idx: List[int], weights: List[float]):
        n = self.num_nodes

        # Fusionar aristas paralelas (cualquier dirección) manteniendo el peso mínimo
        pair_weight: Dict[Tuple[int, int], float] = {}
        for i, j, w in zip(src_idx, dst_idx, weights):
            if i == j:
                continue
            key = (min(i, j), max(i, j))
            pair_weight[key] = min(pair_weight.get(key, w), w)

        row, col, data = [], [], []
        for (i, j), w in pair_weight.items():
            row.extend([i, j])
            col.extend([j, i])
            data.extend([w, w])

        row = np.array(row, dtype=np.int64)
        col = np.array(col, dtype=np.int64)
        data = np.array(data, dtype=np.float64)

        # Orden por (fila, columna) para un recorrido determinista
        order = np.lexsort((col, row))
        row, col, data = row[order], col[order], data[order]

        counts = np.bincount(row, minlength=n) if n > 0 else np.zeros(0, dtype=np.int64)
        self.indptr = np.concatenate(([0], np.cumsum(counts))).astype(np.int64)
        self.indices = col
        self.data = data

        # Matriz de estructura (1 = adyacente); los pesos cero siguen siendo aristas
        self.matrix = sp.csr_matrix(
            (np.ones(len(col), dtype=np.int8), col, self.indptr),
            shape=(n, n)
        )

        indices_list = col.tolist()
        data_list = data.tolist()
        self.adjacency = [
            list(zip(indices_list[self.indptr[i]:self.indptr[i + 1]],
                     data_list[self.indptr[i]:self.indptr[i + 1]]))
            for i in range(n)
        ]

    def neighbors(self, idx: int) -> List[int]:
        """Vecinos no dirigidos del vértice (sin él mismo)."""
        return [j for j, _ in self.adjacency[idx]]

    @property
    def has_unit_weights(self) -> bool:
        """True si todas las adyacencias no dirigidas cuestan 1 (habilita BFS)."""
        return bool(np.all(self.data == 1.0))

    def get_node_count(self) -> int:
        return self.num_nodes

    def get_edge_count(self) -> int:
        """Número de aristas dirigidas (duplicados incluidos)."""
        return int(len(self.sources))

    def map_indices_to_ids(self, indices: Iterable[int]) -> List[str]:
        return [self.idx_to_node[int(idx)] for idx in indices]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Convierte a NetworkX MultiDiGraph para compatibilidad."""
        G = nx.MultiDiGraph()
        G.add_nodes_from(self.idx_to_node)
        for u, v, w in zip(self.sources.tolist(), self.targets.tolist(), self.weights.tolist()):
            G.add_edge(self.idx_to_node[u], self.idx_to_node[v], weight=w)
        return G

    def __repr__(self) -> str:
        return (
            f"IndexedGraph(nodes={self.num_nodes}, "
            f"edges={self.get_edge_count()}, "
            f"undirected_pairs={len(self.indices) // 2})"
        )
