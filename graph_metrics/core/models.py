"""Modelos de datos: entrada del diagrama y snapshot inmutable de métricas."""
from dataclasses import dataclass, field, asdict
from functools import cached_property
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd


@dataclass(frozen=True)
class NodeRef:
    """Nodo declarado en el diagrama."""
    id: str


@dataclass(frozen=True)
class EdgeRef:
    """Arista dirigida del diagrama; weight=None equivale al peso por defecto."""
    from_id: str
    to_id: str
    weight: Optional[float] = None


@dataclass(frozen=True)
class Diagram:
    """Lista plana de nodos y aristas que produce la capa del AST."""
    nodes: Tuple[NodeRef, ...] = ()
    edges: Tuple[EdgeRef, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Diagram':
        """
        Construye un Diagram desde un mapping tipo AST.

        Acepta {'nodes': [{'id': ...}], 'edges': [{'from': ..., 'to': ..., 'weight': ...}]};
        las claves extra (shape, label, ...) se ignoran.
        """
        nodes = tuple(NodeRef(id=str(n['id'])) for n in data.get('nodes') or [])
        edges = tuple(
            EdgeRef(
                from_id=str(e['from']),
                to_id=str(e['to']),
                weight=e.get('weight')
            )
            for e in data.get('edges') or []
        )
        return cls(nodes=nodes, edges=edges)

    @classmethod
    def coerce(cls, diagram) -> 'Diagram':
        if isinstance(diagram, Diagram):
            return diagram
        return cls.from_dict(diagram)


@dataclass(frozen=True)
class NodeMetrics:
    node_id: str
    in_degree: int
    out_degree: int
    degree: int
    betweenness: float
    closeness: float
    clustering: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GraphMetrics:
    """Snapshot de métricas calculado en una sola pasada; nunca se actualiza."""
    node_count: int
    edge_count: int
    average_degree: float
    density: float
    is_connected: bool
    nodes: Tuple[NodeMetrics, ...] = ()
    warnings: Tuple[str, ...] = field(default=())

    def get_node(self, node_id: str) -> Optional[NodeMetrics]:
        """Busca métricas por ID; None si el nodo no fue analizado."""
        return self._by_id.get(node_id)

    @cached_property
    def _by_id(self) -> Dict[str, NodeMetrics]:
        # cached_property escribe en __dict__, compatible con frozen
        return {node.node_id: node for node in self.nodes}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_count': self.node_count,
            'edge_count': self.edge_count,
            'average_degree': self.average_degree,
            'density': self.density,
            'is_connected': self.is_connected,
            'nodes': [node.to_dict() for node in self.nodes],
            'warnings': list(self.warnings)
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Tabla por nodo (una fila por vértice, en el orden de `nodes`)."""
        columns = ['node_id', 'in_degree', 'out_degree', 'degree',
                   'betweenness', 'closeness', 'clustering']
        return pd.DataFrame([node.to_dict() for node in self.nodes], columns=columns)


def sort_by_degree(nodes: Sequence[NodeMetrics]) -> List[NodeMetrics]:
    """Ordena por grado descendente; empates conservan el orden de vértices."""
    return sorted(nodes, key=lambda n: n.degree, reverse=True)
