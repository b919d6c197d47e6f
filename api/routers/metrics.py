"""
Router de Métricas - Topología y Centralidad

Endpoints para calcular métricas de un diagrama y consultar hubs,
nodos puente y nodos periféricos.
"""
from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from graph_metrics.analysis import (
    calculate_graph_metrics,
    find_hub_nodes,
    find_bridge_nodes,
    find_peripheral_nodes
)
from graph_metrics.core.models import Diagram, EdgeRef, GraphMetrics, NodeRef
from graph_metrics.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# Modelos Pydantic
# ============================================================================

class DiagramNode(BaseModel):
    """Nodo declarado en el diagrama (campos extra como 'shape' se ignoran)."""
    id: str


class DiagramEdge(BaseModel):
    """Arista dirigida; 'weight' ausente equivale a 1."""
    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(alias='from')
    to_id: str = Field(alias='to')
    weight: Optional[float] = None


class DiagramRequest(BaseModel):
    """Request con la lista plana de nodos y aristas."""
    nodes: List[DiagramNode] = Field(default_factory=list)
    edges: List[DiagramEdge] = Field(default_factory=list)

    def to_diagram(self) -> Diagram:
        return Diagram(
            nodes=tuple(NodeRef(id=n.id) for n in self.nodes),
            edges=tuple(EdgeRef(from_id=e.from_id, to_id=e.to_id, weight=e.weight) for e in self.edges)
        )


class NodeMetricsModel(BaseModel):
    """Métricas de un nodo."""
    node_id: str
    in_degree: int
    out_degree: int
    degree: int
    betweenness: float
    closeness: float
    clustering: float


class GraphMetricsResponse(BaseModel):
    """Respuesta con métricas globales y por nodo."""
    node_count: int
    edge_count: int
    average_degree: float
    density: float
    is_connected: bool
    nodes: List[NodeMetricsModel]
    warnings: List[str]


class NodeListResponse(BaseModel):
    """Respuesta de consultas (hubs, puentes, periféricos)."""
    total: int
    threshold: Optional[float]
    nodes: List[NodeMetricsModel]


# ============================================================================
# Helpers
# ============================================================================

def _compute(request: DiagramRequest) -> GraphMetrics:
    try:
        return calculate_graph_metrics(request.to_diagram())
    except Exception as e:
        logger.error(f"Error al calcular métricas: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error al calcular métricas: {str(e)}")


def _node_list(nodes, threshold: Optional[float]) -> NodeListResponse:
    return NodeListResponse(
        total=len(nodes),
        threshold=threshold,
        nodes=[NodeMetricsModel(**node.to_dict()) for node in nodes]
    )


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/metrics", response_model=GraphMetricsResponse)
async def compute_metrics(request: DiagramRequest):
    """
    Calcula métricas de topología y centralidad del diagrama.

    Los IDs referenciados solo por aristas se agregan como nodos implícitos.

    Returns:
        GraphMetricsResponse con nodos ordenados por grado descendente
    """
    metrics = _compute(request)
    logger.info(f"Métricas calculadas: {metrics.node_count} nodos, {metrics.edge_count} aristas")
    return GraphMetricsResponse(**metrics.to_dict())


@router.post("/metrics/hubs", response_model=NodeListResponse)
async def hub_nodes(request: DiagramRequest,
                    threshold: Optional[float] = Query(default=None, description="Grado mínimo")):
    """Nodos con grado alto (por defecto 1.5 x grado promedio)."""
    return _node_list(find_hub_nodes(_compute(request), threshold), threshold)


@router.post("/metrics/bridges", response_model=NodeListResponse)
async def bridge_nodes(request: DiagramRequest,
                       threshold: float = Query(default=0.0, ge=0.0, description="Betweenness mínima")):
    """Nodos puente ordenados por betweenness descendente."""
    return _node_list(find_bridge_nodes(_compute(request), threshold), threshold)


@router.post("/metrics/peripheral", response_model=NodeListResponse)
async def peripheral_nodes(request: DiagramRequest,
                           threshold: Optional[float] = Query(default=None, description="Closeness máxima")):
    """Nodos periféricos (closeness <= threshold; por defecto la media)."""
    return _node_list(find_peripheral_nodes(_compute(request), threshold), threshold)
