"""Módulo de construcción del grafo indexado a partir del diagrama."""
import math
from numbers import Real
from typing import List, Optional, Tuple

from .config import METRICS_CONFIG, MetricsConfig
from .models import Diagram
from .sparse_network import IndexedGraph
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DiagramGraphBuilder:
    """Deriva el conjunto canónico de vértices y aristas del diagrama (SRP)."""

    def __init__(self, config: MetricsConfig = METRICS_CONFIG):
        self.config = config

    def build(self, diagram) -> IndexedGraph:
        """
        Construye el grafo indexado.

        Los IDs referenciados solo por aristas se agregan como vértices implícitos;
        las aristas duplicadas se conservan (multi-grafo).
        """
        diagram = Diagram.coerce(diagram)
        graph = IndexedGraph()

        edges: List[Tuple[str, str, float]] = []
        for edge in diagram.edges:
            weight, warning = self._resolve_weight(edge.weight)
            if warning:
                message = f"Arista {edge.from_id}->{edge.to_id}: {warning}"
                logger.warning(message)
                graph.warnings.append(message)
            edges.append((edge.from_id, edge.to_id, weight))

        graph.build_from_edges((node.id for node in diagram.nodes), edges)

        logger.debug(f"Grafo construido: {graph!r}")
        return graph

    def _resolve_weight(self, weight) -> Tuple[float, Optional[str]]:
        """Resuelve el peso: ausente → por defecto; negativo o no finito → por defecto con aviso."""
        default = self.config.default_weight

        if weight is None:
            return default, None

        if isinstance(weight, bool) or not isinstance(weight, Real):
            return default, f"peso no numérico {weight!r}, se usa {default}"

        weight = float(weight)
        if not math.isfinite(weight):
            return default, f"peso no finito {weight}, se usa {default}"
        if weight < 0:
            return default, f"peso negativo {weight}, se usa {default}"

        return weight, None
