"""Inmutabilidad y seguridad de tipos."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MetricsConfig:

    default_weight: float = 1.0  # Peso de aristas sin 'weight' (y de pesos inválidos)
    hub_degree_factor: float = 1.5  # Hub: grado >= factor * grado promedio
    min_hub_degree: float = 1.0  # Nodos aislados nunca son hubs
    default_bridge_threshold: float = 0.0
    max_workers: int = 1  # 1 = pasadas por fuente secuenciales

    def hub_cutoff(self, average_degree: float) -> float:
        return max(self.hub_degree_factor * average_degree, self.min_hub_degree)


@dataclass(frozen=True)
class ApiConfig:

    title: str = "Graph Metrics API"
    description: str = "API REST para métricas de topología y centralidad de diagramas"
    version: str = "1.0.0"
    cors_origins: Tuple[str, ...] = ("http://localhost:3000", "http://127.0.0.1:3000")
    host: str = "0.0.0.0"
    port: int = 8000


# Singleton instances
METRICS_CONFIG = MetricsConfig()
API_CONFIG = ApiConfig()
