"""Data module - Loading and validation of diagrams."""

from .loader import DiagramLoader, JsonDiagramValidator, EdgeListValidator

__all__ = ['DiagramLoader', 'JsonDiagramValidator', 'EdgeListValidator']
