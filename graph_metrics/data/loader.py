"""Módulo de carga y validación de diagramas (JSON o CSV de aristas)."""
import json
import pandas as pd
from pathlib import Path
from typing import Any, Dict, Mapping
from abc import ABC, abstractmethod

from ..core.models import Diagram


class DiagramValidator(ABC):
    @abstractmethod
    def validate(self, data):
        pass


class JsonDiagramValidator(DiagramValidator):

    def validate(self, data: Any) -> Mapping[str, Any]:
        if not isinstance(data, Mapping):
            raise ValueError("El diagrama debe ser un objeto JSON con 'nodes' y 'edges'")

        nodes = data.get('nodes') or []
        edges = data.get('edges') or []
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise ValueError("'nodes' y 'edges' deben ser listas")

        for i, node in enumerate(nodes):
            if not isinstance(node, Mapping) or 'id' not in node:
                raise ValueError(f"Nodo {i} sin 'id'")

        for i, edge in enumerate(edges):
            if not isinstance(edge, Mapping) or 'from' not in edge or 'to' not in edge:
                raise ValueError(f"Arista {i} sin 'from'/'to'")

        return data


class EdgeListValidator(DiagramValidator):

    REQUIRED_COLS = ['from', 'to']  # Columnas obligatorias; 'weight' es opcional

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = set(self.REQUIRED_COLS) - set(df.columns)
        if missing:
            raise ValueError(f"Columnas faltantes en lista de aristas: {sorted(missing)}")

        if df[self.REQUIRED_COLS].isnull().any().any():
            raise ValueError("Aristas con extremos vacíos")

        return df


class DiagramLoader:

    def __init__(self, validators: Dict[str, DiagramValidator] = None):
        # Validadores por defecto si no se proporcionan
        self.validators = validators or {
            'json': JsonDiagramValidator(),
            'csv': EdgeListValidator()
        }

    def load(self, path: Path) -> Diagram:
        """Carga un diagrama según la extensión del archivo (.json o .csv)."""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.json':
            return self._load_json(path)
        if suffix == '.csv':
            return self._load_csv(path)

        raise ValueError(f"Formato no soportado: {path.suffix or path.name}")

    def _load_json(self, path: Path) -> Diagram:
        try:
            with open(path, encoding='utf-8') as fh:
                data = json.load(fh)
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON inválido en {path}: {e}")

        return Diagram.from_dict(self.validators['json'].validate(data))

    def _load_csv(self, path: Path) -> Diagram:
        try:
            df = pd.read_csv(path, dtype={'from': str, 'to': str})
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {path}")
        except Exception as e:
            raise ValueError(f"Error cargando {path}: {str(e)}")

        df = self.validators['csv'].validate(df)

        if 'weight' in df.columns:
            try:
                df['weight'] = pd.to_numeric(df['weight'])
            except (ValueError, TypeError):
                raise ValueError(f"Columna 'weight' no numérica en {path}")

        edges = []
        for record in df.to_dict('records'):
            edge = {'from': record['from'], 'to': record['to']}
            if pd.notna(record.get('weight')):
                edge['weight'] = float(record['weight'])
            edges.append(edge)

        return Diagram.from_dict({'nodes': [], 'edges': edges})
