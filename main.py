"""CLI de métricas - analiza un diagrama (JSON o CSV de aristas) e imprime el reporte."""
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from graph_metrics.core.config import METRICS_CONFIG
from graph_metrics.data.loader import DiagramLoader
from graph_metrics.analysis import (
    MetricsAggregator,
    find_hub_nodes,
    find_bridge_nodes,
    find_peripheral_nodes
)
from graph_metrics.utils.logger import get_logger, set_level

logger = get_logger(__name__)


class GraphMetricsApp:
    """Aplicación principal de métricas (Patrón Fachada)."""

    def __init__(self, workers: int = 1):
        self.config = replace(METRICS_CONFIG, max_workers=workers)
        self.loader = DiagramLoader()
        self.aggregator = MetricsAggregator(self.config)

    def run(self, diagram_path: Path,
            csv_out: Optional[Path] = None,
            hub_threshold: Optional[float] = None,
            bridge_threshold: float = METRICS_CONFIG.default_bridge_threshold,
            peripheral_threshold: Optional[float] = None):
        """Ejecuta el análisis completo."""
        diagram = self.loader.load(diagram_path)
        graph = self.aggregator.builder.build(diagram)
        results = self.aggregator.run_all_analyses(graph)
        metrics = self.aggregator.merge(graph, results)

        print(f"\n{'Nodos':>6} {'Aristas':>8} {'Grado prom.':>12} {'Densidad':>10} {'Conectado':>10}")
        print("=" * 60)
        print(f"{metrics.node_count:>6} {metrics.edge_count:>8} {metrics.average_degree:>12.3f} "
              f"{metrics.density:>10.4f} {'sí' if metrics.is_connected else 'no':>10}")

        self.aggregator.print_report(results)

        self._print_nodes("HUBS", find_hub_nodes(metrics, hub_threshold), 'degree')
        self._print_nodes("NODOS PUENTE", find_bridge_nodes(metrics, bridge_threshold), 'betweenness')
        self._print_nodes("NODOS PERIFÉRICOS", find_peripheral_nodes(metrics, peripheral_threshold), 'closeness')

        for warning in metrics.warnings:
            print(f"Aviso: {warning}")

        if csv_out is not None:
            csv_out.parent.mkdir(parents=True, exist_ok=True)
            metrics.to_dataframe().to_csv(csv_out, index=False)
            print(f"\nTabla por nodo: {csv_out}")

        return metrics

    @staticmethod
    def _print_nodes(title: str, nodes, field: str):
        print(f"\n{title}: {len(nodes)}")
        for node in nodes[:10]:
            value = getattr(node, field)
            print(f"  {node.node_id}: {value:.4f}" if isinstance(value, float) else f"  {node.node_id}: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Métricas de topología y centralidad de un diagrama")
    parser.add_argument('diagram', type=Path, help="Archivo .json (nodes/edges) o .csv (from,to[,weight])")
    parser.add_argument('--workers', type=int, default=METRICS_CONFIG.max_workers,
                        help="Hilos para las pasadas por fuente")
    parser.add_argument('--csv', type=Path, default=None, help="Exportar tabla por nodo a CSV")
    parser.add_argument('--hub-threshold', type=float, default=None)
    parser.add_argument('--bridge-threshold', type=float, default=METRICS_CONFIG.default_bridge_threshold)
    parser.add_argument('--peripheral-threshold', type=float, default=None)
    parser.add_argument('-v', '--verbose', action='store_true', help="Logging en nivel DEBUG")
    return parser


def main(argv: List[str] = None) -> int:
    """Punto de entrada."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        GraphMetricsApp(workers=args.workers).run(
            args.diagram,
            csv_out=args.csv,
            hub_threshold=args.hub_threshold,
            bridge_threshold=args.bridge_threshold,
            peripheral_threshold=args.peripheral_threshold
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
