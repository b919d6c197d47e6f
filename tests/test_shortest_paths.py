"""
Tests for the shared shortest-path substrate.

Covers:
- BFS vs Dijkstra selection
- Distances, path counts and predecessors
- Unreachable vertices
- Weak connectivity and components
- Threaded source passes
"""

from dataclasses import replace

import pytest

from graph_metrics.core.config import METRICS_CONFIG
from graph_metrics.core.shortest_paths import ShortestPathEngine
from conftest import make_diagram


def engine_for(builder, diagram, **config):
    graph = builder.build(diagram)
    return graph, ShortestPathEngine(graph, replace(METRICS_CONFIG, **config))


class TestSingleSource:
    """Tests for one source pass."""

    def test_bfs_distances_on_chain(self, builder, chain4):
        graph, engine = engine_for(builder, chain4)
        assert not engine.weighted

        paths = engine.single_source(graph.node_to_idx['A'])
        assert paths.distances(graph) == {'A': 0.0, 'B': 1.0, 'C': 2.0, 'D': 3.0}
        assert paths.order == [0, 1, 2, 3]

    def test_direction_is_erased(self, builder, chain4):
        graph, engine = engine_for(builder, chain4)
        paths = engine.single_source(graph.node_to_idx['D'])
        assert paths.distances(graph)['A'] == 3.0

    def test_unreachable_vertices_have_no_entry(self, builder):
        graph, engine = engine_for(builder, make_diagram(['A', 'B', 'C', 'D'], [('A', 'B'), ('C', 'D')]))
        paths = engine.single_source(0)
        assert set(paths.dist) == {0, 1}
        assert set(paths.sigma) == {0, 1}
        assert set(paths.predecessors) == {0, 1}
        assert paths.reachable() == [1]

    def test_path_counts_and_predecessors_bfs(self, builder, square):
        graph, engine = engine_for(builder, square)
        paths = engine.single_source(graph.node_to_idx['A'])
        d = graph.node_to_idx['D']

        assert paths.sigma[d] == 2
        assert sorted(paths.predecessors[d]) == [graph.node_to_idx['B'], graph.node_to_idx['C']]
        assert paths.predecessors[graph.node_to_idx['A']] == []

    def test_dijkstra_used_for_weights(self, builder, weighted_triangle):
        graph, engine = engine_for(builder, weighted_triangle)
        assert engine.weighted

        paths = engine.single_source(graph.node_to_idx['A'])
        assert paths.distances(graph) == {'A': 0.0, 'B': 10.0, 'C': 15.0}
        assert paths.predecessors[graph.node_to_idx['C']] == [graph.node_to_idx['B']]

    def test_dijkstra_counts_equal_weighted_paths(self, builder):
        diagram = make_diagram(['A', 'B', 'C', 'D'],
                               [('A', 'B', 2), ('A', 'C', 2), ('B', 'D', 2), ('C', 'D', 2)])
        graph, engine = engine_for(builder, diagram)
        paths = engine.single_source(0)

        assert paths.dist[3] == 4.0
        assert paths.sigma[3] == 2

    def test_settle_order_non_decreasing(self, builder, mixed_graph):
        graph, engine = engine_for(builder, mixed_graph)
        for source in range(graph.num_nodes):
            paths = engine.single_source(source)
            distances = [paths.dist[v] for v in paths.order]
            assert distances == sorted(distances)
            assert paths.order[0] == source


class TestConnectivity:
    """Tests for weak connectivity."""

    def test_empty_and_single_vertex_connected(self, builder):
        _, engine = engine_for(builder, make_diagram([], []))
        assert engine.is_weakly_connected()
        assert engine.weak_components() == []

        _, engine = engine_for(builder, make_diagram(['A'], []))
        assert engine.is_weakly_connected()

    def test_directed_chain_is_weakly_connected(self, builder):
        _, engine = engine_for(builder, make_diagram(['A', 'B', 'C'], [('A', 'B'), ('C', 'B')]))
        assert engine.is_weakly_connected()
        assert engine.weak_components() == [[0, 1, 2]]

    def test_disjoint_pairs(self, builder):
        graph, engine = engine_for(builder, make_diagram(['A', 'B', 'C', 'D'], [('A', 'B'), ('C', 'D')]))
        assert not engine.is_weakly_connected()
        assert engine.weak_components() == [[0, 1], [2, 3]]

    def test_zero_weight_edge_still_connects(self, builder):
        _, engine = engine_for(builder, make_diagram(['A', 'B'], [('A', 'B', 0)]))
        assert engine.is_weakly_connected()
        assert engine.weak_components() == [[0, 1]]


class TestRunSources:
    """Tests for per-source mapping."""

    @pytest.mark.parametrize("workers", [1, 4])
    def test_results_in_vertex_order(self, builder, mixed_graph, workers):
        graph, engine = engine_for(builder, mixed_graph, max_workers=workers)
        sources = engine.run_sources(lambda paths: paths.source)
        assert sources == list(range(graph.num_nodes))
