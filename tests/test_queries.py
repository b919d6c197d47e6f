"""
Tests for hub, bridge and peripheral queries over computed metrics.
"""

import pytest

from graph_metrics import (
    GraphMetrics,
    calculate_graph_metrics,
    find_hub_nodes,
    find_bridge_nodes,
    find_peripheral_nodes
)
from conftest import make_diagram


@pytest.fixture
def hub_graph():
    return make_diagram(['Hub', 'A', 'B', 'C'],
                        [('Hub', 'A'), ('Hub', 'B'), ('Hub', 'C'), ('A', 'B')])


class TestFindHubNodes:
    """Tests for degree-based hubs."""

    def test_default_threshold_puts_hub_first(self, hub_graph):
        hubs = find_hub_nodes(calculate_graph_metrics(hub_graph))
        assert len(hubs) > 0
        assert hubs[0].node_id == 'Hub'
        assert hubs[0].degree > 2
        # average degree 1.0 → cutoff 1.5
        assert [h.node_id for h in hubs] == ['Hub', 'A', 'B']

    def test_custom_threshold(self, chain3):
        hubs = find_hub_nodes(calculate_graph_metrics(chain3), 2)
        assert [h.node_id for h in hubs] == ['B']

    def test_explicit_zero_threshold_returns_all(self, chain3):
        assert len(find_hub_nodes(calculate_graph_metrics(chain3), 0)) == 3

    def test_isolated_vertices_are_not_hubs(self):
        metrics = calculate_graph_metrics(make_diagram(['A', 'B'], []))
        assert find_hub_nodes(metrics) == []

    def test_does_not_recompute(self, chain3):
        metrics = calculate_graph_metrics(chain3)
        find_hub_nodes(metrics)
        assert metrics == calculate_graph_metrics(chain3)


class TestFindBridgeNodes:
    """Tests for betweenness-based bridges."""

    def test_bridge_first(self, chain3):
        bridges = find_bridge_nodes(calculate_graph_metrics(chain3), 0)
        assert len(bridges) > 0
        assert bridges[0].node_id == 'B'
        assert bridges[0].betweenness > bridges[1].betweenness

    def test_default_threshold_includes_all(self, chain3):
        assert len(find_bridge_nodes(calculate_graph_metrics(chain3))) == 3

    def test_custom_threshold(self, chain4):
        bridges = find_bridge_nodes(calculate_graph_metrics(chain4), 0.5)
        assert len(bridges) <= 2
        assert {b.node_id for b in bridges} == {'B', 'C'}

    def test_none_threshold_uses_default(self, chain3):
        metrics = calculate_graph_metrics(chain3)
        assert find_bridge_nodes(metrics, None) == find_bridge_nodes(metrics)

    def test_sorted_descending(self, mixed_graph):
        values = [b.betweenness for b in find_bridge_nodes(calculate_graph_metrics(mixed_graph))]
        assert values == sorted(values, reverse=True)


class TestFindPeripheralNodes:
    """Tests for closeness-based peripheral nodes."""

    def test_star_leaves_are_peripheral(self):
        metrics = calculate_graph_metrics(make_diagram(['Hub', 'A', 'B'], [('Hub', 'A'), ('Hub', 'B')]))
        peripheral = find_peripheral_nodes(metrics)
        assert [p.node_id for p in peripheral] == ['A', 'B']
        assert all(p.closeness < 1.0 for p in peripheral)

    def test_custom_threshold(self, chain3):
        metrics = calculate_graph_metrics(chain3)
        assert len(find_peripheral_nodes(metrics, 1.0)) == 3
        assert find_peripheral_nodes(metrics, 0.1) == []

    def test_isolated_vertex_first(self):
        metrics = calculate_graph_metrics(make_diagram(['A', 'B', 'C', 'Z'], [('A', 'B'), ('B', 'C')]))
        assert find_peripheral_nodes(metrics)[0].node_id == 'Z'

    @pytest.mark.parametrize('n', [6, 9, 10, 12, 13, 20, 37])
    def test_regular_cycle_all_peripheral(self, n):
        # Todos los nodos comparten closeness; la media no debe excluirlos por redondeo
        ids = [f'N{i}' for i in range(n)]
        edges = [(ids[i], ids[(i + 1) % n]) for i in range(n)]
        metrics = calculate_graph_metrics(make_diagram(ids, edges))
        assert len({p.closeness for p in metrics.nodes}) == 1
        assert len(find_peripheral_nodes(metrics)) == n

    def test_empty_metrics(self):
        empty = GraphMetrics(node_count=0, edge_count=0, average_degree=0.0,
                             density=0.0, is_connected=True)
        assert find_peripheral_nodes(empty) == []
        assert find_hub_nodes(empty) == []
        assert find_bridge_nodes(empty) == []


def test_hub_factor_is_tunable(hub_graph):
    from dataclasses import replace
    from graph_metrics import METRICS_CONFIG

    metrics = calculate_graph_metrics(hub_graph)
    strict = replace(METRICS_CONFIG, hub_degree_factor=3.0)
    assert [h.node_id for h in find_hub_nodes(metrics, config=strict)] == ['Hub']
