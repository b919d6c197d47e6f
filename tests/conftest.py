"""
Pytest fixtures for graph metrics testing.

Provides shared diagrams in the AST-like shape produced by the parser:
{'nodes': [{'id': ..., 'shape': ...}], 'edges': [{'from': ..., 'to': ..., 'weight': ...}]}
"""

import pytest

from graph_metrics.core.graph import DiagramGraphBuilder


def make_diagram(node_ids, edges):
    """Build an AST-like mapping; edges are (from, to) or (from, to, weight)."""
    return {
        'nodes': [{'id': node_id, 'shape': 'circle'} for node_id in node_ids],
        'edges': [
            {'from': e[0], 'to': e[1], **({'weight': e[2]} if len(e) > 2 else {})}
            for e in edges
        ]
    }


def node(metrics, node_id):
    found = metrics.get_node(node_id)
    assert found is not None, f"missing metrics for {node_id}"
    return found


@pytest.fixture
def builder():
    return DiagramGraphBuilder()


@pytest.fixture
def chain3():
    return make_diagram(['A', 'B', 'C'], [('A', 'B'), ('B', 'C')])


@pytest.fixture
def chain4():
    return make_diagram(['A', 'B', 'C', 'D'], [('A', 'B'), ('B', 'C'), ('C', 'D')])


@pytest.fixture
def triangle():
    return make_diagram(['A', 'B', 'C'], [('A', 'B'), ('B', 'C'), ('C', 'A')])


@pytest.fixture
def star():
    return make_diagram(
        ['Hub', 'A', 'B', 'C', 'D'],
        [('Hub', 'A'), ('Hub', 'B'), ('Hub', 'C'), ('Hub', 'D')]
    )


@pytest.fixture
def weighted_triangle():
    return make_diagram(
        ['A', 'B', 'C'],
        [('A', 'B', 10), ('B', 'C', 5), ('A', 'C', 20)]
    )


@pytest.fixture
def square():
    """Two equal shortest paths between every opposite pair."""
    return make_diagram(
        ['A', 'B', 'C', 'D'],
        [('A', 'B'), ('A', 'C'), ('B', 'D'), ('C', 'D')]
    )


@pytest.fixture
def mixed_graph():
    """Small irregular graph with a triangle, a tail and an isolated vertex."""
    return make_diagram(
        ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'Z'],
        [('A', 'B'), ('B', 'C'), ('C', 'A'), ('C', 'D'), ('D', 'E'),
         ('E', 'F'), ('F', 'D'), ('B', 'G'), ('G', 'E'), ('A', 'B')]
    )
