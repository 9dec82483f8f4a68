"""
Unit tests for EdgesGraph and the Edge record.
"""

from dataclasses import FrozenInstanceError

import pytest

from graph import InvalidArgumentError
from edges_graph import Edge, EdgesGraph


def test_insert_node():
    g = EdgesGraph()
    assert g.add("X")
    assert not g.add("X")
    assert "X" in g.vertices()


def test_incoming_and_outgoing_edges():
    g = EdgesGraph()
    g.add("X")
    g.add("Y")
    g.set("X", "Y", 7)

    assert g.sources("Y") == {"X": 7}
    assert g.targets("X") == {"Y": 7}


def test_targets_returns_fresh_dict():
    g = EdgesGraph()
    g.set("X", "Y", 7)

    out = g.targets("X")
    out.clear()

    assert g.targets("X") == {"Y": 7}
    assert g.targets("X") is not g.targets("X")


def test_string_representation():
    g = EdgesGraph()
    g.add("X")
    g.add("Y")
    g.set("X", "Y", 6)

    assert str(g) == "Vertices: [X, Y]\nEdges:\nX -> Y (6)\n"


def test_string_representation_empty():
    assert str(EdgesGraph()) == "Vertices: []\nEdges:\n"


def test_string_keeps_storage_order():
    g = EdgesGraph()
    g.set("A", "B", 1)
    g.set("B", "C", 2)
    # overwriting moves the edge to the end of the list
    g.set("A", "B", 3)

    assert str(g) == "Vertices: [A, B, C]\nEdges:\nB -> C (2)\nA -> B (3)\n"


def test_remove_drops_edges_touching_vertex():
    g = EdgesGraph()
    g.set("A", "B", 1)
    g.set("B", "C", 2)
    g.set("A", "C", 3)

    g.remove("B")

    assert str(g) == "Vertices: [A, C]\nEdges:\nA -> C (3)\n"


def test_edge_attributes():
    edge = Edge("X", "Y", 6)
    assert edge.source == "X"
    assert edge.target == "Y"
    assert edge.weight == 6


def test_edge_string_output():
    assert str(Edge("X", "Y", 6)) == "X -> Y (6)"


def test_edge_is_immutable():
    edge = Edge("X", "Y", 6)
    with pytest.raises(FrozenInstanceError):
        edge.weight = 7


def test_edge_equality_and_hash():
    assert Edge("X", "Y", 6) == Edge("X", "Y", 6)
    assert len({Edge("X", "Y", 6), Edge("X", "Y", 6)}) == 1


def test_edge_with_negative_weight():
    with pytest.raises(InvalidArgumentError):
        Edge("X", "Y", -1)


def test_edge_with_none_source():
    with pytest.raises(InvalidArgumentError):
        Edge(None, "Y", 6)


def test_edge_with_none_target():
    with pytest.raises(InvalidArgumentError):
        Edge("X", None, 6)


def test_edge_with_float_weight():
    with pytest.raises(TypeError):
        Edge("X", "Y", 2.5)


def test_broken_invariant_is_caught():
    g = EdgesGraph()
    g.set("X", "Y", 1)
    g._edges.append(Edge("X", "Y", 2))

    with pytest.raises(AssertionError, match="duplicate edge"):
        g._check_rep()
