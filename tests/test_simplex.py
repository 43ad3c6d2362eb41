"""Tests for quintictools.simplex module."""
import networkx as nx
import pytest

from quintictools.simplex.faces import (
    pairs,
    triples,
    index_of,
    pair_in_triple,
    missing_position,
    boundary_pairs,
)
from quintictools.simplex.lattice import (
    _check_point_count,
    DEGREE,
    edge_point,
    face_lattice_graph,
    interior_adjacency,
    coupling_pattern,
    corner_links,
)


# --- enumeration ---

def test_pairs_order():
    assert pairs() == (
        (1, 2), (1, 3), (2, 3), (1, 4), (2, 4),
        (3, 4), (1, 5), (2, 5), (3, 5), (4, 5),
    )


def test_triples_order():
    assert triples() == (
        (1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4), (1, 2, 5),
        (1, 3, 5), (2, 3, 5), (1, 4, 5), (2, 4, 5), (3, 4, 5),
    )


def test_index_of_pairs_and_triples():
    assert index_of((1, 2)) == 0
    assert index_of((2, 3)) == 2
    assert index_of((4, 5)) == 9
    assert index_of((1, 2, 3)) == 0
    assert index_of([3, 4, 5]) == 9
    for i, p in enumerate(pairs()):
        assert index_of(p) == i
    for i, t in enumerate(triples()):
        assert index_of(t) == i


def test_index_of_unknown():
    with pytest.raises(ValueError):
        index_of((2, 1))
    with pytest.raises(ValueError):
        index_of((1, 2, 6))


# --- adjacency ---

def test_pair_in_triple():
    assert pair_in_triple((1, 3), (1, 3, 4)) is True
    assert pair_in_triple((2, 5), (1, 3, 4)) is False


def test_each_edge_in_three_faces():
    for p in pairs():
        assert sum(pair_in_triple(p, t) for t in triples()) == 3


def test_missing_position():
    assert missing_position((3, 4), (1, 3, 4)) == 0
    assert missing_position((1, 4), (1, 3, 4)) == 1
    assert missing_position((1, 3), (1, 3, 4)) == 2


def test_missing_position_not_contained():
    with pytest.raises(ValueError):
        missing_position((2, 5), (1, 3, 4))


def test_missing_position_repeated_label():
    with pytest.raises(ValueError, match="not contained"):
        missing_position((1, 1), (1, 3, 4))


def test_boundary_pairs_opposite_positions():
    assert boundary_pairs((1, 3, 4)) == ((3, 4), (1, 4), (1, 3))
    for t in triples():
        for s, p in enumerate(boundary_pairs(t)):
            assert missing_position(p, t) == s


# --- face lattice ---

def test_face_lattice_size():
    G = face_lattice_graph()
    assert G.number_of_nodes() == (DEGREE + 1) * (DEGREE + 2) // 2  # 21
    # Triangular grid of side n has 3n(n+1)/2 segments
    assert G.number_of_edges() == 3 * DEGREE * (DEGREE + 1) // 2  # 45
    exterior = [e for e in G.edges(data="exterior") if e[2]]
    assert len(exterior) == 3 * DEGREE


def test_face_lattice_kinds():
    G = face_lattice_graph()
    kinds = [k for _, k in G.nodes(data="kind")]
    assert kinds.count("vertex") == 3
    assert kinds.count("edge") == 12
    assert kinds.count("interior") == 6


def test_vertex_has_only_edge_neighbors():
    G = face_lattice_graph()
    assert sorted(G.neighbors((5, 0, 0))) == [(4, 0, 1), (4, 1, 0)]


def test_edge_point_coordinates():
    assert edge_point(2, 1) == (4, 1, 0)  # (i, j), near i
    assert edge_point(1, 1) == (4, 0, 1)  # (i, k), near i
    assert edge_point(0, 1) == (0, 4, 1)  # (j, k), near j
    assert edge_point(0, 4) == (0, 1, 4)


def test_edge_point_out_of_range():
    with pytest.raises(ValueError):
        edge_point(3, 1)
    with pytest.raises(ValueError):
        edge_point(0, 5)


def test_interior_adjacency():
    assert interior_adjacency() == [
        [0, 1, 1, 0, 0, 0],
        [1, 0, 1, 1, 1, 0],
        [1, 1, 0, 0, 1, 1],
        [0, 1, 0, 0, 1, 0],
        [0, 1, 1, 1, 0, 1],
        [0, 0, 1, 0, 1, 0],
    ]


def test_coupling_pattern_side_jk():
    # Points 1..4 of (j, k) touch interior points {4}, {4,5}, {5,6}, {6}
    assert coupling_pattern(0) == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 1, 1],
    ]


def test_corner_links():
    assert corner_links() == {
        frozenset({(1, 1), (2, 1)}),
        frozenset({(0, 1), (2, 4)}),
        frozenset({(0, 4), (1, 4)}),
    }


def test_point_count_check_rejects_incomplete_lattice():
    G = nx.Graph()
    G.add_nodes_from([(5, 0, 0), (0, 5, 0), (0, 0, 5)])
    with pytest.raises(RuntimeError, match="expected 21"):
        _check_point_count(G)
    _check_point_count(face_lattice_graph())
