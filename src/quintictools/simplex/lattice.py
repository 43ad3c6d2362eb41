"""Lattice points of a single triangular face of the boundary simplex.

A face (i, j, k) is the triangle of side DEGREE with lattice points in
barycentric coordinates (a, b, c), a + b + c = DEGREE, where (DEGREE, 0, 0)
is the vertex i, (0, DEGREE, 0) is j and (0, 0, DEGREE) is k. The standard
triangular grid joins two points whose difference is a permutation of
(1, -1, 0).

Numbering used by the intersection blocks:

  interior points, in rows starting at i:
      1
     2 3
    4 5 6

  edge points of side s (the side opposite position s of the face) are
  numbered 1..4 from the lower to the higher label of that side. For the
  side (i, k) this runs from i to k.
"""
from __future__ import annotations

from functools import lru_cache
from itertools import combinations
from typing import List, Set, Tuple

import networkx as nx

from quintictools.simplex.faces import EDGE_POINTS, FACE_POINTS

DEGREE = 5

Point = Tuple[int, int, int]
EdgePoint = Tuple[int, int]  # (side, l) with l in 1..EDGE_POINTS

INTERIOR_POINTS: Tuple[Point, ...] = (
    (3, 1, 1),
    (2, 2, 1),
    (2, 1, 2),
    (1, 3, 1),
    (1, 2, 2),
    (1, 1, 3),
)


def edge_point(side: int, l: int) -> Point:
    """Barycentric coordinates of point *l* on the side opposite position *side*."""
    if side not in (0, 1, 2):
        raise ValueError(f"side must be 0, 1 or 2, got {side}")
    if not 1 <= l <= EDGE_POINTS:
        raise ValueError(f"edge point index must be in 1..{EDGE_POINTS}, got {l}")
    if side == 0:  # (j, k)
        return (0, DEGREE - l, l)
    if side == 1:  # (i, k)
        return (DEGREE - l, 0, l)
    return (DEGREE - l, l, 0)  # (i, j)


def _is_step(p: Point, q: Point) -> bool:
    return sorted(x - y for x, y in zip(p, q)) == [-1, 0, 1]


def _same_side(p: Point, q: Point) -> bool:
    return any(x == 0 and y == 0 for x, y in zip(p, q))


def _check_point_count(G: nx.Graph) -> None:
    """Every lattice point of the triangle must carry a name."""
    n_points = (DEGREE + 1) * (DEGREE + 2) // 2
    if G.number_of_nodes() != n_points:
        raise RuntimeError(
            f"face lattice has {G.number_of_nodes()} named points, expected {n_points}"
        )


@lru_cache(maxsize=None)
def face_lattice_graph() -> nx.Graph:
    """Triangulated face as a graph.

    Node attributes: ``kind`` ("vertex", "edge", "interior") and ``label``
    (vertex position, (side, l), or interior index 1..6).
    Edge attribute: ``exterior`` is True for segments on the triangle boundary.
    """
    G = nx.Graph()
    for pos in range(3):
        v = [0, 0, 0]
        v[pos] = DEGREE
        G.add_node(tuple(v), kind="vertex", label=pos)
    for side in range(3):
        for l in range(1, EDGE_POINTS + 1):
            G.add_node(edge_point(side, l), kind="edge", label=(side, l))
    for idx, p in enumerate(INTERIOR_POINTS, start=1):
        G.add_node(p, kind="interior", label=idx)

    _check_point_count(G)

    for p, q in combinations(list(G.nodes), 2):
        if _is_step(p, q):
            G.add_edge(p, q, exterior=_same_side(p, q))
    return G


def interior_adjacency() -> List[List[int]]:
    """6x6 0/1 table: interior points joined by a segment of the grid."""
    G = face_lattice_graph()
    M = [[0] * FACE_POINTS for _ in range(FACE_POINTS)]
    for r, p in enumerate(INTERIOR_POINTS):
        for c, q in enumerate(INTERIOR_POINTS):
            if G.has_edge(p, q):
                M[r][c] = 1
    return M


def coupling_pattern(side: int) -> List[List[int]]:
    """6x4 0/1 table: interior point (row) joined to edge point (column) of *side*."""
    G = face_lattice_graph()
    M = [[0] * EDGE_POINTS for _ in range(FACE_POINTS)]
    for r, p in enumerate(INTERIOR_POINTS):
        for l in range(1, EDGE_POINTS + 1):
            if G.has_edge(p, edge_point(side, l)):
                M[r][l - 1] = 1
    return M


def corner_links() -> Set[frozenset]:
    """Non-exterior segments joining edge points on two different sides.

    Each link is a frozenset of two (side, l) labels.
    """
    G = face_lattice_graph()
    links: Set[frozenset] = set()
    for p, q, exterior in G.edges(data="exterior"):
        if exterior:
            continue
        if G.nodes[p]["kind"] == "edge" and G.nodes[q]["kind"] == "edge":
            links.add(frozenset((G.nodes[p]["label"], G.nodes[q]["label"])))
    return links
