"""Local intersection patterns mod 2 for the mirror quintic.

The divisor classes are
  E^l_{i,j}    l = 1..4, one per interior lattice point of an edge,
  E^l_{i,j,k}  l = 1..6, one per interior lattice point of a face,
  L_i          one per vertex,
indexed as in quintictools.simplex.lattice. The constants below are read from
the figure of a triangulated face in Gross, "Topological Mirror Symmetry",
Prop. 4.2 and Fig. 4.6, with edge points along (i, k) ordered from i to k.
"""
from __future__ import annotations

from typing import Tuple

from quintictools.gf2.matrix import GF2Matrix
from quintictools.simplex.faces import EDGE_POINTS, LABELS, N_EDGE_CLASSES, pairs

# (E^l_{i,j})^3 = 1, plus the coupling of E^2_{i,j} and E^3_{i,j}.
VERTEX_BLOCK = GF2Matrix.from_rows([
    [1, 0, 0, 0],
    [0, 1, 1, 0],
    [0, 1, 1, 0],
    [0, 0, 0, 1],
])

# (E^{l'}_{edge})^2 . E^l_{i,j,k}, rows l = 1..6 of the face, columns l' = 1..4
# of the edge. Entry s is used for the edge opposite position s of the face:
# edge (j, k) touches face points {4}, {4,5}, {5,6}, {6}.
FACE_COUPLING_BLOCKS: Tuple[GF2Matrix, GF2Matrix, GF2Matrix] = (
    GF2Matrix.from_rows([
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 1, 1],
    ]),
    GF2Matrix.from_rows([
        [1, 1, 0, 0],
        [0, 0, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 1, 1],
    ]),
    GF2Matrix.from_rows([
        [1, 1, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 0, 0],
        [0, 0, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]),
)

# Intersections among the six interior points of one face.
FACE_BLOCK = GF2Matrix.from_rows([
    [0, 1, 1, 0, 0, 0],
    [1, 0, 1, 1, 1, 0],
    [1, 1, 0, 0, 1, 1],
    [0, 1, 0, 0, 1, 0],
    [0, 1, 1, 1, 0, 1],
    [0, 0, 1, 0, 1, 0],
])

# L_i^3 = 1 and L_i^2 L_j = 0 for i != j.
IDENTITY_BLOCK = GF2Matrix.identity(len(LABELS))

# Edge points of two different sides of a face (i, j, k) that meet across a
# corner, as ((side, l), (side', l')); side s is the edge opposite position s.
#   E^1_{i,k} ~ E^1_{i,j},  E^1_{j,k} ~ E^4_{i,j},  E^4_{j,k} ~ E^4_{i,k}
CORNER_LINKS: Tuple[Tuple[Tuple[int, int], Tuple[int, int]], ...] = (
    ((1, 1), (2, 1)),
    ((0, 1), (2, 4)),
    ((0, 4), (1, 4)),
)


def vertex_to_edge_block() -> GF2Matrix:
    """5x40 block of L_a^2 . E^l_{i,j}.

    L_i^2.E^1_{i,j} = 1 for the lower endpoint i, and L_j^2.E^4_{i,j} = 1 for
    the upper endpoint j (E^4_{i,j} is E^1_{j,i} in Gross's convention).
    """
    entries = []
    for row, v in enumerate(LABELS):
        for e, (a, b) in enumerate(pairs()):
            if v == a:
                entries.append((row, EDGE_POINTS * e))
            if v == b:
                entries.append((row, EDGE_POINTS * e + EDGE_POINTS - 1))
    return GF2Matrix.zeros(len(LABELS), N_EDGE_CLASSES).with_entries(entries)
