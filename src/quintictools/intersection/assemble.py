"""Assembly of the intersection matrices Square (105x105) and Square_101.

Rows and columns of Square are ordered

    E^l_{i,j}    0..39    (edge e occupies 4e .. 4e+3)
    E^l_{i,j,k}  40..99   (face f occupies 40+6f .. 40+6f+5)
    L_a          100..104

and Square is composed from six regions

    A  B^t C^t
    B  D   E^t
    C  E   F

where the entry (X, Y) is X^2 . Y mod 2 for the classes X (column) and Y (row).
Each region is built independently and composed once by ``assemble_square``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from quintictools.gf2.matrix import GF2Matrix, block_matrix
from quintictools.simplex.faces import (
    EDGE_POINTS,
    FACE_POINTS,
    N_EDGE_CLASSES,
    N_FACE_CLASSES,
    N_VERTEX_CLASSES,
    boundary_pairs,
    index_of,
    missing_position,
    pair_in_triple,
    pairs,
    triples,
)
from .blocks import (
    CORNER_LINKS,
    FACE_BLOCK,
    FACE_COUPLING_BLOCKS,
    IDENTITY_BLOCK,
    VERTEX_BLOCK,
    vertex_to_edge_block,
)

EDGE_OFFSET = 0
FACE_OFFSET = N_EDGE_CLASSES
VERTEX_OFFSET = N_EDGE_CLASSES + N_FACE_CLASSES
SQUARE_SIZE = VERTEX_OFFSET + N_VERTEX_CLASSES
EXCEPTIONAL_SIZE = VERTEX_OFFSET  # E^l_{i,j} and E^l_{i,j,k}
H_INDEX = EXCEPTIONAL_SIZE  # position of H in Square_101

_SPANS = {
    "edge": (EDGE_OFFSET, N_EDGE_CLASSES),
    "face": (FACE_OFFSET, N_FACE_CLASSES),
    "vertex": (VERTEX_OFFSET, N_VERTEX_CLASSES),
}

_LAYOUT = (
    ("A", "edge", "edge"),
    ("Bt", "edge", "face"),
    ("Ct", "edge", "vertex"),
    ("B", "face", "edge"),
    ("D", "face", "face"),
    ("Et", "face", "vertex"),
    ("C", "vertex", "edge"),
    ("E", "vertex", "face"),
    ("F", "vertex", "vertex"),
)

# name -> (row offset, col offset, n_rows, n_cols) inside Square
REGIONS: Dict[str, Tuple[int, int, int, int]] = {
    name: (_SPANS[r][0], _SPANS[c][0], _SPANS[r][1], _SPANS[c][1])
    for name, r, c in _LAYOUT
}


def region(square: GF2Matrix, name: str) -> GF2Matrix:
    """Extract region *name* ("A".."F", "Bt", "Ct", "Et") from an assembled Square."""
    try:
        r0, c0, n_rows, n_cols = REGIONS[name]
    except KeyError:
        raise ValueError(f"unknown region {name!r}; expected one of {sorted(REGIONS)}") from None
    return square.submatrix(r0, c0, n_rows, n_cols)


def submatrix_a() -> GF2Matrix:
    """(E^{l'}_{i',j'})^2 . E^l_{i,j}, 40x40."""
    A = GF2Matrix.zeros(N_EDGE_CLASSES, N_EDGE_CLASSES)
    for e in range(len(pairs())):
        A = A.with_block(VERTEX_BLOCK, EDGE_POINTS * e, EDGE_POINTS * e)

    links = []
    for t in triples():
        edge_idx = [index_of(p) for p in boundary_pairs(t)]
        for (s, l), (s2, l2) in CORNER_LINKS:
            i = EDGE_POINTS * edge_idx[s] + l - 1
            j = EDGE_POINTS * edge_idx[s2] + l2 - 1
            links.append((i, j))
            links.append((j, i))
    return A.with_entries(links)


def submatrix_b() -> GF2Matrix:
    """(E^{l'}_{i',j'})^2 . E^l_{i,j,k}, 60x40, tiled by 6x4 blocks."""
    B = GF2Matrix.zeros(N_FACE_CLASSES, N_EDGE_CLASSES)
    for f, t in enumerate(triples()):
        for e, p in enumerate(pairs()):
            if pair_in_triple(p, t):
                block = FACE_COUPLING_BLOCKS[missing_position(p, t)]
                B = B.with_block(block, FACE_POINTS * f, EDGE_POINTS * e)
    return B


def submatrix_c() -> GF2Matrix:
    """(E^{l'}_{i',j'})^2 . L_a, 5x40."""
    return vertex_to_edge_block()


def submatrix_d() -> GF2Matrix:
    """(E^{l'}_{i',j',k'})^2 . E^l_{i,j,k}, 60x60, block diagonal."""
    D = GF2Matrix.zeros(N_FACE_CLASSES, N_FACE_CLASSES)
    for f in range(len(triples())):
        D = D.with_block(FACE_BLOCK, FACE_POINTS * f, FACE_POINTS * f)
    return D


def submatrix_e() -> GF2Matrix:
    """(E^{l'}_{i',j',k'})^2 . L_a, 5x60, identically zero."""
    return GF2Matrix.zeros(N_VERTEX_CLASSES, N_FACE_CLASSES)


def submatrix_f() -> GF2Matrix:
    """L_j^2 . L_a, 5x5."""
    return IDENTITY_BLOCK


def assemble_square(
    A: Optional[GF2Matrix] = None,
    B: Optional[GF2Matrix] = None,
    C: Optional[GF2Matrix] = None,
    D: Optional[GF2Matrix] = None,
    E: Optional[GF2Matrix] = None,
    F: Optional[GF2Matrix] = None,
) -> GF2Matrix:
    """Compose Square from its six regions; missing regions are built here."""
    A = submatrix_a() if A is None else A
    B = submatrix_b() if B is None else B
    C = submatrix_c() if C is None else C
    D = submatrix_d() if D is None else D
    E = submatrix_e() if E is None else E
    F = submatrix_f() if F is None else F
    return block_matrix([
        [A, B.T, C.T],
        [B, D, E.T],
        [C, E, F],
    ])


def assemble_square_101(square: Optional[GF2Matrix] = None) -> GF2Matrix:
    """Square_101: the exceptional classes of Square plus the class H.

    H^3 = 1 mod 2 and H^2.D = D^2.H = 0 mod 2 for every exceptional D, so the
    only non-zero entry in the row and column of H is (H, H).
    """
    square = assemble_square() if square is None else square
    leading = square.submatrix(0, 0, EXCEPTIONAL_SIZE, EXCEPTIONAL_SIZE)
    return block_matrix([
        [leading, GF2Matrix.zeros(EXCEPTIONAL_SIZE, 1)],
        [GF2Matrix.zeros(1, EXCEPTIONAL_SIZE), GF2Matrix.identity(1)],
    ])


@dataclass(frozen=True)
class IntersectionMatrices:
    A: GF2Matrix
    B: GF2Matrix
    C: GF2Matrix
    D: GF2Matrix
    E: GF2Matrix
    F: GF2Matrix
    square: GF2Matrix
    square_101: GF2Matrix


def build_matrices() -> IntersectionMatrices:
    """Build every region once and compose Square and Square_101 from them."""
    A, B, C = submatrix_a(), submatrix_b(), submatrix_c()
    D, E, F = submatrix_d(), submatrix_e(), submatrix_f()
    square = assemble_square(A, B, C, D, E, F)
    return IntersectionMatrices(
        A=A, B=B, C=C, D=D, E=E, F=F,
        square=square,
        square_101=assemble_square_101(square),
    )
