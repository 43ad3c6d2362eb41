"""Edges and triangular faces of the boundary of the 4-simplex.

Vertices are labelled 1..5. Edges are pairs (a, b) with a < b and faces are
triples (a, b, c) with a < b < c. The enumeration order is fixed: block
offsets in the intersection matrices are addressed by position in these
sequences, not by the label values.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple, Union

Pair = Tuple[int, int]
Triple = Tuple[int, int, int]

LABELS: Tuple[int, ...] = (1, 2, 3, 4, 5)

EDGE_POINTS = 4  # interior lattice points per edge
FACE_POINTS = 6  # interior lattice points per triangular face

N_EDGE_CLASSES = 10 * EDGE_POINTS
N_FACE_CLASSES = 10 * FACE_POINTS
N_VERTEX_CLASSES = len(LABELS)


@lru_cache(maxsize=None)
def pairs() -> Tuple[Pair, ...]:
    """The 10 edges, ordered by upper endpoint then lower endpoint."""
    return tuple((a, b) for b in LABELS for a in LABELS if a < b)


@lru_cache(maxsize=None)
def triples() -> Tuple[Triple, ...]:
    """The 10 triangular faces, ordered by c, then b, then a."""
    return tuple(
        (a, b, c)
        for c in LABELS
        for b in LABELS
        for a in LABELS
        if a < b < c
    )


@lru_cache(maxsize=None)
def _position_table() -> Dict[tuple, int]:
    table: Dict[tuple, int] = {}
    for i, p in enumerate(pairs()):
        table[p] = i
    for i, t in enumerate(triples()):
        table[t] = i
    return table


def index_of(obj: Union[Pair, Triple]) -> int:
    """0-based position of an edge or face in its canonical enumeration."""
    key = tuple(obj)
    pos = _position_table().get(key)
    if pos is None:
        raise ValueError(f"{obj!r} is not an edge or face of the boundary simplex")
    return pos


def pair_in_triple(pair: Pair, triple: Triple) -> bool:
    """True iff the edge lies on the boundary of the face."""
    return set(pair) <= set(triple)


def missing_position(pair: Pair, triple: Triple) -> int:
    """Position (0, 1 or 2) in *triple* of the one label absent from *pair*."""
    if len(set(pair)) != 2 or not pair_in_triple(pair, triple):
        raise ValueError(f"edge {pair!r} is not contained in face {triple!r}")
    (missing,) = set(triple) - set(pair)
    return triple.index(missing)


def boundary_pairs(triple: Triple) -> Tuple[Pair, Pair, Pair]:
    """Edges of a face (i, j, k) as ((j, k), (i, k), (i, j)).

    Entry s is the edge opposite position s of the triple.
    """
    i, j, k = triple
    return (j, k), (i, k), (i, j)
