from .faces import (
    LABELS,
    EDGE_POINTS,
    FACE_POINTS,
    N_EDGE_CLASSES,
    N_FACE_CLASSES,
    N_VERTEX_CLASSES,
    Pair,
    Triple,
    pairs,
    triples,
    index_of,
    pair_in_triple,
    missing_position,
    boundary_pairs,
)
from .lattice import (
    DEGREE,
    INTERIOR_POINTS,
    edge_point,
    face_lattice_graph,
    interior_adjacency,
    coupling_pattern,
    corner_links,
)

__all__ = [
    "LABELS",
    "EDGE_POINTS",
    "FACE_POINTS",
    "N_EDGE_CLASSES",
    "N_FACE_CLASSES",
    "N_VERTEX_CLASSES",
    "Pair",
    "Triple",
    "pairs",
    "triples",
    "index_of",
    "pair_in_triple",
    "missing_position",
    "boundary_pairs",
    "DEGREE",
    "INTERIOR_POINTS",
    "edge_point",
    "face_lattice_graph",
    "interior_adjacency",
    "coupling_pattern",
    "corner_links",
]
