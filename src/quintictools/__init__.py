"""
quintictools: GF(2) triple intersection matrices of the mirror quintic, built
from the boundary of the 4-simplex, with structural checks and rank comparison.
"""

# Boundary simplex
from .simplex.faces import (
    LABELS,
    pairs,
    triples,
    index_of,
    pair_in_triple,
    missing_position,
    boundary_pairs,
)
from .simplex.lattice import face_lattice_graph

# GF(2) linear algebra
from .gf2.matrix import GF2Matrix, block_matrix
from .gf2.linalg import row_reduce_gf2, gf2_rank, sympy_gf2_rank

# Intersection matrices
from .intersection.assemble import (
    IntersectionMatrices,
    assemble_square,
    assemble_square_101,
    build_matrices,
    region,
)
from .intersection.verify import CheckResult, verify_all
from .intersection.rank import RankComparison, compare_ranks

# Report
from .report import Report, build_report, format_report, print_report

# Viz
from .viz.draw import draw_face_lattice, draw_matrix_pattern

__all__ = [
    # Simplex
    "LABELS",
    "pairs",
    "triples",
    "index_of",
    "pair_in_triple",
    "missing_position",
    "boundary_pairs",
    "face_lattice_graph",
    # GF(2)
    "GF2Matrix",
    "block_matrix",
    "row_reduce_gf2",
    "gf2_rank",
    "sympy_gf2_rank",
    # Intersection
    "IntersectionMatrices",
    "assemble_square",
    "assemble_square_101",
    "build_matrices",
    "region",
    "CheckResult",
    "verify_all",
    "RankComparison",
    "compare_ranks",
    # Report
    "Report",
    "build_report",
    "format_report",
    "print_report",
    # Viz
    "draw_face_lattice",
    "draw_matrix_pattern",
]
