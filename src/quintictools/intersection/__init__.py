from .blocks import (
    VERTEX_BLOCK,
    FACE_COUPLING_BLOCKS,
    FACE_BLOCK,
    IDENTITY_BLOCK,
    CORNER_LINKS,
    vertex_to_edge_block,
)
from .assemble import (
    REGIONS,
    SQUARE_SIZE,
    EXCEPTIONAL_SIZE,
    H_INDEX,
    IntersectionMatrices,
    region,
    submatrix_a,
    submatrix_b,
    submatrix_c,
    submatrix_d,
    submatrix_e,
    submatrix_f,
    assemble_square,
    assemble_square_101,
    build_matrices,
)
from .verify import CheckResult, check_symmetric, verify_all
from .rank import RankComparison, compare_ranks

__all__ = [
    "VERTEX_BLOCK",
    "FACE_COUPLING_BLOCKS",
    "FACE_BLOCK",
    "IDENTITY_BLOCK",
    "CORNER_LINKS",
    "vertex_to_edge_block",
    "REGIONS",
    "SQUARE_SIZE",
    "EXCEPTIONAL_SIZE",
    "H_INDEX",
    "IntersectionMatrices",
    "region",
    "submatrix_a",
    "submatrix_b",
    "submatrix_c",
    "submatrix_d",
    "submatrix_e",
    "submatrix_f",
    "assemble_square",
    "assemble_square_101",
    "build_matrices",
    "CheckResult",
    "check_symmetric",
    "verify_all",
    "RankComparison",
    "compare_ranks",
]
