from .matrix import GF2Matrix, block_matrix
from .linalg import row_reduce_gf2, gf2_rank, sympy_gf2_rank

__all__ = [
    "GF2Matrix",
    "block_matrix",
    "row_reduce_gf2",
    "gf2_rank",
    "sympy_gf2_rank",
]
