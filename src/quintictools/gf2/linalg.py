from __future__ import annotations

from typing import Sequence


def _pack_rows(M: Sequence[Sequence[int]], n_rows: int, n_cols: int) -> list[int]:
    rows = []
    for i in range(n_rows):
        bits = 0
        for j in range(n_cols):
            if M[i][j] & 1:
                bits |= 1 << j
        rows.append(bits)
    return rows


def row_reduce_gf2(
    rows: Sequence[int],
    n_cols: int,
) -> tuple[list[int], list[int], int]:
    """Reduced row echelon form over GF(2).

    Rows are bitsets (bit j = column j). Addition is XOR, so every pivot is 1
    and no scaling step is needed.

    Returns (rref_rows, pivot_columns, rank).
    """
    R = list(rows)
    n_rows = len(R)
    pivot_cols: list[int] = []
    rp = 0

    for col in range(n_cols):
        if rp == n_rows:
            break
        bit = 1 << col

        # Find pivot
        piv = None
        for r in range(rp, n_rows):
            if R[r] & bit:
                piv = r
                break
        if piv is None:
            continue

        R[rp], R[piv] = R[piv], R[rp]
        pivot_cols.append(col)

        # Eliminate column in all other rows
        for r in range(n_rows):
            if r != rp and R[r] & bit:
                R[r] ^= R[rp]

        rp += 1

    return R, pivot_cols, len(pivot_cols)


def gf2_rank(
    M: Sequence[Sequence[int]],
    n_rows: int,
    n_cols: int,
) -> int:
    """Rank over GF(2) of a 0/1 (or integer, reduced mod 2) matrix."""
    _, _, rank = row_reduce_gf2(_pack_rows(M, n_rows, n_cols), n_cols)
    return rank


def sympy_gf2_rank(M: Sequence[Sequence[int]]) -> int:
    """Rank over GF(2) computed by sympy's DomainMatrix.

    Independent of :func:`row_reduce_gf2`; used to cross-check it.
    """
    from sympy import GF
    from sympy.polys.matrices import DomainMatrix

    K = GF(2)
    n_rows = len(M)
    n_cols = len(M[0]) if n_rows else 0
    if n_rows == 0 or n_cols == 0:
        return 0
    dM = DomainMatrix([[K(int(x) % 2) for x in row] for row in M], (n_rows, n_cols), K)
    return int(dM.rank())
