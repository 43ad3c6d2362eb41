from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from quintictools.gf2.linalg import sympy_gf2_rank
from quintictools.gf2.matrix import GF2Matrix

# Rank over GF(2) of both Square and Square_101 (Arguz-Prince, arXiv:1908.06685).
EXPECTED_RANK = 73


@dataclass(frozen=True)
class RankComparison:
    """
    GF(2) ranks of Square and Square_101.

    cross_checked: True if both ranks agree with sympy's DomainMatrix rank,
                   False if either disagrees, None if the cross-check was skipped.
    """

    rank_square: int
    rank_square_101: int
    cross_checked: Optional[bool] = None

    @property
    def equal(self) -> bool:
        return self.rank_square == self.rank_square_101

    @property
    def matches_expected(self) -> bool:
        return self.rank_square == self.rank_square_101 == EXPECTED_RANK


def compare_ranks(
    square: GF2Matrix,
    square_101: GF2Matrix,
    *,
    cross_check: bool = True,
) -> RankComparison:
    """Compute both ranks by bitset elimination, optionally confirming with sympy."""
    r = square.rank()
    r101 = square_101.rank()
    agreed: Optional[bool] = None
    if cross_check:
        agreed = (
            sympy_gf2_rank(square.to_lists()) == r
            and sympy_gf2_rank(square_101.to_lists()) == r101
        )
    return RankComparison(rank_square=r, rank_square_101=r101, cross_checked=agreed)
