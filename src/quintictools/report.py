"""Diagnostic report for the mirror quintic intersection matrices.

Every check is run and both ranks are always computed, whatever the check
outcomes; the report only renders the values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from quintictools.intersection.assemble import IntersectionMatrices, build_matrices
from quintictools.intersection.rank import RankComparison, compare_ranks
from quintictools.intersection.verify import CheckResult, verify_all


@dataclass(frozen=True)
class Report:
    checks: Tuple[CheckResult, ...]
    ranks: RankComparison

    @property
    def all_passed(self) -> bool:
        return all(c.passed for c in self.checks) and self.ranks.matches_expected


def _bool(x: bool) -> str:
    return "true" if x else "false"


def build_report(
    matrices: Optional[IntersectionMatrices] = None,
    *,
    cross_check: bool = True,
) -> Report:
    matrices = build_matrices() if matrices is None else matrices
    checks = verify_all(matrices)
    ranks = compare_ranks(matrices.square, matrices.square_101, cross_check=cross_check)
    return Report(checks=tuple(checks), ranks=ranks)


def format_report(report: Report, verbose: bool = False) -> List[str]:
    """Render a report as lines: one per check, then the ranks."""
    lines: List[str] = []
    for c in report.checks:
        if verbose:
            lines.append(f"{c.name}: {c.description}: {_bool(c.passed)}")
        else:
            lines.append(f"{c.name}: {_bool(c.passed)}")
    lines.append(f"Rank of Square: {report.ranks.rank_square}")
    lines.append(f"Rank of Square_101: {report.ranks.rank_square_101}")
    if report.ranks.cross_checked is not None:
        lines.append(f"Ranks confirmed by sympy: {_bool(report.ranks.cross_checked)}")
    lines.append(f"Matrices Square and Square_101 have equal rank: {_bool(report.ranks.equal)}")
    return lines


def print_report(report: Report, verbose: bool = False) -> None:
    for line in format_report(report, verbose=verbose):
        print(line)
