"""Tests for quintictools.report module."""
import pytest

from quintictools.intersection.rank import RankComparison
from quintictools.intersection.verify import CheckResult
from quintictools.report import Report, build_report, format_report, print_report


@pytest.fixture(scope="module")
def report():
    return build_report(cross_check=False)


def test_report_all_passed(report):
    assert report.all_passed
    assert report.ranks.cross_checked is None
    assert report.ranks.rank_square == report.ranks.rank_square_101 == 73
    assert isinstance(report.checks, tuple)


def test_format_report_lines(report):
    lines = format_report(report)
    assert len(lines) == len(report.checks) + 3
    for line in lines[: len(report.checks)]:
        assert line.endswith(": true")
    assert lines[-3] == "Rank of Square: 73"
    assert lines[-2] == f"Rank of Square_101: {report.ranks.rank_square_101}"
    assert lines[-1] == "Matrices Square and Square_101 have equal rank: true"


def test_format_report_failing_check():
    r = Report(
        checks=(CheckResult("X", "something holds", False),),
        ranks=RankComparison(rank_square=3, rank_square_101=4, cross_checked=False),
    )
    assert not r.all_passed
    assert format_report(r) == [
        "X: false",
        "Rank of Square: 3",
        "Rank of Square_101: 4",
        "Ranks confirmed by sympy: false",
        "Matrices Square and Square_101 have equal rank: false",
    ]
    assert format_report(r, verbose=True)[0] == "X: something holds: false"


def test_print_report(report, capsys):
    print_report(report)
    out = capsys.readouterr().out
    assert "Square: true" in out
    assert f"Rank of Square_101: {report.ranks.rank_square_101}" in out


def test_all_passed_requires_expected_rank():
    r = Report(
        checks=(CheckResult("X", "something holds", True),),
        ranks=RankComparison(rank_square=101, rank_square_101=101),
    )
    assert r.ranks.equal
    assert not r.all_passed
