"""Structural checks on the assembled intersection matrices.

The expected row and column counts follow from the intersection theory and
catch transcription errors in the hand-entered blocks. Every check returns a
CheckResult; none raises, so a failed check never stops the ones after it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from quintictools.gf2.matrix import GF2Matrix
from quintictools.simplex.faces import FACE_POINTS, N_VERTEX_CLASSES
from quintictools.simplex.lattice import corner_links, coupling_pattern, interior_adjacency
from .assemble import EXCEPTIONAL_SIZE, H_INDEX, IntersectionMatrices, region
from .blocks import CORNER_LINKS, FACE_BLOCK, FACE_COUPLING_BLOCKS


@dataclass(frozen=True)
class CheckResult:
    name: str
    description: str
    passed: bool


def _chunked(weights: Sequence[int], size: int) -> List[List[int]]:
    return [list(weights[i : i + size]) for i in range(0, len(weights), size)]


def _pattern_holds(weights: Sequence[int], pattern: Sequence[int]) -> bool:
    """True iff *weights* is *pattern* repeated block by block."""
    size = len(pattern)
    if len(weights) % size:
        return False
    return _chunked(weights, size) == [list(pattern)] * (len(weights) // size)


def check_symmetric(M: GF2Matrix, name: str) -> CheckResult:
    return CheckResult(name, f"{name} is symmetric", M.is_symmetric())


# --- submatrix checks ---

def check_a(square: GF2Matrix) -> List[CheckResult]:
    """Rows E^l_{i,j} have 4 non-zero entries if l is 1 or 4, otherwise 2."""
    A = region(square, "A")
    return [
        CheckResult("A.symmetric", "submatrix A is symmetric", A.is_symmetric()),
        CheckResult(
            "A.rows",
            "rows E^l_{i,j} have [4,2,2,4] non-zero entries",
            _pattern_holds(A.row_weights(), [4, 2, 2, 4]),
        ),
    ]


def check_b(square: GF2Matrix) -> List[CheckResult]:
    """Rows E^l_{i,j,k}: 4 entries for l in {1,4,6}, else 2.
    Columns E^l_{i,j}: 6 entries for l in {2,3}, else 3.
    """
    B = region(square, "B")
    return [
        CheckResult(
            "B.rows",
            "rows E^l_{i,j,k} have [4,2,2,4,2,4] non-zero entries",
            _pattern_holds(B.row_weights(), [4, 2, 2, 4, 2, 4]),
        ),
        CheckResult(
            "B.cols",
            "columns E^l_{i,j} have [3,6,6,3] non-zero entries",
            _pattern_holds(B.col_weights(), [3, 6, 6, 3]),
        ),
        CheckResult(
            "B.transpose",
            "region B^t equals the transpose of B",
            region(square, "Bt") == B.T,
        ),
    ]


def check_c(square: GF2Matrix) -> List[CheckResult]:
    """Each row L_a has 4 entries; column E^l_{i,j} is non-zero iff l is 1 or 4."""
    C = region(square, "C")
    return [
        CheckResult(
            "C.rows",
            "each row L_a has exactly 4 non-zero entries",
            C.row_weights() == [4] * N_VERTEX_CLASSES,
        ),
        CheckResult(
            "C.cols",
            "columns E^l_{i,j} have [1,0,0,1] non-zero entries",
            _pattern_holds(C.col_weights(), [1, 0, 0, 1]),
        ),
        CheckResult(
            "C.transpose",
            "region C^t equals the transpose of C",
            region(square, "Ct") == C.T,
        ),
    ]


def check_d(square: GF2Matrix) -> List[CheckResult]:
    """Columns E^l_{i,j,k} have 2 entries if l is 1, 4 or 6, otherwise 4."""
    D = region(square, "D")
    diag = [
        D.submatrix(FACE_POINTS * f, FACE_POINTS * f, FACE_POINTS, FACE_POINTS)
        for f in range(D.n_rows // FACE_POINTS)
    ]
    in_block = sum(sum(b.row_weights()) for b in diag)
    return [
        CheckResult(
            "D.cols",
            "columns E^l_{i,j,k} have [2,4,4,2,4,2] non-zero entries",
            _pattern_holds(D.col_weights(), [2, 4, 4, 2, 4, 2]),
        ),
        CheckResult(
            "D.block_diagonal",
            "entries between different faces are zero",
            in_block == sum(D.row_weights()),
        ),
    ]


def check_e(square: GF2Matrix) -> List[CheckResult]:
    return [
        CheckResult(
            "E.zero",
            "blocks E and E^t contain only zero entries",
            region(square, "E").is_zero() and region(square, "Et").is_zero(),
        ),
    ]


def check_f(square: GF2Matrix) -> List[CheckResult]:
    return [
        CheckResult(
            "F.identity",
            "block F is the 5x5 identity",
            region(square, "F") == GF2Matrix.identity(N_VERTEX_CLASSES),
        ),
    ]


def check_square_101(square: GF2Matrix, square_101: GF2Matrix) -> List[CheckResult]:
    n = EXCEPTIONAL_SIZE
    h_row = square_101.submatrix(H_INDEX, 0, 1, n)
    h_col = square_101.submatrix(0, H_INDEX, n, 1)
    return [
        check_symmetric(square_101, "Square_101"),
        CheckResult(
            "Square_101.leading",
            "leading 100x100 block equals that of Square",
            square_101.submatrix(0, 0, n, n) == square.submatrix(0, 0, n, n),
        ),
        CheckResult(
            "Square_101.H",
            "H^3 = 1 and H^2.D = 0 for every exceptional D",
            square_101[H_INDEX, H_INDEX] == 1 and h_row.is_zero() and h_col.is_zero(),
        ),
    ]


# --- figure consistency ---

def check_figure() -> List[CheckResult]:
    """Compare the hand-entered blocks with the triangulated face graph."""
    coupling_ok = all(
        FACE_COUPLING_BLOCKS[s] == GF2Matrix.from_rows(coupling_pattern(s))
        for s in range(3)
    )
    links = {frozenset(link) for link in CORNER_LINKS}
    return [
        CheckResult(
            "figure.face_block",
            "face block matches the interior segments of the face",
            FACE_BLOCK == GF2Matrix.from_rows(interior_adjacency()),
        ),
        CheckResult(
            "figure.coupling",
            "face/edge coupling blocks match the face triangulation",
            coupling_ok,
        ),
        CheckResult(
            "figure.corner_links",
            "corner links match the non-exterior edge-to-edge segments",
            links == corner_links(),
        ),
    ]


def verify_all(matrices: IntersectionMatrices) -> List[CheckResult]:
    """Run every check, in the order the regions are assembled."""
    square = matrices.square
    results: List[CheckResult] = []
    results.extend(check_figure())
    results.extend(check_a(square))
    results.extend(check_b(square))
    results.extend(check_c(square))
    results.extend(check_d(square))
    results.extend(check_e(square))
    results.extend(check_f(square))
    results.append(check_symmetric(square, "Square"))
    results.extend(check_square_101(square, matrices.square_101))
    return results
