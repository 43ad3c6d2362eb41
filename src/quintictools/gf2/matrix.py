"""Immutable dense matrices over GF(2).

Each row is stored as an int bitset: bit j of ``rows[i]`` is the entry (i, j).
Addition is XOR and multiplication is AND, so no mod-2 reduction is ever
needed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .linalg import row_reduce_gf2


def _popcount(x: int) -> int:
    return bin(x).count("1")


@dataclass(frozen=True)
class GF2Matrix:
    n_rows: int
    n_cols: int
    rows: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.rows) != self.n_rows:
            raise ValueError(f"expected {self.n_rows} rows, got {len(self.rows)}")
        limit = 1 << self.n_cols
        for r in self.rows:
            if r < 0 or r >= limit:
                raise ValueError(f"row bitset {r:#x} does not fit in {self.n_cols} columns")

    # --- constructors ---

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int) -> "GF2Matrix":
        return cls(n_rows, n_cols, (0,) * n_rows)

    @classmethod
    def identity(cls, n: int) -> "GF2Matrix":
        return cls(n, n, tuple(1 << i for i in range(n)))

    @classmethod
    def from_rows(cls, M: Sequence[Sequence[int]]) -> "GF2Matrix":
        """Build from a list of 0/1 rows (entries are reduced mod 2)."""
        n_rows = len(M)
        n_cols = len(M[0]) if n_rows else 0
        rows = []
        for i, row in enumerate(M):
            if len(row) != n_cols:
                raise ValueError(f"row {i} has length {len(row)}, expected {n_cols}")
            bits = 0
            for j, x in enumerate(row):
                if x % 2:
                    bits |= 1 << j
            rows.append(bits)
        return cls(n_rows, n_cols, tuple(rows))

    # --- access ---

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n_rows, self.n_cols)

    def __getitem__(self, ij: Tuple[int, int]) -> int:
        i, j = ij
        if not (0 <= i < self.n_rows and 0 <= j < self.n_cols):
            raise IndexError(f"entry ({i}, {j}) out of range for shape {self.shape}")
        return (self.rows[i] >> j) & 1

    def to_lists(self) -> List[List[int]]:
        return [[(r >> j) & 1 for j in range(self.n_cols)] for r in self.rows]

    def submatrix(self, r0: int, c0: int, n_rows: int, n_cols: int) -> "GF2Matrix":
        """The n_rows x n_cols block with top-left corner (r0, c0)."""
        if r0 < 0 or c0 < 0 or r0 + n_rows > self.n_rows or c0 + n_cols > self.n_cols:
            raise ValueError(
                f"block {n_rows}x{n_cols} at ({r0}, {c0}) exceeds shape {self.shape}"
            )
        mask = (1 << n_cols) - 1
        return GF2Matrix(
            n_rows,
            n_cols,
            tuple((r >> c0) & mask for r in self.rows[r0 : r0 + n_rows]),
        )

    # --- derived matrices ---

    def transpose(self) -> "GF2Matrix":
        cols = [0] * self.n_cols
        for i, r in enumerate(self.rows):
            while r:
                lsb = r & -r
                j = lsb.bit_length() - 1
                r ^= lsb
                cols[j] |= 1 << i
        return GF2Matrix(self.n_cols, self.n_rows, tuple(cols))

    @property
    def T(self) -> "GF2Matrix":
        return self.transpose()

    def with_block(self, block: "GF2Matrix", r0: int, c0: int) -> "GF2Matrix":
        """Copy of self with *block* written over the region at (r0, c0)."""
        if r0 < 0 or c0 < 0 or r0 + block.n_rows > self.n_rows or c0 + block.n_cols > self.n_cols:
            raise ValueError(
                f"block of shape {block.shape} at ({r0}, {c0}) exceeds shape {self.shape}"
            )
        mask = ((1 << block.n_cols) - 1) << c0
        rows = list(self.rows)
        for k, br in enumerate(block.rows):
            i = r0 + k
            rows[i] = (rows[i] & ~mask) | (br << c0)
        return GF2Matrix(self.n_rows, self.n_cols, tuple(rows))

    def with_entries(self, entries: Iterable[Tuple[int, int]]) -> "GF2Matrix":
        """Copy of self with each listed (i, j) set to 1."""
        rows = list(self.rows)
        for i, j in entries:
            if not (0 <= i < self.n_rows and 0 <= j < self.n_cols):
                raise ValueError(f"entry ({i}, {j}) out of range for shape {self.shape}")
            rows[i] |= 1 << j
        return GF2Matrix(self.n_rows, self.n_cols, tuple(rows))

    def __add__(self, other: "GF2Matrix") -> "GF2Matrix":
        if self.shape != other.shape:
            raise ValueError(f"cannot add shapes {self.shape} and {other.shape}")
        return GF2Matrix(
            self.n_rows, self.n_cols, tuple(a ^ b for a, b in zip(self.rows, other.rows))
        )

    def __matmul__(self, other: "GF2Matrix") -> "GF2Matrix":
        if self.n_cols != other.n_rows:
            raise ValueError(f"cannot multiply shapes {self.shape} and {other.shape}")
        out = []
        for r in self.rows:
            acc = 0
            while r:
                lsb = r & -r
                k = lsb.bit_length() - 1
                r ^= lsb
                acc ^= other.rows[k]
            out.append(acc)
        return GF2Matrix(self.n_rows, other.n_cols, tuple(out))

    # --- predicates and counts ---

    def is_zero(self) -> bool:
        return not any(self.rows)

    def is_symmetric(self) -> bool:
        return self.n_rows == self.n_cols and self.transpose().rows == self.rows

    def row_weights(self) -> List[int]:
        """Number of non-zero entries in each row."""
        return [_popcount(r) for r in self.rows]

    def col_weights(self) -> List[int]:
        """Number of non-zero entries in each column."""
        return self.transpose().row_weights()

    def rank(self) -> int:
        _, _, rank = row_reduce_gf2(self.rows, self.n_cols)
        return rank


def block_matrix(grid: Sequence[Sequence[GF2Matrix]]) -> GF2Matrix:
    """Compose a grid of blocks into one matrix.

    Blocks in a grid row must share a height and blocks in a grid column must
    share a width.
    """
    if not grid or not grid[0]:
        raise ValueError("empty block grid")
    widths = [b.n_cols for b in grid[0]]
    rows: List[int] = []
    for gi, grid_row in enumerate(grid):
        if [b.n_cols for b in grid_row] != widths:
            raise ValueError(f"block row {gi} has widths {[b.n_cols for b in grid_row]}, expected {widths}")
        height = grid_row[0].n_rows
        if any(b.n_rows != height for b in grid_row):
            raise ValueError(f"block row {gi} mixes heights {[b.n_rows for b in grid_row]}")
        for k in range(height):
            bits = 0
            shift = 0
            for b in grid_row:
                bits |= b.rows[k] << shift
                shift += b.n_cols
            rows.append(bits)
    return GF2Matrix(len(rows), sum(widths), tuple(rows))
