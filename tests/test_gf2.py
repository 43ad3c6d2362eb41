"""Tests for quintictools.gf2 module."""
import pytest

from quintictools.gf2.matrix import GF2Matrix, block_matrix
from quintictools.gf2.linalg import row_reduce_gf2, gf2_rank, sympy_gf2_rank


# --- construction and access ---

def test_from_rows_roundtrip():
    M = [[1, 0, 1], [0, 1, 1]]
    G = GF2Matrix.from_rows(M)
    assert G.shape == (2, 3)
    assert G.to_lists() == M
    assert G[0, 2] == 1
    assert G[1, 0] == 0


def test_from_rows_reduces_mod_2():
    assert GF2Matrix.from_rows([[2, 3]]).to_lists() == [[0, 1]]


def test_from_rows_ragged():
    with pytest.raises(ValueError):
        GF2Matrix.from_rows([[1, 0], [1]])


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        GF2Matrix.zeros(2, 2)[2, 0]


def test_identity_and_zeros():
    assert GF2Matrix.identity(3).to_lists() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert GF2Matrix.zeros(2, 3).is_zero()
    assert not GF2Matrix.identity(1).is_zero()


def test_transpose():
    G = GF2Matrix.from_rows([[1, 1, 0], [0, 0, 1]])
    assert G.T.to_lists() == [[1, 0], [1, 0], [0, 1]]
    assert G.T.T == G


# --- block operations ---

def test_submatrix():
    G = GF2Matrix.from_rows([[1, 0, 1], [0, 1, 1], [1, 1, 0]])
    assert G.submatrix(1, 1, 2, 2).to_lists() == [[1, 1], [1, 0]]


def test_with_block_overwrites_region():
    G = GF2Matrix.from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
    H = G.with_block(GF2Matrix.zeros(2, 2), 1, 0)
    assert H.to_lists() == [[1, 1, 1], [0, 0, 1], [0, 0, 1]]
    # original is unchanged
    assert G.to_lists() == [[1, 1, 1], [1, 1, 1], [1, 1, 1]]


def test_with_block_out_of_range():
    with pytest.raises(ValueError):
        GF2Matrix.zeros(3, 3).with_block(GF2Matrix.identity(2), 2, 0)


def test_with_entries():
    G = GF2Matrix.zeros(2, 2).with_entries([(0, 1), (1, 0)])
    assert G.to_lists() == [[0, 1], [1, 0]]
    with pytest.raises(ValueError):
        GF2Matrix.zeros(2, 2).with_entries([(0, 2)])


def test_block_matrix():
    I2, I1 = GF2Matrix.identity(2), GF2Matrix.identity(1)
    M = block_matrix([
        [I2, GF2Matrix.zeros(2, 1)],
        [GF2Matrix.zeros(1, 2), I1],
    ])
    assert M == GF2Matrix.identity(3)


def test_block_matrix_mismatch():
    with pytest.raises(ValueError):
        block_matrix([
            [GF2Matrix.identity(2), GF2Matrix.zeros(2, 1)],
            [GF2Matrix.zeros(1, 1), GF2Matrix.identity(1)],
        ])


# --- arithmetic ---

def test_add_is_xor():
    A = GF2Matrix.from_rows([[1, 1], [0, 1]])
    assert (A + A).is_zero()
    assert (A + GF2Matrix.identity(2)).to_lists() == [[0, 1], [0, 0]]


def test_matmul():
    A = GF2Matrix.from_rows([[1, 1], [0, 1]])
    # 1 + 1 = 0 in GF(2), so A is an involution
    assert A @ A == GF2Matrix.identity(2)


def test_matmul_shape_mismatch():
    with pytest.raises(ValueError):
        GF2Matrix.zeros(2, 3) @ GF2Matrix.zeros(2, 3)


# --- predicates and counts ---

def test_is_symmetric():
    assert GF2Matrix.from_rows([[1, 1], [1, 0]]).is_symmetric()
    assert not GF2Matrix.from_rows([[1, 1], [0, 0]]).is_symmetric()
    assert not GF2Matrix.zeros(2, 3).is_symmetric()


def test_weights():
    G = GF2Matrix.from_rows([[1, 1, 0], [0, 1, 0]])
    assert G.row_weights() == [2, 1]
    assert G.col_weights() == [1, 2, 0]


# --- rank ---

def test_row_reduce_gf2():
    # r0 + r1 = r2 over GF(2)
    rref, pivots, rank = row_reduce_gf2([0b011, 0b110, 0b101], 3)
    assert rank == 2
    assert pivots == [0, 1]
    assert rref == [0b101, 0b110, 0]


def test_gf2_rank_mod_2():
    # Over GF(2) the second row vanishes and the first is [1, 0, 1]
    M = [[1, 2, 3], [2, 4, 6]]
    assert gf2_rank(M, 2, 3) == 1


def test_gf2_rank_full():
    M = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert gf2_rank(M, 3, 3) == 3


def test_matrix_rank():
    assert GF2Matrix.from_rows([[1, 1], [1, 1]]).rank() == 1
    assert GF2Matrix.identity(5).rank() == 5
    assert GF2Matrix.zeros(3, 4).rank() == 0


def test_sympy_rank_agrees():
    M = [
        [1, 1, 0, 1],
        [0, 1, 1, 0],
        [1, 0, 1, 1],
        [1, 1, 1, 1],
    ]
    # row 2 = row 0 + row 1
    assert gf2_rank(M, 4, 4) == 3
    assert sympy_gf2_rank(M) == 3


def test_sympy_rank_empty():
    assert sympy_gf2_rank([]) == 0


def test_rank_unchanged_by_row_combination():
    G = GF2Matrix.from_rows([
        [1, 0, 1, 1, 0],
        [0, 1, 1, 0, 1],
        [1, 1, 1, 0, 0],
    ])
    combo = G.rows[0] ^ G.rows[1] ^ G.rows[2]
    augmented = GF2Matrix(4, 5, G.rows + (combo,))
    assert G.rank() == 3
    assert augmented.rank() == G.rank()
