"""Tests for quintictools.viz module."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from quintictools.gf2.matrix import GF2Matrix
from quintictools.viz.draw import face_layout, draw_face_lattice, draw_matrix_pattern


def test_face_layout_corners():
    pos = face_layout()
    assert len(pos) == 21
    assert np.allclose(pos[(5, 0, 0)], [0.0, np.sqrt(3.0)])
    assert np.allclose(pos[(0, 5, 0)], [-1.0, 0.0])
    assert np.allclose(pos[(0, 0, 5)], [1.0, 0.0])


def test_draw_face_lattice_saves(tmp_path):
    path = tmp_path / "face.png"
    fig = draw_face_lattice(save_path=str(path))
    assert path.exists()
    plt.close(fig)


def test_draw_matrix_pattern_saves(tmp_path):
    path = tmp_path / "square.png"
    fig = draw_matrix_pattern(GF2Matrix.identity(5), title="I5", save_path=str(path))
    assert path.exists()
    assert fig.axes[0].get_title() == "I5"
    plt.close(fig)
