from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from quintictools.gf2.matrix import GF2Matrix
from quintictools.simplex.lattice import DEGREE, face_lattice_graph


def face_layout() -> dict:
    """Planar positions for the face lattice: vertex i on top, j left, k right."""
    corners = np.array([[0.0, np.sqrt(3.0)], [-1.0, 0.0], [1.0, 0.0]])
    return {p: np.array(p, dtype=float) @ corners / DEGREE for p in face_lattice_graph().nodes}


def _node_text(data: dict) -> str:
    if data["kind"] == "vertex":
        return "ijk"[data["label"]]
    if data["kind"] == "edge":
        return str(data["label"][1])
    return str(data["label"])


def draw_face_lattice(
    *,
    node_size: int = 260,
    save_path: str | None = None,
):
    """
    Draw one triangulated face with the point numbering used by the blocks.

    Exterior segments are dashed. Returns the matplotlib Figure; if save_path
    is set the figure is also written there.
    """
    G = face_lattice_graph()
    pos = face_layout()

    interior = [p for p, k in G.nodes(data="kind") if k == "interior"]
    boundary = [p for p, k in G.nodes(data="kind") if k != "interior"]
    exterior = [(p, q) for p, q, ext in G.edges(data="exterior") if ext]
    inner = [(p, q) for p, q, ext in G.edges(data="exterior") if not ext]

    fig, ax = plt.subplots(figsize=(6, 5.5))
    ax.set_title(f"Triangulated face of side {DEGREE}")
    ax.set_axis_off()

    nx.draw_networkx_edges(G, pos, edgelist=exterior, style="dashed", width=1.0, ax=ax)
    nx.draw_networkx_edges(G, pos, edgelist=inner, width=1.4, ax=ax)
    nx.draw_networkx_nodes(G, pos, nodelist=boundary, node_size=node_size, node_color="#dddddd", ax=ax)
    nx.draw_networkx_nodes(G, pos, nodelist=interior, node_size=node_size, node_color="#9ecae1", ax=ax)
    nx.draw_networkx_labels(
        G, pos, labels={p: _node_text(d) for p, d in G.nodes(data=True)}, font_size=8, ax=ax
    )

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=160)
    return fig


def draw_matrix_pattern(
    M: GF2Matrix,
    *,
    title: str | None = None,
    markersize: float = 2.0,
    save_path: str | None = None,
):
    """Plot the non-zero pattern of a GF(2) matrix. Returns the Figure."""
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.spy(np.array(M.to_lists(), dtype=np.uint8), markersize=markersize)
    ax.set_title(title or f"{M.n_rows}x{M.n_cols} over GF(2)")
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=160)
    return fig
