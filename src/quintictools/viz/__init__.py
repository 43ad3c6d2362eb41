from .draw import face_layout, draw_face_lattice, draw_matrix_pattern

__all__ = [
    "face_layout",
    "draw_face_lattice",
    "draw_matrix_pattern",
]
