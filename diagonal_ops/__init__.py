"""Row, column and diagonal traversals over rectangular matrices.

This package extracts linear traversals from a matrix given as a sequence of
rows or as a PyTorch tensor. Results reference the input instead of copying
it: nested sequences yield lists of the matrix's own elements, tensors yield
views sharing the matrix's storage.

Available functions:
    - straight_x: Rows, left to right
    - straight_y: Columns, top to bottom
    - diagonal_pos_pos: Positive slope diagonals from the bottom-left corner
    - diagonal_pos_neg: Anti-diagonals from the top-left corner

Requirements:
    - PyTorch (only exercised for tensor input)
"""

from .diagonal_functions import (
    TRAVERSALS,
    diagonal_pos_neg,
    diagonal_pos_pos,
    straight_x,
    straight_y,
)
from .shape import ShapeMismatch
