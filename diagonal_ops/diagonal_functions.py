"""Public traversal functions.

Each function accepts either a nested sequence (list of lists, tuple of
tuples, ...) or a ``torch.Tensor`` and dispatches to the matching
implementation. Sequence input yields lists holding the matrix's own
elements; tensor input yields tensor views into the matrix.
"""

import torch

from . import diagonal as _sequence
from . import diagonal_tensor as _tensor


def straight_x(matrix):
    """Extract the rows of a matrix in row-major order.

    Args:
        matrix (Sequence[Sequence]|torch.Tensor): Rectangular matrix, or a
            tensor of shape [..., h, w]

    Returns:
        list: ``h`` lines, each holding one row left to right

    Raises:
        ShapeMismatch: If the rows of a nested sequence differ in length

    Example:
        >>> straight_x([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    """
    if isinstance(matrix, torch.Tensor):
        return _tensor.straight_x(matrix)
    return _sequence.straight_x(matrix)


def straight_y(matrix):
    """Extract the columns of a matrix in column-major order.

    Args:
        matrix (Sequence[Sequence]|torch.Tensor): Rectangular matrix, or a
            tensor of shape [..., h, w]

    Returns:
        list: ``w`` lines, each holding one column top to bottom

    Raises:
        ShapeMismatch: If the rows of a nested sequence differ in length

    Example:
        >>> straight_y([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
    """
    if isinstance(matrix, torch.Tensor):
        return _tensor.straight_y(matrix)
    return _sequence.straight_y(matrix)


def diagonal_pos_pos(matrix):
    """Extract positive slope diagonals starting from the bottom-left corner.

    Args:
        matrix (Sequence[Sequence]|torch.Tensor): Rectangular matrix, or a
            tensor of shape [..., h, w]

    Returns:
        list: ``h + w - 1`` lines, from the bottom-left corner to the
        top-right corner, each walked by increasing column

    Raises:
        ShapeMismatch: If the rows of a nested sequence differ in length

    Example:
        >>> diagonal_pos_pos([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[7], [4, 8], [1, 5, 9], [2, 6], [3]]
    """
    if isinstance(matrix, torch.Tensor):
        return _tensor.diagonal_pos_pos(matrix)
    return _sequence.diagonal_pos_pos(matrix)


def diagonal_pos_neg(matrix):
    """Extract anti-diagonals starting from the top-left corner.

    Args:
        matrix (Sequence[Sequence]|torch.Tensor): Rectangular matrix, or a
            tensor of shape [..., h, w]

    Returns:
        list: ``h + w - 1`` lines, from the top-left corner to the
        bottom-right corner, each walked by increasing row

    Raises:
        ShapeMismatch: If the rows of a nested sequence differ in length

    Example:
        >>> diagonal_pos_neg([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1], [2, 4], [3, 5, 7], [6, 8], [9]]
    """
    if isinstance(matrix, torch.Tensor):
        return _tensor.diagonal_pos_neg(matrix)
    return _sequence.diagonal_pos_neg(matrix)


TRAVERSALS = {
    "straight_x": straight_x,
    "straight_y": straight_y,
    "diagonal_pos_pos": diagonal_pos_pos,
    "diagonal_pos_neg": diagonal_pos_neg,
}
