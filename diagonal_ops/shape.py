"""Shape inspection for matrices given as nested sequences or tensors.

Every traversal validates its input once, before building any line, so a
call either returns all of its lines or raises.
"""

import logging
from typing import Sequence, Tuple

import torch

log = logging.getLogger(__name__)


class ShapeMismatch(ValueError):
    """Raised when a row's length differs from the width of the first row.

    Attributes:
        row: Index of the offending row
        length: Length of the offending row
        expected: Width of row 0
    """

    def __init__(self, row: int, length: int, expected: int):
        self.row = row
        self.length = length
        self.expected = expected
        super().__init__(
            f"row {row} has length {length}, expected {expected} "
            "(matrix must be rectangular)"
        )


def matrix_shape(matrix: Sequence[Sequence]) -> Tuple[int, int]:
    """Return ``(height, width)`` of a rectangular nested sequence.

    Args:
        matrix: Sequence of rows, each row a sequence of elements

    Returns:
        Tuple of (rows, columns). ``(0, 0)`` for a matrix without rows.

    Raises:
        ShapeMismatch: If any row's length differs from the first row's
    """
    height = len(matrix)
    if height == 0:
        return 0, 0
    width = len(matrix[0])
    for index, row in enumerate(matrix):
        if len(row) != width:
            raise ShapeMismatch(index, len(row), width)
    log.debug("matrix shape %dx%d", height, width)
    return height, width


def tensor_shape(matrix: torch.Tensor) -> Tuple[int, int]:
    """Return ``(height, width)`` of the last two dimensions of a tensor.

    Raises:
        ValueError: If the tensor has fewer than two dimensions
    """
    if matrix.dim() < 2:
        raise ValueError(
            f"expected a matrix or a batch of matrices, got a tensor with "
            f"{matrix.dim()} dimension(s)"
        )
    return matrix.size(-2), matrix.size(-1)
