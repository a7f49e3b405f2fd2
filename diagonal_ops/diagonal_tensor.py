"""Traversals over ``torch.Tensor`` matrices returned as tensor views.

Matrices are the last two dimensions of the input, leading dimensions are
treated as batch dimensions, so a ``[B, h, w]`` input yields lines of shape
``[B, n]``. Lines share storage with the input: writing into a line writes
into the matrix, and gradients flow back through the lines.
"""

import logging
from typing import List

import torch

from .shape import tensor_shape

log = logging.getLogger(__name__)


def straight_x(matrix: torch.Tensor) -> List[torch.Tensor]:
    """Rows of the matrix as views of shape ``[..., w]``."""
    height, width = tensor_shape(matrix)
    if height == 0 or width == 0:
        return []
    return [matrix.select(-2, r) for r in range(height)]


def straight_y(matrix: torch.Tensor) -> List[torch.Tensor]:
    """Columns of the matrix as views of shape ``[..., h]``."""
    height, width = tensor_shape(matrix)
    if height == 0 or width == 0:
        return []
    return [matrix.select(-1, c) for c in range(width)]


def diagonal_pos_pos(matrix: torch.Tensor) -> List[torch.Tensor]:
    """Positive slope diagonals from the bottom-left corner.

    Line ``d`` is the diagonal with column-minus-row offset ``d - (h - 1)``,
    which ``torch.diagonal`` already walks by increasing column.
    """
    height, width = tensor_shape(matrix)
    if height == 0 or width == 0:
        return []
    return [
        matrix.diagonal(offset=d - (height - 1), dim1=-2, dim2=-1)
        for d in range(height + width - 1)
    ]


def diagonal_pos_neg(matrix: torch.Tensor) -> List[torch.Tensor]:
    """Anti-diagonals from the top-left corner.

    Line ``k`` holds the cells with ``r + c == k`` by increasing row. Stepping
    one row down and one column left moves ``stride(-2) - stride(-1)``
    elements through storage, which ``as_strided`` can express as long as
    that step is not negative. Layouts where it is (transposed or expanded
    matrices) fall back to diagonals of a column-flipped copy.
    """
    height, width = tensor_shape(matrix)
    if height == 0 or width == 0:
        return []

    row_stride, col_stride = matrix.stride(-2), matrix.stride(-1)
    step = row_stride - col_stride
    if step < 0 and min(height, width) > 1:
        log.debug(
            "row stride %d below column stride %d, anti-diagonals are copied",
            row_stride,
            col_stride,
        )
        flipped = matrix.flip(-1)
        return [
            flipped.diagonal(offset=width - 1 - k, dim1=-2, dim2=-1)
            for k in range(height + width - 1)
        ]
    # Lines of length one never take a step.
    step = max(step, 0)

    batch_size = tuple(matrix.shape[:-2])
    batch_stride = tuple(matrix.stride()[:-2])
    lines = []
    for k in range(height + width - 1):
        first = max(0, k - (width - 1))
        last = min(height - 1, k)
        lines.append(
            matrix.as_strided(
                batch_size + (last - first + 1,),
                batch_stride + (step,),
                matrix.storage_offset() + first * row_stride + (k - first) * col_stride,
            )
        )
    return lines
