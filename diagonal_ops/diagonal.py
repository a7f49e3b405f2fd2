"""Row, column and diagonal traversals over nested sequences.

Lines hold the element objects of the input matrix itself, never copies, so
``line[i] is matrix[r][c]`` for the cell the line visits. Cells are
addressed as ``(r, c)`` with ``r`` counted from the top row and ``c`` from
the left column.
"""

from typing import List, Sequence, TypeVar

from .shape import matrix_shape

T = TypeVar("T")


def straight_x(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Extract the rows of a matrix, left to right.

    Example:
        >>> straight_x([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    """
    height, width = matrix_shape(matrix)
    if width == 0:
        return []
    return [[row[c] for c in range(width)] for row in matrix]


def straight_y(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Extract the columns of a matrix, top to bottom.

    Example:
        >>> straight_y([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
    """
    height, width = matrix_shape(matrix)
    return [[row[c] for row in matrix] for c in range(width)]


def diagonal_pos_pos(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Extract positive slope diagonals starting from the bottom-left corner.

    Cell ``(r, c)`` lies on diagonal ``d = (h - 1 - r) + c``. Lines are
    ordered by increasing ``d`` and each line runs from bottom-left to
    top-right, i.e. by increasing column.

    Args:
        matrix: Rectangular sequence of rows

    Returns:
        ``h + w - 1`` lines, or ``[]`` for an empty matrix

    Example:
        >>> diagonal_pos_pos([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[7], [4, 8], [1, 5, 9], [2, 6], [3]]
    """
    height, width = matrix_shape(matrix)
    if width == 0:
        return []
    lines = []
    for d in range(height + width - 1):
        first = max(0, d - (height - 1))
        last = min(width - 1, d)
        lines.append(
            [matrix[height - 1 - d + c][c] for c in range(first, last + 1)]
        )
    return lines


def diagonal_pos_neg(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Extract anti-diagonals starting from the top-left corner.

    Line ``k`` holds every cell with ``r + c == k``, walked from the top-right
    end of the diagonal to its bottom-left end (increasing row). Line 0 is the
    top-left corner and the last line is the bottom-right corner.

    Args:
        matrix: Rectangular sequence of rows

    Returns:
        ``h + w - 1`` lines, or ``[]`` for an empty matrix

    Example:
        >>> diagonal_pos_neg([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        [[1], [2, 4], [3, 5, 7], [6, 8], [9]]
    """
    height, width = matrix_shape(matrix)
    if width == 0:
        return []
    lines = []
    for k in range(height + width - 1):
        first = max(0, k - (width - 1))
        last = min(height - 1, k)
        lines.append([matrix[r][k - r] for r in range(first, last + 1)])
    return lines
