"""Unit tests for diagonal_pos_neg on nested sequences.

Lines run from the top-left corner to the bottom-right corner, each walked
by increasing row.
"""

import sys

sys.path.append("./")

import unittest
from diagonal_ops import diagonal_pos_neg


class TestDiagonalPosNeg(unittest.TestCase):
    """Test suite for anti-diagonals."""

    def test_one_by_one(self):
        self.assertEqual(diagonal_pos_neg([[1]]), [[1]])
        self.assertEqual(diagonal_pos_neg(((1,),)), [[1]])

    def test_empty(self):
        self.assertEqual(diagonal_pos_neg([]), [])
        self.assertEqual(diagonal_pos_neg([[], []]), [])

    def test_two_by_two(self):
        matrix = [[1, 2], [3, 4]]
        self.assertEqual(diagonal_pos_neg(matrix), [[1], [2, 3], [4]])

    def test_two_by_three(self):
        matrix = [[1, 2, 3], [4, 5, 6]]
        self.assertEqual(diagonal_pos_neg(matrix), [[1], [2, 4], [3, 5], [6]])
        matrix = ((1, 2, 3), (4, 5, 6))
        self.assertEqual(diagonal_pos_neg(matrix), [[1], [2, 4], [3, 5], [6]])

    def test_three_by_two(self):
        matrix = [[1, 2], [3, 4], [5, 6]]
        self.assertEqual(diagonal_pos_neg(matrix), [[1], [2, 3], [4, 5], [6]])

    def test_three_by_three(self):
        matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        self.assertEqual(
            diagonal_pos_neg(matrix), [[1], [2, 4], [3, 5, 7], [6, 8], [9]]
        )

    def test_four_by_four(self):
        matrix = [
            [1, 2, 3, 4],
            [5, 6, 7, 8],
            [9, 10, 11, 12],
            [13, 14, 15, 16],
        ]
        self.assertEqual(
            diagonal_pos_neg(matrix),
            [
                [1],
                [2, 5],
                [3, 6, 9],
                [4, 7, 10, 13],
                [8, 11, 14],
                [12, 15],
                [16],
            ],
        )

    def test_single_row(self):
        self.assertEqual(diagonal_pos_neg([[1, 2, 3, 4]]), [[1], [2], [3], [4]])

    def test_single_column(self):
        self.assertEqual(diagonal_pos_neg([[1], [2], [3], [4]]), [[1], [2], [3], [4]])

    def test_references(self):
        matrix = [[object() for _ in range(3)] for _ in range(4)]
        width = len(matrix[0])
        for k, line in enumerate(diagonal_pos_neg(matrix)):
            first = max(0, k - (width - 1))
            for i, element in enumerate(line):
                r = first + i
                self.assertIs(element, matrix[r][k - r])


if __name__ == "__main__":
    unittest.main()
