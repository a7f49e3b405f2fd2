"""Property checks shared by all traversals over a grid of matrix shapes."""

import sys

sys.path.append("./")

import unittest
from diagonal_ops import (
    TRAVERSALS,
    diagonal_pos_neg,
    diagonal_pos_pos,
    straight_x,
    straight_y,
)


def _matrix(height, width):
    return [[object() for _ in range(width)] for _ in range(height)]


class TestProperties(unittest.TestCase):
    """Test suite for counts, coverage and determinism."""

    shapes = [(h, w) for h in range(1, 7) for w in range(1, 7)]

    def test_straight_line_counts(self):
        for height, width in self.shapes:
            with self.subTest(height=height, width=width):
                matrix = _matrix(height, width)
                rows = straight_x(matrix)
                cols = straight_y(matrix)
                self.assertEqual(len(rows), height)
                self.assertTrue(all(len(line) == width for line in rows))
                self.assertEqual(len(cols), width)
                self.assertTrue(all(len(line) == height for line in cols))

    def test_diagonal_line_counts(self):
        """Both diagonal traversals share the same length profile."""
        for height, width in self.shapes:
            with self.subTest(height=height, width=width):
                matrix = _matrix(height, width)
                pos = diagonal_pos_pos(matrix)
                neg = diagonal_pos_neg(matrix)
                self.assertEqual(len(pos), height + width - 1)
                self.assertEqual(len(neg), height + width - 1)
                self.assertEqual(
                    sorted(len(line) for line in pos),
                    sorted(len(line) for line in neg),
                )

    def test_every_cell_once(self):
        for height, width in self.shapes:
            matrix = _matrix(height, width)
            expected = sorted(id(element) for row in matrix for element in row)
            for name, traversal in TRAVERSALS.items():
                with self.subTest(traversal=name, height=height, width=width):
                    found = sorted(
                        id(element) for line in traversal(matrix) for element in line
                    )
                    self.assertEqual(found, expected)

    def test_repeatable(self):
        matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
        for name, traversal in TRAVERSALS.items():
            with self.subTest(traversal=name):
                self.assertEqual(traversal(matrix), traversal(matrix))

    def test_input_untouched(self):
        matrix = [[1, 2, 3], [4, 5, 6]]
        for traversal in TRAVERSALS.values():
            traversal(matrix)
        self.assertEqual(matrix, [[1, 2, 3], [4, 5, 6]])

    def test_single_element(self):
        for name, traversal in TRAVERSALS.items():
            with self.subTest(traversal=name):
                self.assertEqual(traversal([["a"]]), [["a"]])

    def test_registry(self):
        self.assertEqual(
            sorted(TRAVERSALS),
            ["diagonal_pos_neg", "diagonal_pos_pos", "straight_x", "straight_y"],
        )


if __name__ == "__main__":
    unittest.main()
