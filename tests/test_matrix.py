"""Unit tests for the zig-zag matrix."""

import unittest

import numpy as np

from kata_pkg.matrix import get_zigzag_matrix
from kata_pkg.types import ValidationError


class TestZigZagMatrix(unittest.TestCase):
    def test_single_cell(self):
        self.assertEqual(get_zigzag_matrix(1), [[0]])

    def test_two(self):
        self.assertEqual(get_zigzag_matrix(2), [[0, 1], [2, 3]])

    def test_three(self):
        self.assertEqual(get_zigzag_matrix(3), [[0, 1, 5], [2, 4, 6], [3, 7, 8]])

    def test_four(self):
        self.assertEqual(
            get_zigzag_matrix(4),
            [[0, 1, 5, 6], [2, 4, 7, 12], [3, 8, 11, 13], [9, 10, 14, 15]],
        )

    def test_values_are_a_permutation(self):
        for n in range(1, 12):
            flat = sorted(value for row in get_zigzag_matrix(n) for value in row)
            self.assertEqual(flat, list(range(n * n)))

    def test_path_steps_to_neighbours(self):
        # Consecutive scan positions are always adjacent cells
        n = 7
        matrix = np.array(get_zigzag_matrix(n))
        positions = {int(matrix[r, c]): (r, c) for r in range(n) for c in range(n)}
        for k in range(n * n - 1):
            (r1, c1), (r2, c2) = positions[k], positions[k + 1]
            self.assertLessEqual(max(abs(r1 - r2), abs(c1 - c2)), 1)

    def test_as_array(self):
        matrix = get_zigzag_matrix(3, as_array=True)
        self.assertIsInstance(matrix, np.ndarray)
        self.assertEqual(matrix.shape, (3, 3))
        self.assertEqual(int(matrix[2, 2]), 8)

    def test_invalid_dimension(self):
        for bad in (0, -3, 2.5, "3", True):
            with self.assertRaises(ValidationError) as ctx:
                get_zigzag_matrix(bad)
            self.assertEqual(ctx.exception.code, "INVALID_DIMENSION")


if __name__ == "__main__":
    unittest.main()
