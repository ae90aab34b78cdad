from unittest import TestCase, main

import numpy as np

from replay2048.core.indexer import Direction, direction_table, index_lines


class TestIndexLines(TestCase):
    def test_left(self):
        """Rows, from left to right."""
        np.testing.assert_array_equal(
            index_lines(4, Direction.LEFT), [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]]
        )

    def test_right(self):
        """Rows, from right to left."""
        np.testing.assert_array_equal(
            index_lines(4, Direction.RIGHT), [[3, 2, 1, 0], [7, 6, 5, 4], [11, 10, 9, 8], [15, 14, 13, 12]]
        )

    def test_up(self):
        """Columns, from top to bottom."""
        np.testing.assert_array_equal(
            index_lines(4, Direction.UP), [[0, 4, 8, 12], [1, 5, 9, 13], [2, 6, 10, 14], [3, 7, 11, 15]]
        )

    def test_down(self):
        """Columns, from bottom to top."""
        np.testing.assert_array_equal(
            index_lines(4, Direction.DOWN), [[12, 8, 4, 0], [13, 9, 5, 1], [14, 10, 6, 2], [15, 11, 7, 3]]
        )

    def test_every_cell_once(self):
        """Each table is a permutation of the board cells."""
        for size in (2, 3, 5, 8):
            for direction, table in direction_table(size).items():
                self.assertEqual(table.shape, (size, size))
                self.assertEqual(sorted(table.ravel().tolist()), list(range(size * size)), direction)

    def test_tables_cached_and_read_only(self):
        """Tables are computed once and can't be modified."""
        table = index_lines(3, Direction.UP)
        self.assertIs(table, index_lines(3, Direction.UP))
        with self.assertRaises(ValueError):
            table[0, 0] = 42


class TestDirection(TestCase):
    def test_ordinals(self):
        """Values are the action log bytes."""
        self.assertEqual([int(direction) for direction in Direction], [0, 1, 2, 3])
        self.assertEqual([direction.name for direction in Direction], ["LEFT", "RIGHT", "UP", "DOWN"])

    def test_parse(self):
        self.assertIs(Direction.parse("left"), Direction.LEFT)
        self.assertIs(Direction.parse(" Down "), Direction.DOWN)
        self.assertIs(Direction.parse(2), Direction.UP)
        self.assertIs(Direction.parse(Direction.RIGHT), Direction.RIGHT)

    def test_parse_unknown(self):
        with self.assertRaises(ValueError):
            Direction.parse("diagonal")
        with self.assertRaises(ValueError):
            Direction.parse(4)


if __name__ == "__main__":
    main()
