# -*-  coding: utf-8 -*-
"""
Set of test for the slide and merge of lines.
"""
from unittest import TestCase, main

import numpy as np

from replay2048.core.indexer import Direction, index_lines
from replay2048.core.linemerge import merge_line, merge_lines

LINE = np.arange(4)


class TestMergeLine(TestCase):
    def test_non_cascading_merge(self):
        """Four equal tiles give two merged tiles, not one."""
        grid = np.array([2, 2, 2, 2])
        changed, score = merge_line(grid, LINE)
        self.assertTrue(changed)
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(grid, [4, 4, 0, 0])

    def test_merged_tile_not_merged_again(self):
        """A tile created by a merge doesn't merge with the next equal tile."""
        grid = np.array([4, 4, 8, 0])
        changed, score = merge_line(grid, LINE)
        self.assertTrue(changed)
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(grid, [8, 8, 0, 0])

    def test_compact_then_merge(self):
        """Gaps are removed before merging."""
        grid = np.array([2, 0, 2, 4])
        changed, score = merge_line(grid, LINE)
        self.assertTrue(changed)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(grid, [4, 4, 0, 0])

    def test_slide_only(self):
        """Sliding without merging changes the line but scores nothing."""
        grid = np.array([0, 2, 0, 4])
        changed, score = merge_line(grid, LINE)
        self.assertTrue(changed)
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(grid, [2, 4, 0, 0])

    def test_no_op(self):
        """A compact line without equal neighbours is left as is."""
        grid = np.array([2, 4, 8, 16])
        changed, score = merge_line(grid, LINE)
        self.assertFalse(changed)
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(grid, [2, 4, 8, 16])

    def test_empty_line(self):
        grid = np.zeros(4, dtype=np.int64)
        self.assertEqual(merge_line(grid, LINE), (False, 0))
        np.testing.assert_array_equal(grid, [0, 0, 0, 0])

    def test_reversed_line(self):
        """Tiles go toward the first index of the line, whatever its position on the board."""
        grid = np.array([2, 2, 4, 0])
        changed, score = merge_line(grid, LINE[::-1])
        self.assertTrue(changed)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(grid, [0, 0, 4, 4])

    def test_only_line_cells_touched(self):
        """Cells outside the line keep their values."""
        grid = np.array([2, 8, 2, 8, 0, 16])
        merge_line(grid, np.array([0, 2, 4]))
        np.testing.assert_array_equal(grid, [4, 8, 0, 8, 0, 16])


class TestMergeLines(TestCase):
    def test_left(self):
        """Every row slides and merges to the left."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]]).ravel()
        changed, score = merge_lines(board, index_lines(4, Direction.LEFT))
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertTrue(changed)
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(board.reshape(4, 4), expected)

    def test_down(self):
        """Every column slides and merges to the bottom."""
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 2]]).ravel()
        changed, score = merge_lines(board, index_lines(4, Direction.DOWN))
        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 0], [4, 0, 0, 2]])
        self.assertTrue(changed)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(board.reshape(4, 4), expected)

    def test_unchanged(self):
        """No line changes, no score."""
        board = np.array([[2, 0], [4, 0]]).ravel()
        self.assertEqual(merge_lines(board, index_lines(2, Direction.LEFT)), (False, 0))


if __name__ == "__main__":
    main()
