"""
Slide and merge of the tiles of one line, the heart of every move.
"""

from numpy import array_equal, ndarray, zeros_like


def merge_line(grid: ndarray, line: ndarray) -> tuple[bool, int]:
    """
    Slide and merge the cells of one line toward its leading edge, in place.

    Parameters
    ----------
    grid : ndarray
        Flat row-major board. **Modified in-place.**
    line : ndarray
        Indices of the cells of the line, from the leading edge to the trailing edge.

    Returns
    -------
    changed : bool
        True if any cell of the line changed.
    score : int
        Sum of the tiles created by merges.

    Notes
    -----
    - Empty cells are removed before merging, preserving the order of the tiles.
    - Merging goes from the leading edge; a merged tile can't merge again during the same move, so
      ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    original = grid[line]
    tiles = original[original != 0].tolist()

    # ##: Merge adjacent pairs, shifting the remaining tiles after each merge.
    score = 0
    i = 1
    while i < len(tiles):
        if tiles[i - 1] == tiles[i]:
            tiles[i - 1] += tiles[i]
            score += tiles[i - 1]
            del tiles[i]
        i += 1

    result = zeros_like(original)
    result[: len(tiles)] = tiles
    grid[line] = result
    return not array_equal(result, original), score


def merge_lines(grid: ndarray, lines: ndarray) -> tuple[bool, int]:
    """
    Apply `merge_line` to every line of a direction table.

    Parameters
    ----------
    grid : ndarray
        Flat row-major board. **Modified in-place.**
    lines : ndarray
        Line index table, one line per row.

    Returns
    -------
    changed : bool
        True if at least one line changed.
    score : int
        Total score of the merges.
    """
    changed, score = False, 0
    for line in lines:
        line_changed, line_score = merge_line(grid, line)
        changed = changed or line_changed
        score += line_score
    return changed, score
