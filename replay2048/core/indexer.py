"""
Direction handling: maps each slide direction to the lines of cell indices it operates on.

Every table has one row per line, each ordered from the edge tiles slide toward to the opposite
edge, so the merge logic never needs to know the direction.
"""

from enum import IntEnum
from functools import lru_cache

from numpy import arange, ndarray


class Direction(IntEnum):
    """Slide directions. The values are the bytes stored in the action log."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: "Direction | int | str") -> "Direction":
        """
        Convert a direction, its ordinal or its (case-insensitive) name into a `Direction`.

        Raises
        ------
        ValueError
            If the value doesn't name a direction.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as error:
                raise ValueError(f"Unknown direction: {value!r}.") from error
        return cls(value)


@lru_cache(maxsize=None)
def index_lines(size: int, direction: Direction) -> ndarray:
    """
    Compute the line index table of a direction.

    Parameters
    ----------
    size : int
        Side length of the board.
    direction : Direction
        The slide direction.

    Returns
    -------
    ndarray
        Read-only array of shape (size, size); row ``i`` lists the cells of line ``i`` from the
        leading edge to the trailing edge.

    Example
    -------
    >>> index_lines(4, Direction.DOWN)
    array([[12,  8,  4,  0],
           [13,  9,  5,  1],
           [14, 10,  6,  2],
           [15, 11,  7,  3]])
    """
    line = arange(size).reshape(size, 1)
    position = arange(size).reshape(1, size)

    if direction == Direction.LEFT:
        table = line * size + position
    elif direction == Direction.RIGHT:
        table = (line + 1) * size - (position + 1)
    elif direction == Direction.UP:
        table = position * size + line
    else:
        table = (size - position - 1) * size + line

    table.setflags(write=False)
    return table


def direction_table(size: int) -> dict[Direction, ndarray]:
    """Line index tables of all four directions for a board of the given size."""
    return {direction: index_lines(size, direction) for direction in Direction}
