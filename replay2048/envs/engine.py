"""2048 game engine recording a compact, replayable history."""

import logging

from numpy import array_equal, int64, ndarray, zeros
from numpy.random import Generator

from replay2048.config import INIT_TILE_COUNT, EngineConfig
from replay2048.core.codec import TilePlacement, decode, encode
from replay2048.core.indexer import Direction, direction_table
from replay2048.core.linemerge import merge_lines
from replay2048.core.placement import TileGenerator
from replay2048.errors import InternalConsistencyFailure
from replay2048.utils.bytelog import ByteLog

_logger = logging.getLogger(__name__)


def place_tile(grid: ndarray, placement: TilePlacement) -> None:
    """Write a placement into a flat board, in place."""
    grid[placement.location] = placement.value


class GameEngine:
    """
    2048 game engine.

    The engine owns the board, the score and two append-only logs: one byte per accepted move, and
    one encoded byte per spawned tile (the two initial tiles included). Those logs are enough to
    rebuild every board the game went through, see `get_history`.

    Not thread-safe: callers sharing an engine must serialize access themselves.
    """

    def __init__(
        self,
        size: int = 4,
        random_factor_of_2: float = 0.9,
        seed: int | None = None,
        generator: Generator | None = None,
    ):
        """
        Initialize the board and place the two initial tiles.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4), at most 8.
        random_factor_of_2 : float, optional
            Threshold of the tile draw, in [0, 1] (default is 0.9): draws above it spawn a 4.
        seed : int, optional
            Seed of the random source.
        generator : Generator, optional
            Random generator to use, overrides ``seed``.

        Raises
        ------
        InvalidConfiguration
            If the board is too small or too large, or the threshold is out of range.
        """
        self.config = EngineConfig(size=size, random_factor_of_2=random_factor_of_2, seed=seed).validate()
        self.size = size

        self._lines = direction_table(size)
        self._tiles = TileGenerator(random_factor_of_2, seed=seed, generator=generator)

        self._grid: ndarray = zeros(size * size, dtype=int64)
        self._score = 0
        self._actions = ByteLog()
        self._placements = ByteLog()

        for _ in range(INIT_TILE_COUNT):
            self._add_tile()
        _logger.info("New %dx%d game, random factor of 2: %s.", size, size, random_factor_of_2)

    @classmethod
    def from_config(cls, config: EngineConfig, generator: Generator | None = None) -> "GameEngine":
        """Build an engine from an `EngineConfig`."""
        return cls(
            size=config.size, random_factor_of_2=config.random_factor_of_2, seed=config.seed, generator=generator
        )

    @property
    def random_factor_of_2(self) -> float:
        return self.config.random_factor_of_2

    @property
    def board(self) -> ndarray:
        """Copy of the board as a (size, size) array."""
        return self._grid.reshape(self.size, self.size).copy()

    @property
    def action_history(self) -> bytes:
        """Raw action log, one `Direction` value per accepted move."""
        return self._actions.tobytes()

    @property
    def placement_history(self) -> bytes:
        """Raw placement log, one encoded byte per spawned tile."""
        return self._placements.tobytes()

    def get_board(self) -> list[int]:
        """Row-major copy of the board."""
        return self._grid.tolist()

    def get_score(self) -> int:
        return self._score

    def get_action_count(self) -> int:
        return len(self._actions)

    def apply_direction(self, direction: Direction | int | str) -> bool:
        """
        Slide the board in a direction.

        Parameters
        ----------
        direction : Direction | int | str
            The direction, its value or its name.

        Returns
        -------
        bool
            True if the move changed the board. A move that changes nothing is rejected: board,
            score and logs are left untouched.

        Notes
        -----
        After an accepted move the score grows by the merged tiles, the move is logged and a new
        tile is spawned and logged.
        """
        direction = Direction.parse(direction)

        grid = self._grid.copy()
        changed, score = merge_lines(grid, self._lines[direction])
        if not changed:
            _logger.debug("Move %s rejected, board unchanged.", direction.name)
            return False

        self._grid = grid
        self._score += score
        self._actions.append(int(direction))
        self._add_tile()
        _logger.debug("Move %s accepted, score +%d.", direction.name, score)
        return True

    def is_game_over(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no direction can change the board.
        """
        for lines in self._lines.values():
            changed, _ = merge_lines(self._grid.copy(), lines)
            if changed:
                return False
        return True

    def get_history(self) -> list[list[int]]:
        """
        Rebuild every board of the game from the logs.

        Returns
        -------
        list[list[int]]
            ``action count + 1`` row-major boards: the board before each move, then the current one.

        Raises
        ------
        InternalConsistencyFailure
            If the logs are inconsistent or the replay doesn't end on the live board.
        """
        history = [snapshot.tolist() for snapshot in self.compute_history()]
        _logger.info("Rebuilt %d boards from the history.", len(history))
        return history

    def compute_history(self) -> list[ndarray]:
        """
        Replay the logs from an empty board.

        The live board is only read for the final cross-check.

        Returns
        -------
        list[ndarray]
            Flat snapshots, one per move plus the current board.

        Raises
        ------
        InternalConsistencyFailure
            If the logs are inconsistent or the replay doesn't end on the live board.
        """
        placements = self._placements[:]
        actions = self._actions[:]
        if not INIT_TILE_COUNT <= len(placements) <= len(actions) + INIT_TILE_COUNT:
            self._inconsistent(f"{len(placements)} placements logged for {len(actions)} moves.")

        grid = zeros(self.size * self.size, dtype=int64)

        # ##: Initial tiles.
        for code in placements[:INIT_TILE_COUNT]:
            place_tile(grid, decode(code))
        snapshots = [grid.copy()]

        # ##: Replay each move and the tile it spawned.
        for index, action in enumerate(actions):
            merge_lines(grid, self._lines[Direction(action)])
            position = index + INIT_TILE_COUNT
            if position < len(placements):
                place_tile(grid, decode(placements[position]))
            snapshots.append(grid.copy())

        if not array_equal(grid, self._grid):
            self._inconsistent(f"replayed board {grid.tolist()} differs from live board {self._grid.tolist()}.")
        return snapshots

    def _add_tile(self) -> None:
        placement = self._tiles.generate(self._grid)
        if placement is None:
            return
        place_tile(self._grid, placement)
        self._placements.append(encode(placement))
        _logger.debug("Tile %d placed at %d.", placement.value, placement.location)

    @staticmethod
    def _inconsistent(reason: str) -> None:
        _logger.error("History replay failed: %s", reason)
        raise InternalConsistencyFailure(f"History replay failed: {reason}")
