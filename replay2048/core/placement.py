"""
Random spawn of new tiles.
"""

import logging

from numpy import flatnonzero, ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from replay2048.core.codec import TilePlacement

_logger = logging.getLogger(__name__)


class TileGenerator:
    """
    Choose where the next tile appears and what its value is.

    This is the only source of randomness of the engine. Pass a seed, or a ready-made
    ``numpy.random.Generator`` (which wins over the seed), to get reproducible games.

    Parameters
    ----------
    random_factor_of_2 : float
        Threshold of the value draw: a uniform draw in [0, 1) strictly above it spawns a 4,
        otherwise a 2.
    seed : int, optional
        Seed of the default PCG64DXSM generator.
    generator : Generator, optional
        Random generator to use instead of building one.
    """

    def __init__(self, random_factor_of_2: float, seed: int | None = None, generator: Generator | None = None):
        self.random_factor_of_2 = random_factor_of_2
        self._rng = generator if generator is not None else default_rng(PCG64DXSM(seed))

    def generate(self, grid: ndarray) -> TilePlacement | None:
        """
        Pick an empty cell uniformly at random and the value of the tile to put there.

        The grid isn't modified.

        Parameters
        ----------
        grid : ndarray
            Flat row-major board.

        Returns
        -------
        TilePlacement | None
            The new placement, or None when the board is full.
        """
        empty_cells = flatnonzero(grid == 0)
        if len(empty_cells) == 0:
            _logger.debug("Board is full, no tile placed.")
            return None

        location = int(empty_cells[self._rng.integers(len(empty_cells))])
        value = 4 if self._rng.random() > self.random_factor_of_2 else 2
        return TilePlacement(location=location, value=value)
