# -*- coding: utf-8 -*-
"""
Engine specific configuration.
"""
from dataclasses import dataclass

from replay2048.errors import InvalidConfiguration

# ##: Number of tiles placed when a game starts.
INIT_TILE_COUNT = 2

# ##: History logs grow by blocks of this many bytes.
HISTORY_EXPAND_LENGTH = 1024

# ##: Largest location an encoded placement can hold (6 bits).
MAX_LOCATION = 0x3F


@dataclass
class EngineConfig:
    """
    Data needed to build a game engine.

    Attributes
    ----------
    size : int
        Side length of the square board.
    random_factor_of_2 : float
        Threshold of the tile draw: a uniform draw above it spawns a 4, otherwise a 2.
    seed : int | None
        Seed of the random source, None for fresh entropy.
    """

    size: int = 4
    random_factor_of_2: float = 0.9
    seed: int | None = None

    def validate(self) -> "EngineConfig":
        """
        Check that the configuration describes a playable, encodable board.

        Returns
        -------
        EngineConfig
            The configuration itself, to allow chaining.

        Raises
        ------
        InvalidConfiguration
            If the board can't hold the initial tiles, doesn't fit the placement encoding, or the
            probability is outside [0, 1].
        """
        if not isinstance(self.size, int) or self.size < 2:
            raise InvalidConfiguration(f"Board size must be an integer of at least 2, got {self.size!r}.")
        if self.size * self.size > MAX_LOCATION + 1:
            raise InvalidConfiguration(
                f"A {self.size}x{self.size} board has more than {MAX_LOCATION + 1} cells and can't be encoded."
            )
        if not 0.0 <= self.random_factor_of_2 <= 1.0:
            raise InvalidConfiguration(f"random_factor_of_2 must be within [0, 1], got {self.random_factor_of_2!r}.")
        return self
