"""
Byte packing of tile placements, used to keep a compact log of every spawned tile.

Layout of an encoded placement::

    bit 6     : value flag (0 -> 2, 1 -> 4)
    bits 0..5 : cell location
"""

import logging
from typing import NamedTuple

from replay2048.config import MAX_LOCATION

_logger = logging.getLogger(__name__)

# ##: Position of the value flag.
_VALUE_SHIFT = 6


class TilePlacement(NamedTuple):
    """
    A tile spawned on the board.

    Attributes
    ----------
    location : int
        Row-major index of the cell.
    value : int
        Value of the new tile, 2 or 4.
    """

    location: int
    value: int


def encode(placement: TilePlacement) -> int:
    """
    Pack a placement into a single byte.

    Parameters
    ----------
    placement : TilePlacement
        The placement to encode.

    Returns
    -------
    int
        The encoded byte, in [0, 128).

    Raises
    ------
    ValueError
        If the value isn't 2 or 4, or the location is negative.

    Notes
    -----
    Locations above 63 don't fit in 6 bits and are truncated by the mask. Boards are limited to 8x8
    so the engine never produces such locations.
    """
    location, value = placement
    if value not in (2, 4):
        raise ValueError(f"Only tiles of value 2 or 4 can be encoded, got {value}.")
    if location < 0:
        raise ValueError(f"Location must be non-negative, got {location}.")
    if location > MAX_LOCATION:
        _logger.warning("Location %d exceeds %d and is truncated by the encoding.", location, MAX_LOCATION)

    flag = 1 if value == 4 else 0
    return (flag << _VALUE_SHIFT) | (location & MAX_LOCATION)


def decode(code: int) -> TilePlacement:
    """
    Unpack a byte produced by `encode`.

    Parameters
    ----------
    code : int
        The encoded byte.

    Returns
    -------
    TilePlacement
        The placement stored in the byte.
    """
    value = 4 if (code >> _VALUE_SHIFT) & 0x1 else 2
    return TilePlacement(location=code & MAX_LOCATION, value=value)
