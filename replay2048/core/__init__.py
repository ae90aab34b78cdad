# -*- coding: utf-8 -*-
"""
This module provides the building blocks of the 2048 engine.

It includes the direction index tables, the slide and merge of a line, the random spawn of new
tiles, and the byte encoding of tile placements used by the history log.
"""

from .codec import TilePlacement, decode, encode
from .indexer import Direction, direction_table, index_lines
from .linemerge import merge_line, merge_lines
from .placement import TileGenerator

__all__ = [
    "Direction",
    "index_lines",
    "direction_table",
    "merge_line",
    "merge_lines",
    "TileGenerator",
    "TilePlacement",
    "encode",
    "decode",
]
