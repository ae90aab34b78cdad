# -*- coding: utf-8 -*-
"""
This module provides helpers around the engine: the byte log backing the histories and the text
rendering of a board.
"""

from .bytelog import ByteLog
from .render import render_frame

__all__ = ["ByteLog", "render_frame"]
