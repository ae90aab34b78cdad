# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game with replayable history.

This module provides the `GameEngine` class, which owns the board, the score and the history logs.
"""

from .engine import GameEngine

__all__ = ["GameEngine"]
