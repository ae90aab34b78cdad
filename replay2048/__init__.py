"""Deterministic 2048 engine with a compact, replayable history."""

from replay2048.config import EngineConfig
from replay2048.core import Direction, TilePlacement
from replay2048.envs import GameEngine
from replay2048.errors import InternalConsistencyFailure, InvalidConfiguration, Replay2048Error

__all__ = [
    "Direction",
    "EngineConfig",
    "GameEngine",
    "InternalConsistencyFailure",
    "InvalidConfiguration",
    "Replay2048Error",
    "TilePlacement",
]
