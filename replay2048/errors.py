"""Exceptions raised by the 2048 replay engine."""


class Replay2048Error(Exception):
    """Base class for every engine error."""


class InvalidConfiguration(Replay2048Error, ValueError):
    """The engine can't be built with the requested board size or probability."""


class InternalConsistencyFailure(Replay2048Error, RuntimeError):
    """The replayed history doesn't reproduce the live board."""
