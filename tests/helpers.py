"""Deterministic random sources for the tests."""


class FirstCellGenerator:
    """
    Stand-in for ``numpy.random.Generator``: always picks the first empty cell and returns a fixed
    uniform draw.
    """

    def __init__(self, draw: float = 0.0):
        self.draw = draw

    def integers(self, high: int) -> int:
        return 0

    def random(self) -> float:
        return self.draw
