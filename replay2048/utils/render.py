"""
Text rendering of a board with its status head line.

Example of a rendered frame::

    =====================================
    | status: play | score: 4 | step: 1 |
    =====================================
    |   4    |        |        |        |
    -------------------------------------
    ...
"""

from collections.abc import Sequence


def _center(number: int, width: int) -> str:
    text = str(number) if number != 0 else " "
    left = (width - len(text)) // 2
    right = width - left - len(text)
    return " " * left + text + " " * right


def head_line(status: str, score: int, step: str, width: int = 0) -> str:
    """
    Build the status line shown above the board.

    Parameters
    ----------
    status : str
        Console mode, ``play`` or ``replay``.
    score : int
        Current score.
    step : str
        Step indicator, ``k`` while playing or ``k/total`` while replaying.
    width : int, optional
        Total width of the line; shorter lines are padded with spaces.

    Returns
    -------
    str
        The head line, framed by ``|``.
    """
    line = f"| status: {status} | score: {score} | step: {step} "
    if len(line) + 1 < width:
        line += " " * (width - len(line) - 1)
    return line + "|"


def render_frame(grid: Sequence[int], size: int, status: str, score: int, step: str) -> str:
    """
    Render a board as a bordered text frame.

    Parameters
    ----------
    grid : Sequence[int]
        Row-major board.
    size : int
        Side length of the board.
    status : str
        Console mode shown in the head line.
    score : int
        Score shown in the head line.
    step : str
        Step indicator shown in the head line.

    Returns
    -------
    str
        The multi-line frame, without trailing newline.

    Notes
    -----
    - Cells are wide enough for the largest tile; the frame widens to fit the head line.
    - Empty cells are blank.
    """
    largest = max(max(grid), 1)
    cell_width = len(str(largest))

    # ##: Widen the cells so the board is at least as wide as the head line.
    grid_width = (cell_width + 3) * size + 1
    head_width = len(head_line(status, score, step))
    cell_width = (max(grid_width, head_width) + size - 2) // size - 3
    frame_width = (cell_width + 3) * size + 1

    outer_border = "=" * frame_width
    inner_border = "-" * frame_width

    lines = [outer_border, head_line(status, score, step, frame_width), outer_border]
    for row in range(size):
        if row > 0:
            lines.append(inner_border)
        cells = grid[row * size : (row + 1) * size]
        lines.append("".join(f"| {_center(number, cell_width)} " for number in cells) + "|")
    lines.append(outer_border)
    return "\n".join(lines)
