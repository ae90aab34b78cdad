# -*- coding: utf-8 -*-
"""
Play 2048 in the terminal, and step through the history of the game.

Commands
--------
play mode   : u/up, d/down, l/left, r/right
replay mode : p/prev, n/next, s/set <step>
both        : switch, q/quit/exit
An empty line repeats the last valid command.
"""
import logging
from argparse import ArgumentParser
from collections.abc import Callable
from enum import Enum

from replay2048.config import EngineConfig
from replay2048.core.indexer import Direction
from replay2048.envs.engine import GameEngine
from replay2048.errors import InvalidConfiguration
from replay2048.utils.render import render_frame

_logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Console modes."""

    PLAY = "play"
    REPLAY = "replay"


PLAY_COMMANDS = {
    "u": Direction.UP,
    "up": Direction.UP,
    "d": Direction.DOWN,
    "down": Direction.DOWN,
    "l": Direction.LEFT,
    "left": Direction.LEFT,
    "r": Direction.RIGHT,
    "right": Direction.RIGHT,
}
EXIT_COMMANDS = {"q", "quit", "exit"}
SET_PREFIXES = ("s ", "set ")


class GameConsole:
    """
    Read-eval loop around a `GameEngine`.

    Parameters
    ----------
    engine : GameEngine
        The game to play.
    reader : Callable[[str], str], optional
        Reads one command given a prompt (default is `input`).
    writer : Callable[[str], None], optional
        Prints one message (default is `print`).
    """

    def __init__(
        self,
        engine: GameEngine,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], None] = print,
    ):
        self.engine = engine
        self.mode = Mode.PLAY
        self.replay_step = 0
        self._history: list[list[int]] = []
        self._last_command = ""
        self._reader = reader
        self._writer = writer

    @property
    def prompt(self) -> str:
        return f"{self.mode.value}:/> "

    def frame(self) -> str:
        """Render the board of the current mode."""
        if self.mode == Mode.PLAY:
            grid, step = self.engine.get_board(), str(self.engine.get_action_count())
        else:
            grid, step = self._history[self.replay_step], f"{self.replay_step}/{self.engine.get_action_count()}"
        return render_frame(grid, self.engine.size, self.mode.value, self.engine.get_score(), step)

    def show(self) -> None:
        self._writer(self.frame())

    def read_command(self) -> str | None:
        """
        Read the next non-empty command.

        Returns
        -------
        str | None
            The command, or None once the input is exhausted.
        """
        while True:
            try:
                command = self._reader(self.prompt).strip()
            except EOFError:
                return None
            if command:
                self._last_command = command
                return command
            if self._last_command:
                return self._last_command

    def handle(self, command: str) -> bool:
        """
        Execute one command.

        Parameters
        ----------
        command : str
            The raw command.

        Returns
        -------
        bool
            False if the command asks to leave, True otherwise.
        """
        lowered = command.lower()
        if lowered in EXIT_COMMANDS:
            return False

        if lowered == "switch":
            self.switch_mode()
            self.show()
        elif self.mode == Mode.PLAY and lowered in PLAY_COMMANDS:
            self._play(PLAY_COMMANDS[lowered])
        elif self.mode == Mode.REPLAY and lowered in ("p", "prev"):
            self._move_to(self.replay_step - 1)
        elif self.mode == Mode.REPLAY and lowered in ("n", "next"):
            self._move_to(self.replay_step + 1)
        elif self.mode == Mode.REPLAY and lowered.startswith(SET_PREFIXES):
            self._set_step(command.split(maxsplit=1)[1])
        else:
            self._writer(f"invalid command: {command}")
            self._last_command = ""
        return True

    def switch_mode(self) -> None:
        """Toggle between playing and replaying the game."""
        if self.mode == Mode.PLAY:
            self._history = self.engine.get_history()
            self.replay_step = 0
            self.mode = Mode.REPLAY
        else:
            self._history = []
            self.replay_step = 0
            self.mode = Mode.PLAY
        _logger.debug("Switched to %s mode.", self.mode.value)

    def run(self) -> None:
        """Show the board and process commands until the player leaves."""
        self.show()
        command = self.read_command()
        while command is not None and self.handle(command):
            command = self.read_command()

    def _play(self, direction: Direction) -> None:
        if not self.engine.apply_direction(direction):
            return
        self.show()
        if self.engine.is_game_over():
            self._writer("game over!")

    def _move_to(self, step: int) -> None:
        if 0 <= step < len(self._history):
            self.replay_step = step
            self.show()

    def _set_step(self, value: str) -> None:
        try:
            step = int(value)
        except ValueError:
            self._writer(f"invalid step: {value}")
            self._last_command = ""
            return
        self.replay_step = min(max(step, 0), len(self._history) - 1)
        self.show()


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(description="Play 2048 and replay the game history.")
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--random-factor-of-2", type=float, default=0.75)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    config = EngineConfig(size=args.size, random_factor_of_2=args.random_factor_of_2, seed=args.seed)
    try:
        engine = GameEngine.from_config(config)
    except InvalidConfiguration as error:
        parser.error(str(error))
    GameConsole(engine).run()


if __name__ == "__main__":
    main()
