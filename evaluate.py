# -*- coding: utf-8 -*-
"""
Play random games and check that each history replays onto the final board.
"""
import logging
from collections import Counter
from typing import Dict

import numpy as np
from tqdm import trange

from replay2048 import Direction, GameEngine, InternalConsistencyFailure


def play_random_game(engine: GameEngine, generator: np.random.Generator, max_moves: int) -> GameEngine:
    """
    Play random directions until the game is over or ``max_moves`` moves were accepted.

    Parameters
    ----------
    engine : GameEngine
        The game to play, modified in place.
    generator : np.random.Generator
        Source of the random directions.
    max_moves : int
        Upper bound on the number of accepted moves.

    Returns
    -------
    GameEngine
        The same engine, once the game stopped.
    """
    directions = list(Direction)
    while engine.get_action_count() < max_moves and not engine.is_game_over():
        engine.apply_direction(directions[generator.integers(len(directions))])
    return engine


def evaluate(length: int = 10, size: int = 4, random_factor_of_2: float = 0.9, seed: int = 42) -> Dict[int, int]:
    """
    Play random games and audit the replay of each one.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        Side length of the boards (default is 4).
    random_factor_of_2 : float, optional
        Tile draw threshold (default is 0.9).
    seed : int, optional
        Base seed; game ``i`` uses ``seed + i`` (default is 42).

    Returns
    -------
    Dict[int, int]
        Frequency of the max tile reached.

    Raises
    ------
    InternalConsistencyFailure
        If a game history doesn't replay onto its final board.
    """
    generator = np.random.default_rng(seed)
    max_tiles = []

    with trange(length) as period:
        for num in period:
            engine = play_random_game(
                GameEngine(size=size, random_factor_of_2=random_factor_of_2, seed=seed + num),
                generator,
                max_moves=10_000,
            )

            # ##: Replay and compare to the live board.
            history = engine.get_history()
            if history[-1] != engine.get_board():
                raise InternalConsistencyFailure(f"Game {num} doesn't replay onto its final board.")

            max_tiles.append(max(engine.get_board()))

            # ##: Log.
            period.set_description(f"Audit: {num + 1}")
            period.set_postfix(score=engine.get_score(), moves=engine.get_action_count())

    return dict(Counter(max_tiles))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--random-factor-of-2", type=float, default=0.9)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    result = evaluate(length=args.games, size=args.size, random_factor_of_2=args.random_factor_of_2, seed=args.seed)
    print(f"Replay audit of {args.games} games, max tiles: {result}")
