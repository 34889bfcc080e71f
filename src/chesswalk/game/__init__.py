"""Game layer: random game driver, move choosers, configuration.

Quick start::

    from chesswalk.game import RandomChooser, generate_random_game

    game = generate_random_game(4, RandomChooser(seed=7))
    print(game.move_text, game.final_fen, game.terminated)
"""

from chesswalk.game.choosers import MoveChooser, RandomChooser, ScriptedChooser
from chesswalk.game.config import GameConfig
from chesswalk.game.driver import (
    GamePhase,
    MoveRecord,
    RandomGame,
    RandomGameDriver,
    generate_random_game,
)

__all__ = [
    "GameConfig",
    "GamePhase",
    "MoveChooser",
    "MoveRecord",
    "RandomChooser",
    "RandomGame",
    "RandomGameDriver",
    "ScriptedChooser",
    "generate_random_game",
]
