"""
Controller layer for the card matching game.

This package provides the application controller that bridges the core
game logic with the user interface layers.
"""

from .game_controller import GameController
from .dto import GameConfiguration, GameResult, DEFAULT_HAND_SIZE
from .decorators import logged_action

__all__ = [
    'GameController',
    'GameConfiguration', 'GameResult', 'DEFAULT_HAND_SIZE',
    'logged_action',
]
