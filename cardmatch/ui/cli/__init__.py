"""CLI user interface for the card matching game.

This package provides the command line implementation:
- CLI game driver
- renderer (display logic)
- input handler (user interaction)
"""

from .cli_game import CardMatchCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler

__all__ = [
    'CardMatchCLI',
    'CLIRenderer',
    'CLIInputHandler',
    'main',
]
