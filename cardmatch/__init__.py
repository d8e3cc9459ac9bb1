"""
Two-player card matching game.

This package contains the deck and turn engine, the game controller and a
command line interface for playing a match-by-suit-or-rank card game.
"""

__version__ = "0.1.0"
__author__ = "Card Match Development Team"
