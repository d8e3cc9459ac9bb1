"""
Core game logic for the card matching game.

This package contains the card model, the deck container, the matching
rules, the turn resolver, the game state and the event bus.
"""

import random
from typing import Optional

from .enums import Suit, Rank, PlayerTurn, GamePhase, get_all_suits, get_all_ranks
from .exceptions import CardGameError, EmptyDeckError, GameStateError, GameConfigError
from .cards import Card, Deck, MIN_PACKS, MAX_PACKS
from .rules import can_play, find_playable_index, is_game_finished
from .events import EventBus, EventType, GameEvent
from .turn import TurnOutcome, take_turn, reshuffle
from .state import GameState


def new_draw_pile(pack_count: int, rng: Optional[random.Random] = None) -> Deck:
    """Create a shuffled draw pile.

    Args:
        pack_count: Number of packs, 1 to 10.
        rng: Random source for the shuffle.

    Returns:
        A shuffled deck of 52 * pack_count cards.
    """
    deck = Deck.initialize(pack_count)
    deck.shuffle(rng)
    return deck


__all__ = [
    # Enums
    'Suit', 'Rank', 'PlayerTurn', 'GamePhase',

    # Errors
    'CardGameError', 'EmptyDeckError', 'GameStateError', 'GameConfigError',

    # Cards and piles
    'Card', 'Deck', 'MIN_PACKS', 'MAX_PACKS',

    # Rules and turns
    'can_play', 'find_playable_index', 'is_game_finished',
    'TurnOutcome', 'take_turn', 'reshuffle',

    # State and events
    'GameState', 'EventBus', 'EventType', 'GameEvent',

    # Convenience functions
    'new_draw_pile', 'get_all_suits', 'get_all_ranks',
]
