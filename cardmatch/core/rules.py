"""
Matching rules.

A card can be played on the reference card when it shares its rank or
its suit. The game ends as soon as either hand is empty.
"""

from typing import Iterable, Optional

from .cards import Card, Deck


def can_play(card: Card, reference: Card) -> bool:
    """Return True when card matches reference by rank or by suit."""
    return card.rank == reference.rank or card.suit == reference.suit


def find_playable_index(hand: Iterable[Card], reference: Card) -> Optional[int]:
    """
    Find the first playable card in a hand.

    Args:
        hand: Cards to scan, front to back
        reference: The card to match against

    Returns:
        Index of the first matching card, or None when nothing matches
    """
    for index, card in enumerate(hand):
        if can_play(card, reference):
            return index
    return None


def is_game_finished(hand_one: Deck, hand_two: Deck) -> bool:
    """Return True when at least one hand has no cards left."""
    return len(hand_one) == 0 or len(hand_two) == 0
