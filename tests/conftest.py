"""
Shared pytest fixtures for the card matching game tests.
"""

import random

import pytest

from cardmatch.core import Card, Deck, EventBus


def make_deck(*codes: str) -> Deck:
    """Build a deck from compact card codes, bottom first."""
    return Deck(Card.from_str(code) for code in codes)


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles."""
    return random.Random(42)


@pytest.fixture
def event_bus():
    """Fresh event bus per test."""
    return EventBus()


@pytest.fixture
def deck_of():
    """Factory building decks from compact codes such as "5S" or "10H"."""
    return make_deck
