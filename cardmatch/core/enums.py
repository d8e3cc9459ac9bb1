"""
Game enumeration definitions.

Contains the suits, ranks, turn indicator and game phase used by the
card matching game.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    Card suit enumeration.

    Declared in deck-building order: Club, Spade, Heart, Diamond.
    """

    CLUB = "Club"
    SPADE = "Spade"
    HEART = "Heart"
    DIAMOND = "Diamond"

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Single-letter code used by the compact card form."""
        return self.value[0]


class Rank(IntEnum):
    """
    Card rank enumeration.

    Thirteen ordered values, Two lowest and Ace highest.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """Rank name as shown to players, e.g. "Five"."""
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        """Short rank code: digits for 2-9, then T, J, Q, K, A."""
        if self.value <= 9:
            return str(self.value)
        return {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        for rank in cls:
            if rank.symbol == symbol.upper():
                return rank
        if symbol == "10":
            return cls.TEN
        raise ValueError(f"Invalid rank: {symbol}")


class PlayerTurn(Enum):
    """Whose turn it is."""

    PLAYER_ONE = 0
    PLAYER_TWO = 1

    @property
    def number(self) -> int:
        """One-based player number used in narration."""
        return self.value + 1

    def other(self) -> "PlayerTurn":
        """Return the opposing player."""
        if self is PlayerTurn.PLAYER_ONE:
            return PlayerTurn.PLAYER_TWO
        return PlayerTurn.PLAYER_ONE


class GamePhase(Enum):
    """Game loop states."""

    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


def get_all_suits() -> List[Suit]:
    """Get all card suits in deck-building order."""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Get all card ranks in ascending order."""
    return list(Rank)
