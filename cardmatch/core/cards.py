"""
Card and deck data structures.

Card is an immutable suit/rank value. Deck is the ordered container used
for the draw pile, both hands and the discard pile; its last card is the
top of the pile.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .enums import Suit, Rank
from .exceptions import EmptyDeckError, GameConfigError

logger = logging.getLogger(__name__)

MIN_PACKS = 1
MAX_PACKS = 10


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Compared and hashed by value; ordering only looks at the rank.
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank!r}")

    def __str__(self) -> str:
        """
        Return the display text of the card.

        Returns:
            str: "<Rank> of <Suit>", e.g. "Five of Spade"
        """
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def short_str(self) -> str:
        """Compact form, rank code then suit letter, e.g. "5S"."""
        return f"{self.rank.symbol}{self.suit.symbol}"

    @classmethod
    def from_str(cls, card_str: str) -> "Card":
        """
        Parse the compact form produced by short_str.

        Args:
            card_str: Rank code followed by suit letter, e.g. "AH" or "10C"

        Returns:
            Card: The parsed card

        Raises:
            ValueError: When the text is not a valid card
        """
        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1].upper()
        suit_map = {suit.symbol: suit for suit in Suit}
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], Rank.from_symbol(rank_str))


class Deck:
    """
    An ordered, growable sequence of cards.

    Supports building from packs, shuffling with an injected random source,
    drawing from and adding to the top, and sorting by rank.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        """
        Initialize the deck.

        Args:
            cards: Initial cards, bottom first. Empty when omitted.
        """
        self._cards: List[Card] = list(cards) if cards is not None else []

    @classmethod
    def initialize(cls, pack_count: int) -> "Deck":
        """
        Build an unshuffled deck from whole packs.

        Cards are created in (pack, suit, rank) nested order.

        Args:
            pack_count: Number of 52-card packs, 1 to 10

        Returns:
            Deck: A deck holding 52 * pack_count cards

        Raises:
            GameConfigError: When pack_count is out of range
        """
        if not MIN_PACKS <= pack_count <= MAX_PACKS:
            raise GameConfigError(
                f"Pack count must be between {MIN_PACKS} and {MAX_PACKS}: {pack_count}"
            )

        deck = cls()
        for _ in range(pack_count):
            for suit in Suit:
                for rank in Rank:
                    deck.add_card(Card(suit, rank))
        logger.debug(f"Initialized deck with {len(deck)} cards from {pack_count} pack(s)")
        return deck

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        Shuffle in place with a backward Fisher-Yates pass.

        Args:
            rng: Random source; a fresh unseeded generator when omitted
        """
        rng = rng or random.Random()
        for i in range(len(self._cards) - 1, 0, -1):
            j = rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def add_card(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put several cards on top, keeping their order."""
        self._cards.extend(cards)

    def draw_card(self) -> Card:
        """
        Remove and return the top card.

        Returns:
            Card: The former last card

        Raises:
            EmptyDeckError: When the deck is empty
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop()

    def remove_at(self, index: int) -> Card:
        """Remove the card at index, keeping the order of the rest."""
        return self._cards.pop(index)

    def take_all(self) -> List[Card]:
        """Empty the deck and return its cards, bottom first."""
        cards, self._cards = self._cards, []
        return cards

    def sort_by_rank(self) -> None:
        """Sort ascending by rank; suits keep their relative order."""
        self._cards.sort(key=lambda card: card.rank)

    def display(self) -> List[str]:
        """Return "<Rank> of <Suit>" for every card, front to back."""
        return [str(card) for card in self._cards]

    @property
    def top_card(self) -> Optional[Card]:
        """The last card, or None when the deck is empty."""
        return self._cards[-1] if self._cards else None

    @property
    def cards(self) -> List[Card]:
        """A copy of the cards, bottom first."""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def __repr__(self) -> str:
        return f"Deck(cards={self._cards!r})"
