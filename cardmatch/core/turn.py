"""
Turn resolution.

take_turn is the single state transition of the game: pick the reference
card, play the first matching card from the hand or draw one, and recycle
the discard pile into the draw pile when the draw pile runs out.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .cards import Card, Deck
from .enums import PlayerTurn
from .events import EventBus, EventType
from .rules import find_playable_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnOutcome:
    """
    What happened during one turn.

    Attributes:
        player: The player who took the turn
        reference_card: The card the hand was matched against
        reference_from_draw_pile: True when the reference card was drawn
            because the discard pile was empty; that card leaves play
        played_card: The card moved to the discard pile, if any
        drawn_card: The card added to the hand, if any
        reshuffled: Whether the discard pile was recycled after the turn
        hand: The player's cards after the turn
    """

    player: PlayerTurn
    reference_card: Card
    reference_from_draw_pile: bool
    played_card: Optional[Card]
    drawn_card: Optional[Card]
    reshuffled: bool
    hand: List[Card]

    @property
    def played(self) -> bool:
        return self.played_card is not None


def reshuffle(draw_pile: Deck, discard_pile: Deck, rng: Optional[random.Random] = None) -> int:
    """
    Move the whole discard pile onto the draw pile and shuffle it.

    Args:
        draw_pile: The pile receiving the cards
        discard_pile: The pile being emptied
        rng: Random source for the shuffle

    Returns:
        int: Number of cards moved
    """
    moved = discard_pile.take_all()
    draw_pile.extend(moved)
    draw_pile.shuffle(rng)
    logger.debug(f"Reshuffled {len(moved)} discarded cards into the draw pile")
    return len(moved)


def take_turn(draw_pile: Deck, hand: Deck, discard_pile: Deck, current_player: PlayerTurn,
              rng: Optional[random.Random] = None,
              event_bus: Optional[EventBus] = None) -> TurnOutcome:
    """
    Play one turn for current_player.

    When the discard pile is empty a card is drawn to serve as the reference
    card; it is only compared against and is not put on any pile. Otherwise
    the top of the discard pile is the reference. The first card in the hand
    matching its rank or suit is played onto the discard pile, else one card
    is drawn into the hand. If the draw pile is then empty the entire discard
    pile, including a card played this turn, becomes the new draw pile.

    Args:
        draw_pile: Shared face-down pile
        hand: The current player's cards
        discard_pile: Shared face-up pile
        current_player: Owner of hand
        rng: Random source used if a reshuffle happens
        event_bus: Receives the turn narration events

    Returns:
        TurnOutcome: Summary of the turn

    Raises:
        EmptyDeckError: When a draw is needed and the draw pile is empty
    """
    player_number = current_player.number

    reference = discard_pile.top_card
    reference_from_draw_pile = reference is None
    if reference_from_draw_pile:
        reference = draw_pile.draw_card()

    _emit(event_bus, EventType.TURN_STARTED, player=player_number,
          top_card=reference, last_played=not reference_from_draw_pile)

    played_card = None
    drawn_card = None
    match_index = find_playable_index(hand, reference)
    if match_index is not None:
        played_card = hand.remove_at(match_index)
        discard_pile.add_card(played_card)
        logger.debug(f"Player {player_number} played {played_card!r} on {reference!r}")
        _emit(event_bus, EventType.CARD_PLAYED, player=player_number, card=played_card)
    else:
        drawn_card = draw_pile.draw_card()
        hand.add_card(drawn_card)
        logger.debug(f"Player {player_number} drew a card, hand size {len(hand)}")
        _emit(event_bus, EventType.CARD_DRAWN, player=player_number, card=drawn_card)

    _emit(event_bus, EventType.HAND_SHOWN, player=player_number, cards=hand.cards)

    reshuffled = False
    if draw_pile.is_empty:
        moved = reshuffle(draw_pile, discard_pile, rng)
        reshuffled = True
        _emit(event_bus, EventType.DECK_RESHUFFLED, cards_moved=moved)

    return TurnOutcome(
        player=current_player,
        reference_card=reference,
        reference_from_draw_pile=reference_from_draw_pile,
        played_card=played_card,
        drawn_card=drawn_card,
        reshuffled=reshuffled,
        hand=hand.cards,
    )


def _emit(event_bus: Optional[EventBus], event_type: EventType, **data) -> None:
    if event_bus is not None:
        event_bus.emit_simple(event_type, source="turn", **data)
