"""
Game state for the card matching game.

Holds the three shared piles, both hands and the turn indicator. The
state stores data only; rules live in rules.py and turn.py.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .cards import Card, Deck
from .enums import GamePhase, PlayerTurn


@dataclass
class GameState:
    """
    Mutable state of one game.

    Attributes:
        draw_pile: Face-down pile both players draw from
        player_one: Player One's hand
        player_two: Player Two's hand
        discard_pile: Face-up pile of played cards
        current_player: Whose turn is next
        phase: Whether the game is still running
        turn_count: Number of completed turns
        winner: The player who emptied their hand
        set_aside: Reference cards drawn while the discard pile was empty.
            Kept only for card accounting; never dealt, drawn or played again
    """

    draw_pile: Deck = field(default_factory=Deck)
    player_one: Deck = field(default_factory=Deck)
    player_two: Deck = field(default_factory=Deck)
    discard_pile: Deck = field(default_factory=Deck)
    current_player: PlayerTurn = PlayerTurn.PLAYER_ONE
    phase: GamePhase = GamePhase.IN_PROGRESS
    turn_count: int = 0
    winner: Optional[PlayerTurn] = None
    set_aside: List[Card] = field(default_factory=list)

    def hand_for(self, player: PlayerTurn) -> Deck:
        """Return the hand owned by player."""
        if player is PlayerTurn.PLAYER_ONE:
            return self.player_one
        return self.player_two

    @property
    def current_hand(self) -> Deck:
        return self.hand_for(self.current_player)

    @property
    def top_card(self) -> Optional[Card]:
        return self.discard_pile.top_card

    def cards_in_play(self) -> int:
        """Cards in the draw pile, both hands and the discard pile."""
        return (len(self.draw_pile) + len(self.player_one)
                + len(self.player_two) + len(self.discard_pile))

    def total_cards(self) -> int:
        """Cards in play plus the set-aside reference cards."""
        return self.cards_in_play() + len(self.set_aside)

    def is_finished(self) -> bool:
        return self.phase is GamePhase.FINISHED

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the state for logging and inspection."""
        top = self.top_card
        return {
            'phase': self.phase.value,
            'current_player': self.current_player.number,
            'turn_count': self.turn_count,
            'draw_pile': len(self.draw_pile),
            'discard_pile': len(self.discard_pile),
            'top_card': str(top) if top else None,
            'hands': {
                1: self.player_one.display(),
                2: self.player_two.display(),
            },
            'set_aside': len(self.set_aside),
            'winner': self.winner.number if self.winner else None,
        }
