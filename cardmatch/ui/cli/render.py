"""CLI rendering.

Turns game events into the line-oriented narration shown on the terminal,
keeping display logic out of the core game logic.
"""

from typing import Iterable, List, Optional

from cardmatch.core import Card, EventType, GameEvent


class CLIRenderer:
    """CLI renderer.

    Every method is a pure function of its arguments and returns text;
    printing is left to the caller.
    """

    @staticmethod
    def format_card(card: Card) -> str:
        return str(card)

    @staticmethod
    def render_hand(player_number: int, cards: Iterable[Card]) -> str:
        """Render a player's hand as a heading followed by one card per line."""
        lines = [f"Player {player_number}'s cards:"]
        lines.extend(CLIRenderer.format_card(card) for card in cards)
        return "\n".join(lines)

    @staticmethod
    def render_turn_header(player_number: int, top_card: Card, last_played: bool) -> str:
        """Render the start of a turn.

        Args:
            player_number: One-based player number
            top_card: The reference card for the turn
            last_played: True when top_card is the last played card rather
                than a card just drawn from the hidden deck
        """
        line = f"Player {player_number}'s turn - Top card: {CLIRenderer.format_card(top_card)}"
        if last_played:
            line += " (last played)"
        return "\n" + line

    @staticmethod
    def render_card_played(player_number: int, card: Card) -> str:
        return f"Player {player_number} played card {CLIRenderer.format_card(card)}"

    @staticmethod
    def render_card_drawn(player_number: int) -> str:
        return f"Player {player_number} picks a card from the hidden deck"

    @staticmethod
    def render_game_over(winner: Optional[int]) -> str:
        lines: List[str] = []
        if winner is not None:
            lines.append(f"\nPlayer {winner} wins!")
        lines.append("\nGame over!")
        return "\n".join(lines)

    @staticmethod
    def render_event(event: GameEvent) -> Optional[str]:
        """Render a game event, or return None for events with no narration."""
        data = event.data
        event_type = event.event_type

        if event_type == EventType.CARDS_DEALT:
            prefix = "\n" if data['player'] > 1 else ""
            return prefix + CLIRenderer.render_hand(data['player'], data['cards'])
        if event_type == EventType.GAME_STARTED:
            return "\nGame started!"
        if event_type == EventType.TURN_STARTED:
            return CLIRenderer.render_turn_header(data['player'], data['top_card'], data['last_played'])
        if event_type == EventType.CARD_PLAYED:
            return CLIRenderer.render_card_played(data['player'], data['card'])
        if event_type == EventType.CARD_DRAWN:
            return CLIRenderer.render_card_drawn(data['player'])
        if event_type == EventType.HAND_SHOWN:
            return "\n" + CLIRenderer.render_hand(data['player'], data['cards'])
        if event_type == EventType.DECK_RESHUFFLED:
            return "\nReshuffling the deck!"
        if event_type == EventType.GAME_ENDED:
            return CLIRenderer.render_game_over(data.get('winner'))
        return None
