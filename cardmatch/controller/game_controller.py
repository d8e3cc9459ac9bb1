"""
Card matching game controller.

Bridges the core engine and the user interface: builds and deals the
piles, runs the turn loop until one hand is empty and reports the result.
"""

import logging
import random
from typing import Optional

from ..core import (
    Deck, EventBus, EventType, GameConfigError, GamePhase, GameState, GameStateError,
    PlayerTurn, TurnOutcome, is_game_finished, take_turn,
)
from .decorators import logged_action
from .dto import GameConfiguration, GameResult


class GameController:
    """Card matching game controller.

    Responsibilities:
    - build, shuffle and deal the draw pile
    - alternate turns between the two players
    - detect the end of the game and the winner
    - publish game lifecycle events

    Dependencies (random source, event bus, logger) are injected so a game
    can be replayed deterministically.
    """

    def __init__(
        self,
        config: GameConfiguration,
        state: Optional[GameState] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize the controller.

        Args:
            config: Game configuration
            state: A game in progress to continue; setup() builds one when None
            rng: Random source; built from config.seed when None
            event_bus: Event bus for narration; a private bus when None
            logger: Logger; the module logger when None
        """
        self._config = config
        self._rng = rng or config.create_rng()
        self._event_bus = event_bus or EventBus()
        self._logger = logger or logging.getLogger(__name__)
        self._state = state
        self._reshuffle_count = 0

    @property
    def config(self) -> GameConfiguration:
        return self._config

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def state(self) -> GameState:
        """The current game state.

        Raises:
            GameStateError: If setup has not been run yet
        """
        if self._state is None:
            raise GameStateError("Game has not been set up")
        return self._state

    @property
    def is_set_up(self) -> bool:
        return self._state is not None

    @logged_action("Game setup")
    def setup(self) -> GameState:
        """Create a fresh game.

        Builds the draw pile from the configured number of packs, shuffles
        it, deals hand_size cards to each player alternately starting with
        Player One and sorts both hands by rank.

        Returns:
            The new game state

        Raises:
            GameConfigError: If the hands would use up the whole draw pile
        """
        draw_pile = Deck.initialize(self._config.pack_count)
        if 2 * self._config.hand_size >= len(draw_pile):
            raise GameConfigError(
                f"Cannot deal {self._config.hand_size} cards each from {len(draw_pile)} cards"
            )
        draw_pile.shuffle(self._rng)

        state = GameState(draw_pile=draw_pile)
        for _ in range(self._config.hand_size):
            state.player_one.add_card(draw_pile.draw_card())
            state.player_two.add_card(draw_pile.draw_card())

        for player in PlayerTurn:
            hand = state.hand_for(player)
            hand.sort_by_rank()
            self._event_bus.emit_simple(EventType.CARDS_DEALT, source="controller",
                                        player=player.number, cards=hand.cards)

        self._state = state
        self._reshuffle_count = 0
        self._logger.info(f"Dealt {self._config.hand_size} cards each from "
                          f"{self._config.pack_count} pack(s); {len(draw_pile)} left to draw")
        return state

    def is_game_finished(self) -> bool:
        """Return True when either hand is empty."""
        state = self.state
        return is_game_finished(state.player_one, state.player_two)

    def play_turn(self) -> TurnOutcome:
        """Run one turn for the current player and pass the turn on.

        Returns:
            The outcome of the turn

        Raises:
            GameStateError: If the game is not set up or already finished
            EmptyDeckError: If a draw is required from an exhausted pile
        """
        state = self.state
        if state.is_finished():
            raise GameStateError("Game is already finished")

        player = state.current_player
        outcome = take_turn(
            state.draw_pile,
            state.hand_for(player),
            state.discard_pile,
            player,
            rng=self._rng,
            event_bus=self._event_bus,
        )

        if outcome.reference_from_draw_pile:
            state.set_aside.append(outcome.reference_card)
        if outcome.reshuffled:
            self._reshuffle_count += 1

        state.turn_count += 1
        if self.is_game_finished():
            state.phase = GamePhase.FINISHED
            state.winner = player if len(state.hand_for(player)) == 0 else player.other()
        state.current_player = player.other()

        self._logger.debug(f"Turn {state.turn_count}: {state.to_dict()}")
        return outcome

    @logged_action("Game loop")
    def start_game(self) -> GameResult:
        """Play the game to the end.

        Sets the game up first if needed, then alternates turns until one
        hand is empty.

        Returns:
            The result of the finished game
        """
        if self._state is None:
            self.setup()

        state = self.state
        if state.is_finished():
            return self.get_result()

        self._event_bus.emit_simple(EventType.GAME_STARTED, source="controller")

        while not state.is_finished():
            self.play_turn()

        result = self.get_result()
        self._event_bus.emit_simple(EventType.GAME_ENDED, source="controller",
                                    winner=result.winner.number,
                                    turns=result.turn_count)
        self._logger.info(f"Player {result.winner.number} won after {result.turn_count} turns")
        return result

    def get_result(self) -> GameResult:
        """Summarize a finished game.

        Raises:
            GameStateError: If the game has not finished
        """
        state = self.state
        if not state.is_finished() or state.winner is None:
            raise GameStateError("Game is still in progress")

        return GameResult(
            winner=state.winner,
            turn_count=state.turn_count,
            reshuffle_count=self._reshuffle_count,
            cards_set_aside=len(state.set_aside),
            loser_hand_size=len(state.hand_for(state.winner.other())),
        )
