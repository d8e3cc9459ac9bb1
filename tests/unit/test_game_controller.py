"""
Unit tests for GameController.
"""

import random

import pytest

from cardmatch.controller import GameConfiguration, GameController
from cardmatch.core import (
    Deck, EmptyDeckError, EventType, GameConfigError, GamePhase, GameState,
    GameStateError, PlayerTurn,
)


@pytest.fixture
def config():
    return GameConfiguration(pack_count=1, seed=3)


class TestSetup:

    def test_deals_eight_cards_each(self, config):
        controller = GameController(config)
        state = controller.setup()

        assert len(state.player_one) == 8
        assert len(state.player_two) == 8
        assert len(state.draw_pile) == 36
        assert state.discard_pile.is_empty
        assert state.current_player is PlayerTurn.PLAYER_ONE

    def test_deals_alternately_and_sorts_hands(self, config):
        expected = Deck.initialize(1)
        expected.shuffle(random.Random(3))
        dealt = [expected.draw_card() for _ in range(16)]

        state = GameController(config).setup()

        assert state.player_one.cards == sorted(dealt[0::2], key=lambda card: card.rank)
        assert state.player_two.cards == sorted(dealt[1::2], key=lambda card: card.rank)
        assert state.draw_pile.cards == expected.cards

    def test_emits_dealt_hands(self, config, event_bus):
        GameController(config, event_bus=event_bus).setup()

        dealt = event_bus.get_event_history(EventType.CARDS_DEALT)
        assert [event.data['player'] for event in dealt] == [1, 2]
        assert all(len(event.data['cards']) == 8 for event in dealt)

    def test_hand_size_too_large(self):
        controller = GameController(GameConfiguration(pack_count=1, hand_size=26))
        with pytest.raises(GameConfigError):
            controller.setup()

    def test_state_before_setup(self, config):
        controller = GameController(config)
        assert not controller.is_set_up
        with pytest.raises(GameStateError):
            controller.play_turn()


class TestPlayTurn:

    def test_winning_play_finishes_game(self, config, deck_of):
        state = GameState(
            draw_pile=deck_of("9D", "9C"),
            player_one=deck_of("5S"),
            player_two=deck_of("2C", "3C"),
            discard_pile=deck_of("5H"),
        )
        controller = GameController(config, state=state)

        outcome = controller.play_turn()

        assert outcome.played
        assert controller.is_game_finished()
        assert state.phase is GamePhase.FINISHED
        assert state.winner is PlayerTurn.PLAYER_ONE
        assert state.current_player is PlayerTurn.PLAYER_TWO
        assert state.turn_count == 1

        result = controller.get_result()
        assert result.winner is PlayerTurn.PLAYER_ONE
        assert result.turn_count == 1
        assert result.loser_hand_size == 2

        with pytest.raises(GameStateError):
            controller.play_turn()

    def test_turns_alternate(self, config, deck_of):
        state = GameState(
            draw_pile=deck_of("4S", "JD", "KD"),
            player_one=deck_of("2C", "8S"),
            player_two=deck_of("7D", "9S"),
            discard_pile=deck_of("5H"),
        )
        controller = GameController(config, state=state)

        first = controller.play_turn()
        second = controller.play_turn()

        assert first.player is PlayerTurn.PLAYER_ONE
        assert second.player is PlayerTurn.PLAYER_TWO
        assert state.current_player is PlayerTurn.PLAYER_ONE
        assert not controller.is_game_finished()
        with pytest.raises(GameStateError):
            controller.get_result()

    def test_reference_card_is_set_aside(self, config, deck_of):
        state = GameState(
            draw_pile=deck_of("2D", "9C", "KH"),
            player_one=deck_of("3H", "4C"),
            player_two=deck_of("6S"),
        )
        controller = GameController(config, state=state)

        controller.play_turn()

        assert [card.short_str() for card in state.set_aside] == ["KH"]
        assert state.total_cards() == 6

    def test_exhausted_piles_abort_the_turn(self, config, deck_of):
        state = GameState(
            draw_pile=deck_of("4S", "KD"),
            player_one=deck_of("2C"),
            player_two=deck_of("7D"),
            discard_pile=deck_of("5H"),
        )
        controller = GameController(config, state=state)

        controller.play_turn()
        controller.play_turn()
        assert state.discard_pile.is_empty

        with pytest.raises(EmptyDeckError):
            controller.play_turn()
        assert state.turn_count == 2


class TestStartGame:

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_plays_until_a_hand_is_empty(self, seed, event_bus):
        controller = GameController(GameConfiguration(pack_count=2, seed=seed), event_bus=event_bus)

        result = controller.start_game()
        state = controller.state

        assert state.is_finished()
        assert len(state.hand_for(result.winner)) == 0
        assert len(state.hand_for(result.winner.other())) == result.loser_hand_size > 0
        assert state.total_cards() == 104
        assert result.cards_set_aside == len(state.set_aside) >= 1

        history = event_bus.get_event_history()
        assert history[0].event_type == EventType.CARDS_DEALT
        assert event_bus.get_event_history(EventType.GAME_STARTED)
        assert history[-1].event_type == EventType.GAME_ENDED
        assert history[-1].data == {'winner': result.winner.number, 'turns': result.turn_count}

    def test_same_seed_same_game(self):
        first = GameController(GameConfiguration(pack_count=3, seed=11)).start_game()
        second = GameController(GameConfiguration(pack_count=3, seed=11)).start_game()

        assert first == second

    def test_finished_game_is_not_replayed(self, event_bus):
        controller = GameController(GameConfiguration(pack_count=2, seed=4), event_bus=event_bus)
        first = controller.start_game()

        second = controller.start_game()

        assert second == first
        assert len(event_bus.get_event_history(EventType.GAME_STARTED)) == 1
        assert len(event_bus.get_event_history(EventType.GAME_ENDED)) == 1

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_set_aside_cards_never_return_to_play(self, seed):
        controller = GameController(GameConfiguration(pack_count=2, seed=seed))
        controller.start_game()
        state = controller.state

        in_play = (state.draw_pile.cards + state.player_one.cards
                   + state.player_two.cards + state.discard_pile.cards)
        assert not {id(card) for card in state.set_aside} & {id(card) for card in in_play}
        assert len(in_play) + len(state.set_aside) == 104
