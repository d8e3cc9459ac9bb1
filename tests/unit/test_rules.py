"""
Unit tests for the matching rules.
"""

import pytest

from cardmatch.core import Card, Deck, can_play, find_playable_index, is_game_finished


class TestCanPlay:

    @pytest.mark.parametrize("card,reference,expected", [
        ("5S", "5H", True),    # same rank
        ("2H", "KH", True),    # same suit
        ("5H", "5H", True),    # identical
        ("2C", "3D", False),
        ("AS", "KH", False),
    ])
    def test_can_play(self, card, reference, expected):
        assert can_play(Card.from_str(card), Card.from_str(reference)) is expected


class TestFindPlayableIndex:

    def test_first_match_wins(self, deck_of):
        hand = deck_of("2C", "5S", "9H", "5D")
        assert find_playable_index(hand, Card.from_str("5H")) == 1

    def test_no_match(self, deck_of):
        hand = deck_of("2C", "5S")
        assert find_playable_index(hand, Card.from_str("3D")) is None

    def test_empty_hand(self):
        assert find_playable_index(Deck(), Card.from_str("3D")) is None


class TestIsGameFinished:

    def test_both_hands_hold_cards(self, deck_of):
        assert not is_game_finished(deck_of("2C"), deck_of("3D", "4H"))

    def test_player_one_empty(self, deck_of):
        assert is_game_finished(Deck(), deck_of("3D"))

    def test_player_two_empty(self, deck_of):
        assert is_game_finished(deck_of("3D"), Deck())

    def test_both_empty(self):
        assert is_game_finished(Deck(), Deck())
