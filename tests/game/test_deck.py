import random

import pytest

from exceptions import EmptyDeckError
from game.card import Card, CardSuit, CardValue
from game.deck import Deck


class TestCard:
    def test_card_str(self):
        assert str(Card(10, CardSuit.CLUBS)) == "10♣"
        assert str(Card(14, CardSuit.SPADES)) == "A♠"
        assert str(Card(CardValue.QUEEN, CardSuit.HEARTS)) == "Q♥"
        assert str(Card(2, "♦")) == "2♦"

    def test_card_equality(self):
        assert Card(5, CardSuit.HEARTS) == Card(5, CardSuit.HEARTS)
        assert Card(5, CardSuit.HEARTS) != Card(5, CardSuit.SPADES)
        assert len({Card(5, CardSuit.HEARTS), Card(5, CardSuit.HEARTS)}) == 1

    @pytest.mark.parametrize("value", [0, 1, 15])
    def test_invalid_value(self, value):
        with pytest.raises(ValueError):
            Card(value, CardSuit.CLUBS)

    def test_invalid_suit(self):
        with pytest.raises(ValueError):
            Card(10, "X")


class TestDeck:
    def test_deck_initialization(self):
        """Test that a new deck has all 52 distinct cards."""
        deck = Deck()
        assert len(deck) == 52
        assert deck.remaining() == 52
        assert len(set(deck.cards)) == 52

    def test_deal_single_card(self):
        deck = Deck()
        card = deck.deal()

        assert isinstance(card, Card)
        assert len(deck) == 51
        assert card not in deck.cards

    def test_deal_from_empty_deck(self):
        """Test that dealing past the last card raises EmptyDeckError."""
        deck = Deck()
        dealt = [deck.deal() for _ in range(52)]

        assert len(set(dealt)) == 52
        with pytest.raises(EmptyDeckError):
            deck.deal()

    def test_str_lists_cards_in_deal_order(self):
        deck = Deck()
        listed = str(deck).split("\n")

        assert len(listed) == 52
        assert [str(deck.deal()) for _ in range(52)] == listed
        assert str(deck) == ""

    def test_seeded_shuffle_is_reproducible(self):
        first = Deck(rng=random.Random(7))
        second = Deck(rng=random.Random(7))
        assert first.cards == second.cards
