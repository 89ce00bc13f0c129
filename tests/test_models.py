"""Tests for cards, the deck, starting hands, and positions."""

import pytest

from range_chart.models.card import Card, Rank, Suit
from range_chart.models.deck import Deck
from range_chart.models.hand import StartingHand
from range_chart.models.position import DEFAULT_POSITIONS, Position


class TestCard:

    def test_parse(self):
        card = Card.parse("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES
        assert str(card) == "As"

    def test_parse_ten(self):
        assert Card.parse("10h") == Card(Rank.TEN, Suit.HEARTS)
        assert Card.parse("Th") == Card(Rank.TEN, Suit.HEARTS)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            Card.parse("Xs")
        with pytest.raises(ValueError):
            Card.parse("Ax")
        with pytest.raises(ValueError):
            Card.parse("Asd")

    def test_value_equality(self):
        assert Card(Rank.KING, Suit.CLUBS) == Card.parse("Kc")
        assert hash(Card(Rank.KING, Suit.CLUBS)) == hash(Card.parse("Kc"))
        assert Card.parse("Kc") != Card.parse("Kd")

    def test_immutable(self):
        card = Card.parse("Qd")
        with pytest.raises(AttributeError):
            card.rank = Rank.TWO

    def test_pretty(self):
        assert Card.parse("Ah").pretty() == "A♥"


class TestDeck:

    def test_deck_has_52_unique_cards(self):
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_contains_every_rank_and_suit(self):
        deck = Deck()
        for rank in Rank:
            for suit in Suit:
                assert Card(rank, suit) in deck

    def test_order_is_stable(self):
        assert Deck().cards == Deck().cards


class TestStartingHand:

    def test_parse_notation(self):
        assert StartingHand.parse("AKs") == StartingHand(Rank.ACE, Rank.KING, suited=True)
        assert StartingHand.parse("kqo") == StartingHand(Rank.KING, Rank.QUEEN)
        assert StartingHand.parse("T9") == StartingHand(Rank.TEN, Rank.NINE)
        assert StartingHand.parse("22").is_pair

    def test_ranks_are_ordered(self):
        hand = StartingHand.parse("KAs")
        assert hand.high == Rank.ACE
        assert hand.notation == "AKs"

    def test_invalid(self):
        with pytest.raises(ValueError):
            StartingHand.parse("AAs")
        with pytest.raises(ValueError):
            StartingHand.parse("AKx")
        with pytest.raises(ValueError):
            StartingHand.parse("A")

    def test_representative_cards(self):
        first, second = StartingHand.parse("AKs").representative_cards()
        assert (str(first), str(second)) == ("Ac", "Kc")
        first, second = StartingHand.parse("AKo").representative_cards()
        assert (str(first), str(second)) == ("Ac", "Ks")
        first, second = StartingHand.parse("77").representative_cards()
        assert (str(first), str(second)) == ("7c", "7s")

    def test_from_cards(self):
        assert StartingHand.from_cards(Card.parse("9h"), Card.parse("Th")).notation == "T9s"
        assert StartingHand.from_cards(Card.parse("9h"), Card.parse("9d")).notation == "99"

    def test_for_cell(self):
        assert StartingHand.for_cell(Rank.ACE, Rank.KING, 0, 1).notation == "AKs"
        assert StartingHand.for_cell(Rank.KING, Rank.ACE, 1, 0).notation == "AKo"
        assert StartingHand.for_cell(Rank.QUEEN, Rank.QUEEN, 2, 2).notation == "QQ"


class TestPosition:

    def test_from_label_case_insensitive(self):
        assert Position.from_label("utg") == Position.UTG
        assert Position.from_label("Utg2") == Position.UTG2
        assert Position.from_label(" co ") == Position.CO

    def test_from_label_unknown(self):
        assert Position.from_label("btn") is None
        assert Position.from_label("") is None
        assert Position.from_label(None) is None

    @pytest.mark.parametrize("label,exponent", [
        ("sb", 1), ("d", 2), ("co", 3), ("hj", 4),
        ("lj", 5), ("utg2", 6), ("utg1", 7), ("utg", 8),
    ])
    def test_exponents(self, label, exponent):
        assert DEFAULT_POSITIONS.exponent_for(label) == exponent

    def test_unknown_exponent_is_one(self):
        assert DEFAULT_POSITIONS.exponent_for("button") == 1
        assert DEFAULT_POSITIONS.exponent_for("") == 1
        assert DEFAULT_POSITIONS.exponent_for(None) == 1

    def test_category(self):
        assert Position.UTG.category == "Early"
        assert Position.HJ.category == "Middle"
        assert Position.D.category == "Late"
        assert Position.SB.category == "Blinds"
