import pytest

from euchre.cards import (
    Card,
    Rank,
    Suit,
    card_label,
    card_weight,
    count_trump,
    deserialize_card,
    effective_suit,
    is_left_bower,
    is_right_bower,
    left_bower_suit,
    parse_card,
    serialize_card,
)


def test_left_bower_changes_suit():
    assert effective_suit(Card(Suit.DIAMONDS, Rank.JACK), Suit.HEARTS) is Suit.HEARTS
    assert effective_suit(Card(Suit.HEARTS, Rank.JACK), Suit.HEARTS) is Suit.HEARTS
    assert effective_suit(Card(Suit.CLUBS, Rank.JACK), Suit.HEARTS) is Suit.CLUBS
    assert effective_suit(Card(Suit.DIAMONDS, Rank.ACE), Suit.HEARTS) is Suit.DIAMONDS


def test_effective_suit_without_trump():
    assert effective_suit(Card(Suit.DIAMONDS, Rank.JACK), None) is Suit.DIAMONDS


def test_bowers_outrank_trump_ace():
    trump = Suit.HEARTS
    right = card_weight(Card(Suit.HEARTS, Rank.JACK), Suit.HEARTS, trump)
    left = card_weight(Card(Suit.DIAMONDS, Rank.JACK), Suit.HEARTS, trump)
    ace = card_weight(Card(Suit.HEARTS, Rank.ACE), Suit.HEARTS, trump)

    assert right == 100
    assert left == 90
    assert ace == 26
    assert right > left > ace


def test_weights_for_lead_and_off_suit():
    trump = Suit.SPADES
    assert card_weight(Card(Suit.HEARTS, Rank.NINE), Suit.HEARTS, trump) == 11
    assert card_weight(Card(Suit.HEARTS, Rank.ACE), Suit.HEARTS, trump) == 16
    assert card_weight(Card(Suit.HEARTS, Rank.ACE), Suit.DIAMONDS, trump) == 0
    assert card_weight(Card(Suit.SPADES, Rank.NINE), Suit.HEARTS, trump) == 21
    # The left bower follows trump, not its printed suit.
    assert card_weight(Card(Suit.CLUBS, Rank.JACK), Suit.CLUBS, trump) == 90


def test_left_bower_suit_pairs():
    assert left_bower_suit(Suit.HEARTS) is Suit.DIAMONDS
    assert left_bower_suit(Suit.DIAMONDS) is Suit.HEARTS
    assert left_bower_suit(Suit.CLUBS) is Suit.SPADES
    assert left_bower_suit(Suit.SPADES) is Suit.CLUBS


@pytest.mark.parametrize("trump", list(Suit))
def test_exactly_one_left_bower_per_trump(trump):
    jacks = [Card(suit, Rank.JACK) for suit in Suit]
    assert [card.suit for card in jacks if is_left_bower(card, trump)] == [left_bower_suit(trump)]
    assert [card.suit for card in jacks if is_right_bower(card, trump)] == [trump]
    assert not any(is_left_bower(card, None) for card in jacks)


def test_count_trump_includes_left_bower():
    hand = [
        Card(Suit.HEARTS, Rank.NINE),
        Card(Suit.DIAMONDS, Rank.JACK),
        Card(Suit.CLUBS, Rank.JACK),
        Card(Suit.DIAMONDS, Rank.ACE),
    ]
    assert count_trump(hand, Suit.HEARTS) == 2
    assert count_trump(hand, Suit.DIAMONDS) == 2
    assert count_trump(hand, Suit.SPADES) == 1


def test_card_serialization_and_labels():
    card = Card(Suit.CLUBS, Rank.TEN)
    payload = serialize_card(card)
    assert payload == {"suit": "clubs", "rank": "10"}
    assert deserialize_card(payload) == card
    assert card_label(card) == "Ten of Clubs"


def test_parse_card_codes():
    assert parse_card("JH") == Card(Suit.HEARTS, Rank.JACK)
    assert parse_card("10s") == Card(Suit.SPADES, Rank.TEN)
    assert parse_card(" ad ") == Card(Suit.DIAMONDS, Rank.ACE)
    with pytest.raises(ValueError):
        parse_card("8H")
    with pytest.raises(ValueError):
        parse_card("QX")
