from collections import Counter
from random import Random

import pytest

from euchre.cards import Card, Rank, Suit
from euchre.deck import DealError, build_deck, deal, shuffle
from euchre.game import HandEngine


def test_build_deck_has_24_distinct_cards():
    deck = build_deck()
    assert len(deck) == 24
    assert len(set(deck)) == 24


def test_shuffle_is_a_permutation_and_seeded():
    first = build_deck()
    second = build_deck()
    shuffle(first, Random(3))
    shuffle(second, Random(3))
    assert first == second
    assert sorted(first, key=str) == sorted(build_deck(), key=str)


def test_shuffle_spreads_first_card():
    rng = Random(11)
    positions = Counter()
    target = Card(Suit.HEARTS, Rank.NINE)
    for _ in range(2400):
        deck = build_deck()
        shuffle(deck, rng)
        positions[deck.index(target)] += 1
    # 100 expected per slot; every slot is reached and none dominates.
    assert len(positions) == 24
    assert max(positions.values()) < 200


def test_deal_gives_five_each_and_a_kitty():
    result = deal(dealer=3, rng=Random(5))
    assert [len(hand) for hand in result.hands] == [5, 5, 5, 5]
    assert len(result.set_aside) == 3
    cards = [card for hand in result.hands for card in hand] + [result.kitty] + result.set_aside
    assert Counter(cards) == Counter(build_deck())


def test_deal_rejects_short_deck():
    with pytest.raises(DealError):
        deal(dealer=0, deck=build_deck()[:20])


def test_sequential_deals_conserve_cards():
    rng = Random(21)
    for hand_number in range(25):
        hand = HandEngine(dealer=hand_number % 4, rng=rng)
        cards = hand.all_cards()
        assert len(cards) == 24
        assert set(cards) == set(build_deck())


def test_conservation_after_order_up_and_discard():
    hand = HandEngine(dealer=3, rng=Random(8))
    hand.order_up(0)
    assert len(hand.hands[3]) == 5
    assert hand.kitty is None
    assert Counter(hand.all_cards()) == Counter(build_deck())


def test_sitting_out_seat_gets_no_cards():
    result = deal(dealer=3, rng=Random(2), sitting_out=2)
    assert [len(hand) for hand in result.hands] == [5, 5, 0, 5]
    assert len(result.set_aside) == 8

    with pytest.raises(DealError):
        deal(dealer=3, rng=Random(2), sitting_out=3)
