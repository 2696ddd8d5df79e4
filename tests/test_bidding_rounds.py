import pytest

from euchre.bidding import (
    BiddingClosed,
    BiddingPhase,
    NotYourTurn,
    SuitNotAvailable,
    TrumpBidding,
)
from euchre.cards import Card, Rank, Suit

KITTY = Card(Suit.HEARTS, Rank.QUEEN)


def test_round_one_starts_left_of_dealer():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    assert bidding.round_number == 1
    assert bidding.current_bidder == 0
    assert bidding.turns_remaining == 4
    assert bidding.available_suits() == list(Suit)


def test_order_up_sets_kitty_suit_and_caller():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    bidding.pass_bid(0)
    bidding.order_up(1)

    assert bidding.is_complete()
    assert bidding.round_number == 0
    assert bidding.trump is Suit.HEARTS
    assert bidding.trump_caller == 1
    assert bidding.history == [(0, "pass", None), (1, "order", Suit.HEARTS)]


def test_four_passes_turn_down_the_kitty():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    for seat in (0, 1, 2, 3):
        bidding.pass_bid(seat)

    assert bidding.phase is BiddingPhase.ROUND_TWO
    assert bidding.turned_down is Suit.HEARTS
    assert bidding.turns_remaining == 3
    assert bidding.current_bidder == 0
    assert Suit.HEARTS not in bidding.available_suits()
    assert bidding.trump is None


def test_round_two_skips_dealer():
    bidding = TrumpBidding(dealer=1, kitty=KITTY)
    for seat in (2, 3, 0, 1):
        bidding.pass_bid(seat)

    order = []
    while bidding.phase is BiddingPhase.ROUND_TWO:
        order.append(bidding.current_bidder)
        bidding.pass_bid(bidding.current_bidder)
    assert order == [2, 3, 0]


def test_three_round_two_passes_force_dealer():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    for seat in (0, 1, 2, 3):
        bidding.pass_bid(seat)
    for seat in (0, 1, 2):
        bidding.pass_bid(seat)

    assert bidding.is_complete()
    assert bidding.forced
    assert bidding.trump_caller == 3
    # Hearts was turned down, so diamonds is the first suit left.
    assert bidding.trump is Suit.DIAMONDS


def test_round_two_call_rejects_turned_down_suit():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    for seat in (0, 1, 2, 3):
        bidding.pass_bid(seat)

    with pytest.raises(SuitNotAvailable):
        bidding.order_up_second_round(0, Suit.HEARTS)
    assert bidding.current_bidder == 0

    bidding.order_up_second_round(0, Suit.SPADES)
    assert bidding.trump is Suit.SPADES
    assert bidding.trump_caller == 0
    assert not bidding.forced


def test_out_of_turn_and_wrong_round_rejected():
    bidding = TrumpBidding(dealer=3, kitty=KITTY)
    with pytest.raises(NotYourTurn):
        bidding.pass_bid(2)
    with pytest.raises(BiddingClosed):
        bidding.order_up_second_round(0, Suit.CLUBS)
    assert bidding.turns_remaining == 4

    bidding.order_up(0)
    with pytest.raises(BiddingClosed):
        bidding.pass_bid(1)
    with pytest.raises(BiddingClosed):
        bidding.order_up(1)


def test_bidding_skips_seat_sitting_out():
    bidding = TrumpBidding(dealer=3, kitty=KITTY, active_seats=(0, 1, 3))
    assert bidding.turns_remaining == 3
    bidding.pass_bid(0)
    bidding.pass_bid(1)
    assert bidding.current_bidder == 3
    bidding.pass_bid(3)

    assert bidding.phase is BiddingPhase.ROUND_TWO
    assert bidding.turns_remaining == 2
    bidding.pass_bid(0)
    bidding.pass_bid(1)
    assert bidding.trump_caller == 3
