from itertools import permutations

import pytest

from euchre.cards import Card, Rank, Suit
from euchre.mechanics import legal_plays
from euchre.state import InvalidPlay, PlayState
from euchre.trick import Trick, TrickError


def test_any_card_may_lead():
    hand = [Card(Suit.HEARTS, Rank.NINE), Card(Suit.CLUBS, Rank.ACE)]
    assert legal_plays(hand, Trick(leader=0), Suit.SPADES) == hand


def test_must_follow_effective_lead_suit():
    trick = Trick(leader=0)
    trick.add_play(0, Card(Suit.HEARTS, Rank.KING))

    hand = [
        Card(Suit.DIAMONDS, Rank.JACK),
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.CLUBS, Rank.NINE),
    ]
    # With hearts trump the jack of diamonds is a heart.
    assert legal_plays(hand, trick, Suit.HEARTS) == [Card(Suit.DIAMONDS, Rank.JACK)]


def test_left_bower_lead_calls_for_trump():
    trick = Trick(leader=0)
    trick.add_play(0, Card(Suit.CLUBS, Rank.JACK))

    hand = [
        Card(Suit.CLUBS, Rank.ACE),
        Card(Suit.SPADES, Rank.NINE),
    ]
    assert legal_plays(hand, trick, Suit.SPADES) == [Card(Suit.SPADES, Rank.NINE)]


def test_whole_hand_when_void_in_lead_suit():
    trick = Trick(leader=0)
    trick.add_play(0, Card(Suit.SPADES, Rank.TEN))

    hand = [
        Card(Suit.HEARTS, Rank.QUEEN),
        Card(Suit.DIAMONDS, Rank.NINE),
        Card(Suit.CLUBS, Rank.JACK),
    ]
    assert legal_plays(hand, trick, Suit.HEARTS) == hand


def test_trick_winner_is_order_independent():
    plays = [
        (0, Card(Suit.CLUBS, Rank.ACE)),
        (1, Card(Suit.HEARTS, Rank.NINE)),
        (2, Card(Suit.DIAMONDS, Rank.JACK)),
        (3, Card(Suit.CLUBS, Rank.KING)),
    ]
    lead = plays[0]
    winners = set()
    for rest in permutations(plays[1:]):
        trick = Trick(leader=lead[0])
        for seat, card in (lead, *rest):
            trick.add_play(seat, card)
        winners.add(trick.winning_play(Suit.HEARTS))
    assert winners == {(2, Card(Suit.DIAMONDS, Rank.JACK))}


def test_off_suit_ace_cannot_win():
    trick = Trick(leader=1)
    trick.add_play(1, Card(Suit.SPADES, Rank.NINE))
    trick.add_play(2, Card(Suit.HEARTS, Rank.ACE))
    trick.add_play(3, Card(Suit.SPADES, Rank.TEN))
    trick.add_play(0, Card(Suit.CLUBS, Rank.ACE))
    assert trick.winning_play(Suit.DIAMONDS) == (3, Card(Suit.SPADES, Rank.TEN))


def test_trick_ordering_errors():
    trick = Trick(leader=2)
    with pytest.raises(TrickError):
        trick.add_play(0, Card(Suit.CLUBS, Rank.ACE))
    trick.add_play(2, Card(Suit.CLUBS, Rank.ACE))
    with pytest.raises(TrickError):
        trick.add_play(2, Card(Suit.CLUBS, Rank.KING))
    with pytest.raises(TrickError):
        Trick(leader=0).winning_play(Suit.CLUBS)


def play_state():
    hands = [
        [Card(Suit.HEARTS, Rank.ACE), Card(Suit.CLUBS, Rank.NINE)],
        [Card(Suit.HEARTS, Rank.NINE), Card(Suit.SPADES, Rank.NINE)],
        [Card(Suit.DIAMONDS, Rank.NINE), Card(Suit.DIAMONDS, Rank.TEN)],
        [Card(Suit.SPADES, Rank.JACK), Card(Suit.CLUBS, Rank.TEN)],
    ]
    return PlayState(hands=hands, leader=0, trump=Suit.CLUBS)


def test_play_state_rejects_illegal_plays_without_changes():
    state = play_state()
    with pytest.raises(InvalidPlay):
        state.play_card(1, Card(Suit.HEARTS, Rank.NINE))
    with pytest.raises(InvalidPlay):
        state.play_card(0, Card(Suit.SPADES, Rank.ACE))

    state.play_card(0, Card(Suit.HEARTS, Rank.ACE))
    with pytest.raises(InvalidPlay):
        state.play_card(1, Card(Suit.SPADES, Rank.NINE))
    assert state.current_trick.plays == [(0, Card(Suit.HEARTS, Rank.ACE))]
    assert len(state.hands[1]) == 2


def test_play_state_resolves_trick_and_rotates_leader():
    state = play_state()
    state.play_card(0, Card(Suit.HEARTS, Rank.ACE))
    state.play_card(1, Card(Suit.HEARTS, Rank.NINE))
    state.play_card(2, Card(Suit.DIAMONDS, Rank.NINE))
    completed = state.play_card(3, Card(Suit.SPADES, Rank.JACK))

    assert completed is not None
    assert completed.winner == 3
    assert state.tricks_won == [0, 0, 0, 1]
    assert state.current_player == 3
    assert state.current_trick.is_empty()

    state.play_card(3, Card(Suit.CLUBS, Rank.TEN))
    state.play_card(0, Card(Suit.CLUBS, Rank.NINE))
    state.play_card(1, Card(Suit.SPADES, Rank.NINE))
    state.play_card(2, Card(Suit.DIAMONDS, Rank.TEN))

    assert state.is_finished()
    assert sum(state.tricks_won) == 2
    assert state.available_moves(0) == []
