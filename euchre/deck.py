"""Deck creation and dealing utilities for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import List, MutableSequence, Optional, Sequence

from .cards import Card, RANK_ORDER, Suit
from .errors import RuleViolation

NUM_SEATS = 4
HAND_SIZE = 5
DECK_SIZE = 24


class DealError(RuleViolation):
    """Raised when a deal is requested with a bad deck or seating."""


@dataclass
class DealResult:
    hands: List[List[Card]]
    kitty: Card
    set_aside: List[Card]


def build_deck() -> List[Card]:
    """Return the ordered 24-card deck."""
    return [Card(suit, rank) for suit in Suit for rank in RANK_ORDER]


def shuffle(deck: MutableSequence[Card], rng: Optional[Random] = None) -> None:
    """Shuffle ``deck`` in place with a Fisher-Yates pass."""
    if rng is None:
        rng = Random()
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]


def next_seat(seat: int) -> int:
    return (seat + 1) % NUM_SEATS


def partner_of(seat: int) -> int:
    return (seat + 2) % NUM_SEATS


def team_of(seat: int) -> int:
    return seat % 2


def deal(
    *,
    dealer: int,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
    sitting_out: Optional[int] = None,
) -> DealResult:
    """Deal five cards to each seat and turn up one kitty card.

    Cards are popped from the end of the deck, one at a time, starting with
    the seat left of the dealer. A seat sitting out still has its cards drawn
    but they go face down into ``set_aside``.
    """
    if sitting_out is not None and sitting_out == dealer:
        raise DealError("The dealer cannot sit out a hand.")
    if deck is not None:
        cards = list(deck)
    else:
        cards = build_deck()
        shuffle(cards, rng)
    if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
        raise DealError("Deck must contain exactly 24 distinct cards.")

    hands: List[List[Card]] = [[] for _ in range(NUM_SEATS)]
    set_aside: List[Card] = []
    for _ in range(HAND_SIZE):
        seat = dealer
        for _ in range(NUM_SEATS):
            seat = next_seat(seat)
            card = cards.pop()
            if seat == sitting_out:
                set_aside.append(card)
            else:
                hands[seat].append(card)

    kitty = cards.pop()
    # Whatever remains of the deck stays buried under the kitty.
    set_aside.extend(cards)
    return DealResult(hands=hands, kitty=kitty, set_aside=set_aside)
