"""Card-related data structures and ranking helpers for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional


class Suit(Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value


RED_SUITS = frozenset({Suit.HEARTS, Suit.DIAMONDS})

# Rank order from lowest to highest within a plain suit.
RANK_ORDER: list[Rank] = [
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
]

RANK_INDEX: dict[Rank, int] = {rank: index + 1 for index, rank in enumerate(RANK_ORDER)}

RIGHT_BOWER_WEIGHT = 100
LEFT_BOWER_WEIGHT = 90
TRUMP_BASE_WEIGHT = 20
LEAD_BASE_WEIGHT = 10

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"


def same_color(first: Suit, second: Suit) -> bool:
    return (first in RED_SUITS) == (second in RED_SUITS)


def left_bower_suit(trump: Suit) -> Suit:
    """Return the suit whose jack becomes the left bower under ``trump``."""
    return next(suit for suit in Suit if suit is not trump and same_color(suit, trump))


def is_right_bower(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is trump


def is_left_bower(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is left_bower_suit(trump)


def effective_suit(card: Card, trump: Optional[Suit]) -> Suit:
    """Return the suit a card counts as, treating both bowers as trump."""
    if is_right_bower(card, trump) or is_left_bower(card, trump):
        assert trump is not None
        return trump
    return card.suit


def card_weight(card: Card, lead_suit: Optional[Suit], trump: Optional[Suit]) -> int:
    """Return a numeric weight so that the highest card in a trick wins.

    Off-suit cards that are neither trump nor the lead suit weigh 0 and can
    never take a trick.
    """
    if is_right_bower(card, trump):
        return RIGHT_BOWER_WEIGHT
    if is_left_bower(card, trump):
        return LEFT_BOWER_WEIGHT
    suit = effective_suit(card, trump)
    if trump is not None and suit is trump:
        return TRUMP_BASE_WEIGHT + RANK_INDEX[card.rank]
    if lead_suit is not None and suit is lead_suit:
        return LEAD_BASE_WEIGHT + RANK_INDEX[card.rank]
    return 0


def count_trump(cards: Iterable[Card], trump: Suit) -> int:
    """Count the cards that would be trump, bowers included."""
    return sum(1 for card in cards if effective_suit(card, trump) is trump)


def serialize_card(card: Card) -> dict[str, str]:
    return {"suit": card.suit.value, "rank": card.rank.value}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    return Card(Suit(payload["suit"].lower()), Rank(payload["rank"].upper()))


def card_label(card: Card) -> str:
    names = {
        Rank.NINE: "Nine",
        Rank.TEN: "Ten",
        Rank.JACK: "Jack",
        Rank.QUEEN: "Queen",
        Rank.KING: "King",
        Rank.ACE: "Ace",
    }
    return f"{names[card.rank]} of {card.suit.value.title()}"


def parse_card(text: str) -> Card:
    """Parse a short card code such as ``"JH"``, ``"10s"`` or ``"9d"``."""
    code = text.strip().upper()
    if len(code) < 2:
        raise ValueError(f"Unrecognised card code: {text!r}")
    rank_code, suit_code = code[:-1], code[-1]
    suits = {suit.value[0].upper(): suit for suit in Suit}
    if suit_code not in suits:
        raise ValueError(f"Unknown suit in card code: {text!r}")
    try:
        rank = Rank(rank_code)
    except ValueError as exc:
        raise ValueError(f"Unknown rank in card code: {text!r}") from exc
    return Card(suits[suit_code], rank)
