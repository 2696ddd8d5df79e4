"""Legal move generation for Euchre."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .cards import Card, Suit, effective_suit
from .trick import Trick


def legal_plays(hand: Iterable[Card], trick: Trick, trump: Optional[Suit]) -> List[Card]:
    """Return the cards a seat may play to the current trick.

    Any card may lead. Otherwise a seat must follow the effective lead suit
    and may play anything only when it holds none of it.
    """
    cards = list(hand)
    if trick.is_empty():
        return cards

    led = trick.led_suit(trump)
    following = [card for card in cards if effective_suit(card, trump) is led]
    return following if following else cards
