"""Common opponent policy interfaces."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from euchre.cards import Card, Suit, card_weight, count_trump, effective_suit
from euchre.game import HandEngine, worst_card

# Bower-aware trump count needed to order up the kitty suit in round one.
ORDER_THRESHOLDS: Dict[str, int] = {"easy": 2, "medium": 3, "hard": 3}

# Bower-aware trump count needed to name a suit in round two.
CALL_THRESHOLD = 2


def best_call(cards: Sequence[Card], suits: Sequence[Suit]) -> tuple[Optional[Suit], int]:
    """Return the suit with the most trump in ``cards`` and its count."""
    best_suit: Optional[Suit] = None
    best_count = -1
    for suit in suits:
        count = count_trump(cards, suit)
        if count > best_count:
            best_suit, best_count = suit, count
    return best_suit, max(best_count, 0)


def play_weight(hand: HandEngine, card: Card) -> int:
    """Weigh a card against the trick in progress.

    When the trick is empty each card is weighed as if it were the lead.
    """
    trump = hand.trump
    plays = hand.current_trick
    lead_suit = effective_suit(plays[0][1], trump) if plays else effective_suit(card, trump)
    return card_weight(card, lead_suit, trump)


class OpponentPolicy:
    """Base class for computer seats."""

    name: str = "Base"
    difficulty: str = "medium"

    @classmethod
    def build(cls, *, seed: Optional[int] = None, signal_seat: int = 2) -> OpponentPolicy:
        """Construct the policy from the table-level options it cares about."""
        return cls()

    @property
    def order_threshold(self) -> int:
        return ORDER_THRESHOLDS[self.difficulty]

    def order_up(self, hand: HandEngine, seat: int) -> bool:
        """Return True to order up the kitty suit in round one."""
        kitty = hand.kitty
        if kitty is None:
            return False
        return count_trump(hand.hands[seat], kitty.suit) >= self.order_threshold

    def call_trump(self, hand: HandEngine, seat: int) -> Optional[Suit]:
        """Return the suit to name in round two, or None to pass."""
        suit, count = best_call(hand.hands[seat], hand.available_suits())
        if suit is None or count < CALL_THRESHOLD:
            return None
        return suit

    def choose_discard(self, hand: HandEngine, seat: int) -> Card:
        assert hand.trump is not None
        return worst_card(hand.hands[seat], hand.trump)

    def play_card(self, hand: HandEngine, seat: int) -> Optional[Card]:
        """Return the card to play, or None when the seat has nothing left."""
        if not hand.hands[seat]:
            return None
        legal = hand.legal_plays(seat)
        if not legal:
            return None
        return self.select_play(hand, seat, legal)

    def select_play(self, hand: HandEngine, seat: int, legal: List[Card]) -> Card:
        return legal[0]
