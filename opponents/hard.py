"""Hard opponent: greedy trick taking with a trump lead signal."""

from __future__ import annotations

from typing import List, Optional

from euchre.cards import Card, card_weight, count_trump, effective_suit
from euchre.game import HandEngine

from .base import OpponentPolicy, play_weight

SIGNAL_TRUMP_COUNT = 3


class GreedyPolicy(OpponentPolicy):
    name = "Greedy"
    difficulty = "hard"

    def __init__(self, signal_seat: int = 2) -> None:
        # Only the human's partner leads its best trump to show strength.
        self.signal_seat = signal_seat

    @classmethod
    def build(cls, *, seed: Optional[int] = None, signal_seat: int = 2) -> GreedyPolicy:
        return cls(signal_seat=signal_seat)

    def select_play(self, hand: HandEngine, seat: int, legal: List[Card]) -> Card:
        trump = hand.trump
        if trump is not None and seat == self.signal_seat and not hand.current_trick:
            trumps = [card for card in legal if effective_suit(card, trump) is trump]
            if count_trump(hand.hands[seat], trump) >= SIGNAL_TRUMP_COUNT and trumps:
                return max(trumps, key=lambda card: card_weight(card, trump, trump))
        return max(legal, key=lambda card: play_weight(hand, card))
