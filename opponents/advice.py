"""Trump hints for the human seat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from euchre.cards import Card, Suit, count_trump

from .base import CALL_THRESHOLD, ORDER_THRESHOLDS, best_call


@dataclass(frozen=True)
class TrumpAdvice:
    action: str
    rationale: str
    suit: Suit | None = None


def advise_trump(hand: Sequence[Card], kitty: Card, difficulty: str = "medium") -> TrumpAdvice:
    """Recommend ordering up or passing on the turned-up kitty suit."""
    trump = kitty.suit
    count = count_trump(hand, trump)
    threshold = ORDER_THRESHOLDS.get(difficulty, 3)
    if count >= threshold:
        return TrumpAdvice(
            action="order",
            rationale=f"You have {count} {trump} trump (>= {threshold}), good chance to win.",
            suit=trump,
        )
    return TrumpAdvice(
        action="pass",
        rationale=f"Only {count} {trump} trump (< {threshold}), better to pass.",
    )


def advise_call(hand: Sequence[Card], available: Sequence[Suit]) -> TrumpAdvice:
    """Recommend a suit to name in the second round, or a pass."""
    suit, count = best_call(hand, available)
    if suit is not None and count >= CALL_THRESHOLD:
        return TrumpAdvice(
            action="call",
            rationale=f"{suit} gives you {count} trump, the most of any open suit.",
            suit=suit,
        )
    return TrumpAdvice(
        action="pass",
        rationale=f"No open suit gives you {CALL_THRESHOLD} or more trump.",
    )
