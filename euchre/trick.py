"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cards import Card, Suit, card_weight, effective_suit


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


@dataclass
class Trick:
    leader: int
    size: int = 4
    plays: List[Tuple[int, Card]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.plays

    def is_full(self) -> bool:
        return len(self.plays) == self.size

    def add_play(self, seat: int, card: Card) -> None:
        if self.is_full():
            raise TrickError("Trick already complete.")
        if not self.plays and seat != self.leader:
            raise TrickError("Only the leader can start the trick.")
        if any(played == seat for played, _ in self.plays):
            raise TrickError(f"Seat {seat} already played to this trick.")
        self.plays.append((seat, card))

    def lead_card(self) -> Optional[Card]:
        return self.plays[0][1] if self.plays else None

    def led_suit(self, trump: Optional[Suit]) -> Optional[Suit]:
        lead = self.lead_card()
        return effective_suit(lead, trump) if lead is not None else None

    def winning_play(self, trump: Optional[Suit]) -> Tuple[int, Card]:
        if not self.plays:
            raise TrickError("Cannot determine winner on empty trick.")
        led = self.led_suit(trump)
        winning_seat, winning_card = self.plays[0]
        best = card_weight(winning_card, led, trump)
        for seat, card in self.plays[1:]:
            weight = card_weight(card, led, trump)
            if weight > best:
                winning_seat, winning_card, best = seat, card, weight
        return winning_seat, winning_card
