"""Medium opponent: plays its lowest legal card."""

from __future__ import annotations

from typing import List

from euchre.cards import Card
from euchre.game import HandEngine

from .base import OpponentPolicy, play_weight


class ConservativePolicy(OpponentPolicy):
    name = "Conservative"
    difficulty = "medium"

    def select_play(self, hand: HandEngine, seat: int, legal: List[Card]) -> Card:
        return min(legal, key=lambda card: play_weight(hand, card))
