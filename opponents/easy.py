"""Easy opponent: random legal plays."""

from __future__ import annotations

import random
from typing import List, Optional

from euchre.cards import Card
from euchre.game import HandEngine

from .base import OpponentPolicy


class RandomPolicy(OpponentPolicy):
    name = "Random"
    difficulty = "easy"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    @classmethod
    def build(cls, *, seed: Optional[int] = None, signal_seat: int = 2) -> RandomPolicy:
        return cls(seed=seed)

    def select_play(self, hand: HandEngine, seat: int, legal: List[Card]) -> Card:
        return self._rng.choice(legal)
