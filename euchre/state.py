"""Trick-play state for a single Euchre hand."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .cards import Card, Suit
from .deck import NUM_SEATS
from .errors import RuleViolation
from .mechanics import legal_plays
from .trick import Trick, TrickError


class InvalidPlay(RuleViolation):
    """Raised when an illegal card play is attempted."""


@dataclass
class CompletedTrick:
    plays: Tuple[Tuple[int, Card], ...]
    winner: int
    winning_card: Card


@dataclass
class PlayState:
    hands: List[List[Card]]
    leader: int
    trump: Suit
    active_seats: Sequence[int] = (0, 1, 2, 3)
    current_player: int = field(init=False)
    current_trick: Trick = field(init=False)
    tricks_won: List[int] = field(init=False)
    trick_history: List[CompletedTrick] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.hands) != NUM_SEATS:
            raise ValueError("PlayState requires exactly four seats.")
        if self.leader not in self.active_seats:
            raise ValueError(f"Leader {self.leader} is not an active seat.")
        self.active_seats = tuple(sorted(self.active_seats))
        self.current_player = self.leader
        self.current_trick = self._new_trick(self.leader)
        self.tricks_won = [0] * NUM_SEATS

    def next_active(self, seat: int) -> int:
        for step in range(1, NUM_SEATS + 1):
            candidate = (seat + step) % NUM_SEATS
            if candidate in self.active_seats:
                return candidate
        raise TrickError("No active seats remain.")

    def available_moves(self, seat: int) -> List[Card]:
        if self.is_finished() or any(played == seat for played, _ in self.current_trick.plays):
            return []
        return legal_plays(self.hands[seat], self.current_trick, self.trump)

    def check_play(self, seat: int, card: Card) -> None:
        """Raise InvalidPlay unless ``seat`` may play ``card`` right now."""
        if self.is_finished():
            raise InvalidPlay("All tricks have been played.")
        if seat != self.current_player:
            raise InvalidPlay(f"Not seat {seat}'s turn; seat {self.current_player} is to play.")
        if card not in self.hands[seat]:
            raise InvalidPlay(f"{card} is not in seat {seat}'s hand.")
        if card not in legal_plays(self.hands[seat], self.current_trick, self.trump):
            raise InvalidPlay(f"{card} does not follow the led suit.")

    def play_card(self, seat: int, card: Card) -> Optional[CompletedTrick]:
        """Apply a play and return the resolved trick when it was the last card."""
        self.check_play(seat, card)
        self.hands[seat].remove(card)
        self.current_trick.add_play(seat, card)

        if self.current_trick.is_full():
            return self._complete_trick()
        self.current_player = self.next_active(seat)
        return None

    def _complete_trick(self) -> CompletedTrick:
        if not self.current_trick.is_full():
            raise TrickError("Cannot resolve a trick before every seat has played.")
        winner, winning_card = self.current_trick.winning_play(self.trump)
        completed = CompletedTrick(
            plays=tuple(self.current_trick.plays),
            winner=winner,
            winning_card=winning_card,
        )
        self.tricks_won[winner] += 1
        self.trick_history.append(completed)

        self.leader = winner
        self.current_player = winner
        self.current_trick = self._new_trick(winner)
        return completed

    def _new_trick(self, leader: int) -> Trick:
        return Trick(leader=leader, size=len(self.active_seats))

    def is_finished(self) -> bool:
        hands_empty = all(len(self.hands[seat]) == 0 for seat in self.active_seats)
        return hands_empty and self.current_trick.is_empty()

    def played_cards(self) -> List[Card]:
        cards = [card for trick in self.trick_history for _, card in trick.plays]
        cards.extend(card for _, card in self.current_trick.plays)
        return cards
