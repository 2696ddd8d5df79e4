"""Two-round trump bidding for Euchre."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

from .cards import Card, Suit
from .deck import NUM_SEATS
from .errors import RuleViolation


class BiddingError(RuleViolation):
    """Base class for bidding related errors."""


class NotYourTurn(BiddingError):
    """Raised when a seat acts while another seat holds the bid."""


class BiddingClosed(BiddingError):
    """Raised when a bid arrives in the wrong round or after trump is set."""


class SuitNotAvailable(BiddingError):
    """Raised when the turned-down suit is named in the second round."""


class BiddingPhase(Enum):
    ROUND_ONE = auto()
    ROUND_TWO = auto()
    CLOSED = auto()


@dataclass
class TrumpBidding:
    """Trump selection: order up the kitty suit, then name any other suit.

    Round one starts left of the dealer and offers every active seat the
    turned-up kitty suit. If all pass, the kitty suit is turned down and the
    non-dealer seats may name another suit. When they all pass too, the
    dealer is stuck with the first suit still available.
    """

    dealer: int
    kitty: Card
    active_seats: Sequence[int] = (0, 1, 2, 3)
    phase: BiddingPhase = field(init=False, default=BiddingPhase.ROUND_ONE)
    current_bidder: int = field(init=False)
    turns_remaining: int = field(init=False)
    turned_down: Optional[Suit] = field(init=False, default=None)
    trump: Optional[Suit] = field(init=False, default=None)
    trump_caller: Optional[int] = field(init=False, default=None)
    forced: bool = field(init=False, default=False)
    history: List[Tuple[int, str, Optional[Suit]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.active_seats = tuple(sorted(self.active_seats))
        if self.dealer not in self.active_seats:
            raise ValueError("The dealer must hold cards during bidding.")
        self.current_bidder = self._next_bidder(self.dealer, skip_dealer=False)
        self.turns_remaining = len(self.active_seats)

    @property
    def round_number(self) -> int:
        if self.phase is BiddingPhase.ROUND_ONE:
            return 1
        if self.phase is BiddingPhase.ROUND_TWO:
            return 2
        return 0

    def is_complete(self) -> bool:
        return self.phase is BiddingPhase.CLOSED

    def available_suits(self) -> List[Suit]:
        return [suit for suit in Suit if suit is not self.turned_down]

    def order_up(self, seat: int) -> None:
        self._ensure_turn(seat, BiddingPhase.ROUND_ONE)
        self.history.append((seat, "order", self.kitty.suit))
        self._close(seat, self.kitty.suit)

    def order_up_second_round(self, seat: int, suit: Suit) -> None:
        self._ensure_turn(seat, BiddingPhase.ROUND_TWO)
        if suit is self.turned_down:
            raise SuitNotAvailable(f"{suit} was turned down and cannot be named.")
        self.history.append((seat, "call", suit))
        self._close(seat, suit)

    def pass_bid(self, seat: int) -> None:
        self._ensure_turn(seat, self.phase)
        self.history.append((seat, "pass", None))
        self.turns_remaining -= 1

        if self.turns_remaining > 0:
            self.current_bidder = self._next_bidder(
                seat, skip_dealer=self.phase is BiddingPhase.ROUND_TWO
            )
            return

        if self.phase is BiddingPhase.ROUND_ONE:
            self.turned_down = self.kitty.suit
            self.phase = BiddingPhase.ROUND_TWO
            self.turns_remaining = len(self.active_seats) - 1
            self.current_bidder = self._next_bidder(self.dealer, skip_dealer=True)
            return

        # Everyone passed twice: the dealer is stuck.
        suit = self.available_suits()[0]
        self.forced = True
        self.history.append((self.dealer, "forced", suit))
        self._close(self.dealer, suit)

    def _close(self, seat: int, suit: Suit) -> None:
        self.trump = suit
        self.trump_caller = seat
        self.phase = BiddingPhase.CLOSED
        self.turns_remaining = 0
        self.current_bidder = -1

    def _next_bidder(self, seat: int, *, skip_dealer: bool) -> int:
        for step in range(1, NUM_SEATS + 1):
            candidate = (seat + step) % NUM_SEATS
            if candidate not in self.active_seats:
                continue
            if skip_dealer and candidate == self.dealer:
                continue
            return candidate
        raise BiddingError("No seat is eligible to bid.")

    def _ensure_turn(self, seat: int, expected: BiddingPhase) -> None:
        if self.phase is BiddingPhase.CLOSED:
            raise BiddingClosed("Bidding is already closed.")
        if self.phase is not expected:
            raise BiddingClosed(f"Action not allowed in {self.phase.name.lower()}.")
        if seat != self.current_bidder:
            raise NotYourTurn(f"Seat {self.current_bidder} holds the bid, not seat {seat}.")
