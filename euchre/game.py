"""Single-hand orchestration for Euchre."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Callable, List, Optional, Sequence, Tuple

from .bidding import BiddingPhase, TrumpBidding
from .cards import Card, Suit, card_label, card_weight
from .deck import NUM_SEATS, deal, next_seat
from .errors import EngineInvariantError, PhaseError, RuleViolation
from .scoring import HandScoreResult, score_hand
from .state import CompletedTrick, PlayState


class InvalidDiscard(RuleViolation):
    """Raised when the dealer tries to discard a card it does not hold."""


class HandPhase(Enum):
    BIDDING = auto()
    DISCARD = auto()
    PLAY = auto()
    COMPLETE = auto()


def worst_card(cards: Sequence[Card], trump: Suit) -> Card:
    """Return the lowest card once ``trump`` is known, weighed as if trump were led."""
    return min(cards, key=lambda card: card_weight(card, trump, trump))


@dataclass
class HandEngine:
    """Manage a single deal: bidding, the dealer's discard, and five tricks."""

    dealer: int
    human_seat: Optional[int] = None
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None
    sitting_out: Optional[int] = None
    on_event: Optional[Callable[[str], None]] = None

    phase: HandPhase = field(init=False, default=HandPhase.BIDDING)
    hands: List[List[Card]] = field(init=False)
    kitty: Optional[Card] = field(init=False)
    discards: List[Card] = field(init=False)
    leader: int = field(init=False)
    hand_sizes_at_deal: Tuple[int, ...] = field(init=False)
    bidding: TrumpBidding = field(init=False)
    state: Optional[PlayState] = field(init=False, default=None)

    def __post_init__(self) -> None:
        dealt = deal(dealer=self.dealer, rng=self.rng, deck=self.deck, sitting_out=self.sitting_out)
        self.hands = dealt.hands
        self.kitty = dealt.kitty
        self.discards = list(dealt.set_aside)
        self.hand_sizes_at_deal = tuple(len(hand) for hand in self.hands)
        active = self.active_seats
        self.leader = next_seat(self.dealer)
        while self.leader not in active:
            self.leader = next_seat(self.leader)
        self.bidding = TrumpBidding(dealer=self.dealer, kitty=self.kitty, active_seats=active)
        self._note(f"Seat {self.dealer} deals; {card_label(self.kitty)} is turned up.")
        if self.sitting_out is not None:
            self._note(f"Seat {self.sitting_out} sits out this hand.")

    # Queries -----------------------------------------------------------

    @property
    def active_seats(self) -> Tuple[int, ...]:
        return tuple(seat for seat in range(NUM_SEATS) if self.hand_sizes_at_deal[seat] > 0)

    @property
    def trump(self) -> Optional[Suit]:
        return self.bidding.trump

    @property
    def trump_caller(self) -> Optional[int]:
        return self.bidding.trump_caller

    @property
    def awaiting_discard(self) -> bool:
        return self.phase == HandPhase.DISCARD

    @property
    def tricks_won(self) -> List[int]:
        if self.state is None:
            return [0] * NUM_SEATS
        return list(self.state.tricks_won)

    @property
    def current_trick(self) -> List[Tuple[int, Card]]:
        if self.state is None:
            return []
        return list(self.state.current_trick.plays)

    def current_actor(self) -> Optional[int]:
        """Return the seat expected to act next, or None once the hand is over."""
        if self.phase == HandPhase.BIDDING:
            return self.bidding.current_bidder
        if self.phase == HandPhase.DISCARD:
            return self.dealer
        if self.phase == HandPhase.PLAY:
            assert self.state is not None
            return self.state.current_player
        return None

    def available_suits(self) -> List[Suit]:
        if self.phase != HandPhase.BIDDING:
            return []
        return self.bidding.available_suits()

    def legal_plays(self, seat: int) -> List[Card]:
        if self.phase != HandPhase.PLAY:
            return []
        assert self.state is not None
        return self.state.available_moves(seat)

    def all_cards(self) -> List[Card]:
        """Every card of the deck, wherever it currently sits."""
        cards = [card for hand in self.hands for card in hand]
        if self.kitty is not None:
            cards.append(self.kitty)
        cards.extend(self.discards)
        if self.state is not None:
            cards.extend(self.state.played_cards())
        return cards

    # Bidding -----------------------------------------------------------

    def order_up(self, seat: int) -> None:
        self._ensure_phase(HandPhase.BIDDING)
        self.bidding.order_up(seat)
        assert self.kitty is not None and self.trump is not None
        kitty, self.kitty = self.kitty, None
        self.hands[self.dealer].append(kitty)
        self._note(f"Seat {seat} orders up {self.trump}; seat {self.dealer} picks up {card_label(kitty)}.")

        if self.dealer == self.human_seat:
            self.phase = HandPhase.DISCARD
            return
        self._discard_from_dealer(worst_card(self.hands[self.dealer], self.trump))

    def pass_bid(self, seat: int) -> None:
        self._ensure_phase(HandPhase.BIDDING)
        self.bidding.pass_bid(seat)
        self._note(f"Seat {seat} passes.")

        if self.bidding.phase is BiddingPhase.ROUND_TWO and self.kitty is not None:
            self.discards.append(self.kitty)
            self.kitty = None
            self._note(f"{self.bidding.turned_down} is turned down.")
        elif self.bidding.is_complete():
            self._note(f"Seat {self.dealer} is stuck and must call {self.trump}.")
            self._start_play()

    def order_up_second_round(self, seat: int, suit: Suit) -> None:
        self._ensure_phase(HandPhase.BIDDING)
        self.bidding.order_up_second_round(seat, suit)
        self._note(f"Seat {seat} calls {suit}.")
        self._start_play()

    def discard(self, card: Card) -> None:
        self._ensure_phase(HandPhase.DISCARD)
        if card not in self.hands[self.dealer]:
            raise InvalidDiscard(f"{card} is not in the dealer's hand.")
        self._discard_from_dealer(card)

    def _discard_from_dealer(self, card: Card) -> None:
        self.hands[self.dealer].remove(card)
        self.discards.append(card)
        self._note(f"Seat {self.dealer} discards a card.")
        self._start_play()

    # Play --------------------------------------------------------------

    def play_card(self, seat: int, card: Card) -> Optional[CompletedTrick]:
        self._ensure_phase(HandPhase.PLAY)
        assert self.state is not None
        completed = self.state.play_card(seat, card)
        self._note(f"Seat {seat} plays {card_label(card)}.")
        if completed is not None:
            self._note(f"Seat {completed.winner} wins the trick with {card_label(completed.winning_card)}.")
        if self.state.is_finished():
            self.phase = HandPhase.COMPLETE
        return completed

    def score(self, prior_scores: Sequence[int]) -> HandScoreResult:
        self._ensure_phase(HandPhase.COMPLETE)
        assert self.state is not None
        return score_hand(
            tricks_won=self.state.tricks_won,
            trump_caller=self.trump_caller,
            hand_sizes_at_deal=self.hand_sizes_at_deal,
            prior_scores=prior_scores,
        )

    def _start_play(self) -> None:
        if self.trump is None:
            raise EngineInvariantError("Trump must be set before trick play.")
        self.state = PlayState(
            hands=self.hands,
            leader=self.leader,
            trump=self.trump,
            active_seats=self.active_seats,
        )
        self.phase = HandPhase.PLAY

    def _ensure_phase(self, expected: HandPhase) -> None:
        if self.phase != expected:
            raise PhaseError(f"Action not allowed in phase {self.phase.name.lower()}; expected {expected.name.lower()}.")

    def _note(self, message: str) -> None:
        if self.on_event is not None:
            self.on_event(message)
