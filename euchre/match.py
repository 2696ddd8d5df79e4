"""Match controller: the single writer of Euchre game state."""

from __future__ import annotations

import logging
from collections import deque
from random import Random
from typing import Callable, Deque, Dict, List, Mapping, Optional, Sequence, Tuple

from opponents import OpponentPolicy, policy_for

from .cards import Card, Suit
from .config import GameConfig
from .deck import NUM_SEATS, next_seat, partner_of
from .errors import PhaseError, RuleViolation
from .events import EventChannel
from .game import HandEngine, HandPhase
from .scoring import HandScoreResult, match_winner

logger = logging.getLogger(__name__)


class EuchreGame:
    """Track a match across hands and drive computer seats between human turns.

    Every command returns True when it was applied and False when it was
    rejected; a rejected command leaves the match untouched and is kept in
    ``last_rejection``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        policies: Optional[Mapping[int, OpponentPolicy]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = Random(self.config.seed)
        self.policies: Dict[int, OpponentPolicy] = dict(policies) if policies else self._default_policies()
        self.scores: List[int] = [0, 0]
        self.dealer = (self.config.first_dealer - 1) % NUM_SEATS
        self.hand: Optional[HandEngine] = None
        self.hand_history: List[HandScoreResult] = []
        self.winner: Optional[int] = None
        self.last_rejection: Optional[RuleViolation] = None
        self._log: Deque[str] = deque(maxlen=self.config.event_log_limit)
        self.events_recorded = 0

        self.hand_started = EventChannel("hand started")
        self.trick_resolved = EventChannel("trick resolved")
        self.hand_scored = EventChannel("hand scored")

    def _default_policies(self) -> Dict[int, OpponentPolicy]:
        human = self.config.human_seat
        signal_seat = partner_of(human) if human is not None else 2
        policies: Dict[int, OpponentPolicy] = {}
        for seat in range(NUM_SEATS):
            if self.config.is_human(seat):
                continue
            seed = None if self.config.seed is None else self.config.seed + seat
            policies[seat] = policy_for(self.config.difficulty_for(seat), seed=seed, signal_seat=signal_seat)
        return policies

    # Queries -----------------------------------------------------------

    @property
    def event_log(self) -> List[str]:
        return list(self._log)

    @property
    def trump(self) -> Optional[Suit]:
        return self.hand.trump if self.hand else None

    @property
    def kitty(self) -> Optional[Card]:
        return self.hand.kitty if self.hand else None

    @property
    def current_trick(self) -> List[Tuple[int, Card]]:
        return self.hand.current_trick if self.hand else []

    @property
    def hands(self) -> List[List[Card]]:
        if self.hand is None:
            return [[] for _ in range(NUM_SEATS)]
        return [list(cards) for cards in self.hand.hands]

    @property
    def bidding_round(self) -> int:
        if self.hand is None:
            return 0
        return self.hand.bidding.round_number

    @property
    def current_bidder(self) -> Optional[int]:
        if self.hand is None or self.hand.phase != HandPhase.BIDDING:
            return None
        return self.hand.bidding.current_bidder

    @property
    def awaiting_discard(self) -> bool:
        return self.hand is not None and self.hand.awaiting_discard

    @property
    def tricks_won(self) -> List[int]:
        return self.hand.tricks_won if self.hand else [0] * NUM_SEATS

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def last_hand_result(self) -> Optional[HandScoreResult]:
        return self.hand_history[-1] if self.hand_history else None

    def available_suits(self) -> List[Suit]:
        return self.hand.available_suits() if self.hand else []

    def legal_plays(self, seat: int) -> List[Card]:
        return self.hand.legal_plays(seat) if self.hand else []

    def current_actor(self) -> Optional[int]:
        if self.hand is None or self.winner is not None:
            return None
        return self.hand.current_actor()

    # Commands ----------------------------------------------------------

    def deal_hands(self, *, deck: Optional[Sequence[Card]] = None, sitting_out: Optional[int] = None) -> bool:
        """Rotate the deal and start a new hand, superseding any hand in progress."""
        if self.winner is not None:
            return self._reject(PhaseError("The match is already over."), "deal")
        try:
            self._start_hand(deck=deck, sitting_out=sitting_out)
        except RuleViolation as exc:
            return self._reject(exc, "deal")
        self._advance()
        return True

    def order_up(self, seat: int) -> bool:
        return self._submit(f"order up by seat {seat}", lambda hand: hand.order_up(seat))

    def pass_bid(self, seat: int) -> bool:
        return self._submit(f"pass by seat {seat}", lambda hand: hand.pass_bid(seat))

    def order_up_second_round(self, seat: int, suit: Suit) -> bool:
        return self._submit(
            f"call of {suit} by seat {seat}",
            lambda hand: hand.order_up_second_round(seat, suit),
        )

    def discard(self, card: Card) -> bool:
        return self._submit(f"discard of {card}", lambda hand: hand.discard(card))

    def play_card(self, seat: int, card: Card) -> bool:
        return self._submit(f"play of {card} by seat {seat}", lambda hand: self._play(hand, seat, card))

    # Internals ---------------------------------------------------------

    def _submit(self, description: str, command: Callable[[HandEngine], None]) -> bool:
        if self.winner is not None:
            return self._reject(PhaseError("The match is already over."), description)
        if self.hand is None:
            return self._reject(PhaseError("No hand has been dealt."), description)
        try:
            command(self.hand)
        except RuleViolation as exc:
            return self._reject(exc, description)
        self.last_rejection = None
        self._after_command()
        self._advance()
        return True

    def _reject(self, exc: RuleViolation, description: str) -> bool:
        logger.debug("Rejected %s: %s", description, exc)
        self.last_rejection = exc
        return False

    def _start_hand(self, *, deck: Optional[Sequence[Card]] = None, sitting_out: Optional[int] = None) -> None:
        dealer = next_seat(self.dealer)
        hand = HandEngine(
            dealer=dealer,
            human_seat=self.config.human_seat,
            rng=self.rng,
            deck=deck,
            sitting_out=sitting_out,
            on_event=self._record,
        )
        self.dealer = dealer
        self.hand = hand
        logger.debug("Hand started with seat %d dealing", self.dealer)
        self.hand_started.publish()

    def _play(self, hand: HandEngine, seat: int, card: Card) -> None:
        completed = hand.play_card(seat, card)
        if completed is not None:
            self.trick_resolved.publish()

    def _after_command(self) -> None:
        if self.hand is not None and self.hand.phase == HandPhase.COMPLETE:
            self._finish_hand()

    def _finish_hand(self) -> None:
        assert self.hand is not None
        result = self.hand.score(self.scores)
        self.scores = list(result.new_scores)
        self.hand_history.append(result)
        self._record(
            f"Team {result.scoring_team} scores {result.points} ({result.outcome.value}); "
            f"score is {self.scores[0]}-{self.scores[1]}."
        )
        logger.info(
            "Hand scored: team %d +%d (%s), scores %s",
            result.scoring_team,
            result.points,
            result.outcome.value,
            self.scores,
        )
        self.hand_scored.publish()

        self.winner = match_winner(self.scores)
        if self.winner is not None:
            self._record(f"Team {self.winner} wins the match.")
            logger.info("Match won by team %d with scores %s", self.winner, self.scores)
            return
        self._start_hand()

    def _advance(self) -> None:
        """Let computer seats act until a human decision is needed."""
        while self.winner is None:
            seat = self.current_actor()
            if seat is None or self.config.is_human(seat) or seat not in self.policies:
                return
            if not self._automate(seat):
                return
            self._after_command()

    def _automate(self, seat: int) -> bool:
        hand = self.hand
        assert hand is not None
        policy = self.policies[seat]

        if hand.phase == HandPhase.BIDDING:
            if hand.bidding.round_number == 1:
                if policy.order_up(hand, seat):
                    hand.order_up(seat)
                else:
                    hand.pass_bid(seat)
            else:
                suit = policy.call_trump(hand, seat)
                if suit is None:
                    hand.pass_bid(seat)
                else:
                    hand.order_up_second_round(seat, suit)
            return True

        if hand.phase == HandPhase.DISCARD:
            hand.discard(policy.choose_discard(hand, seat))
            return True

        if hand.phase == HandPhase.PLAY:
            card = policy.play_card(hand, seat)
            if card is None:
                logger.debug("Seat %d has no move available", seat)
                return False
            logger.debug("%s policy for seat %d plays %s", policy.name, seat, card)
            self._play(hand, seat, card)
            return True

        return False

    def _record(self, message: str) -> None:
        self._log.append(message)
        self.events_recorded += 1
