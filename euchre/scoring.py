"""Hand scoring helpers for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .deck import HAND_SIZE, NUM_SEATS, partner_of, team_of

WINNING_SCORE = 10


class ScoringError(ValueError):
    """Raised when a hand cannot be scored."""


class Outcome(Enum):
    MADE = "made"
    MARCH = "march"
    LONE_MARCH = "lone march"
    EUCHRE = "euchre"
    LONE_EUCHRE = "lone euchre"


POINTS: dict[Outcome, int] = {
    Outcome.MADE: 1,
    Outcome.MARCH: 2,
    Outcome.LONE_MARCH: 4,
    Outcome.EUCHRE: 2,
    Outcome.LONE_EUCHRE: 4,
}


@dataclass(frozen=True)
class HandScoreResult:
    new_scores: Tuple[int, int]
    scoring_team: int
    points: int
    outcome: Outcome
    maker_team: int
    maker_tricks: int
    lone_team: Optional[int]


def lone_team(hand_sizes_at_deal: Sequence[int]) -> Optional[int]:
    """Return the team playing alone, if any.

    A seat plays alone when it was dealt a full hand and its partner was
    dealt nothing.
    """
    for seat in range(NUM_SEATS):
        if hand_sizes_at_deal[seat] == HAND_SIZE and hand_sizes_at_deal[partner_of(seat)] == 0:
            return team_of(seat)
    return None


def team_tricks(tricks_won: Sequence[int], team: int) -> int:
    return sum(tricks_won[seat] for seat in range(NUM_SEATS) if team_of(seat) == team)


def score_hand(
    *,
    tricks_won: Sequence[int],
    trump_caller: Optional[int],
    hand_sizes_at_deal: Sequence[int],
    prior_scores: Sequence[int],
) -> HandScoreResult:
    if trump_caller is None:
        raise ScoringError("Cannot score a hand without a trump caller.")
    if len(tricks_won) != NUM_SEATS or len(hand_sizes_at_deal) != NUM_SEATS:
        raise ScoringError("Exactly four seats are supported.")
    if len(prior_scores) != 2:
        raise ScoringError("Exactly two teams are supported.")
    if sum(tricks_won) != HAND_SIZE:
        raise ScoringError(f"Expected {HAND_SIZE} tricks, got {sum(tricks_won)}.")

    maker_team = team_of(trump_caller)
    defender_team = 1 - maker_team
    maker_tricks = team_tricks(tricks_won, maker_team)
    defender_tricks = team_tricks(tricks_won, defender_team)
    alone = lone_team(hand_sizes_at_deal)

    if defender_tricks >= 3:
        scoring_team = defender_team
        outcome = Outcome.LONE_EUCHRE if alone == defender_team else Outcome.EUCHRE
    elif maker_tricks == HAND_SIZE:
        scoring_team = maker_team
        outcome = Outcome.LONE_MARCH if alone == maker_team else Outcome.MARCH
    else:
        scoring_team = maker_team
        outcome = Outcome.MADE

    points = POINTS[outcome]
    new_scores = list(prior_scores)
    new_scores[scoring_team] += points

    return HandScoreResult(
        new_scores=(new_scores[0], new_scores[1]),
        scoring_team=scoring_team,
        points=points,
        outcome=outcome,
        maker_team=maker_team,
        maker_tricks=maker_tricks,
        lone_team=alone,
    )


def match_winner(scores: Sequence[int]) -> Optional[int]:
    for team, score in enumerate(scores):
        if score >= WINNING_SCORE:
            return team
    return None
