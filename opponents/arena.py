"""Simple arena pitting two opponent tiers against each other."""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional

from euchre.config import GameConfig
from euchre.match import EuchreGame

from . import POLICY_REGISTRY


def run_match(team_a: str, team_b: str, *, seed: Optional[int] = None) -> dict:
    """Play one match with computer seats only; team A holds seats 0 and 2."""
    config = GameConfig(
        human_seat=None,
        seed=seed,
        seat_difficulties={0: team_a, 1: team_b, 2: team_a, 3: team_b},
    )
    game = EuchreGame(config)
    game.deal_hands()
    if not game.is_over:
        raise RuntimeError("Computer seats stopped before the match was decided.")
    return {
        "scores": list(game.scores),
        "winner": game.winner,
        "history": [
            {
                "scoring_team": result.scoring_team,
                "points": result.points,
                "outcome": result.outcome.value,
            }
            for result in game.hand_history
        ],
    }


def run_series(team_a: str, team_b: str, *, n_matches: int = 10, seed: Optional[int] = None) -> dict:
    wins = [0, 0]
    hands = 0
    for idx in range(n_matches):
        match_seed = None if seed is None else seed + idx
        result = run_match(team_a, team_b, seed=match_seed)
        wins[result["winner"]] += 1
        hands += len(result["history"])
    return {"wins": wins, "hands": hands}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run matches between opponent tiers.")
    parser.add_argument("--team-a", default="hard", choices=POLICY_REGISTRY.keys())
    parser.add_argument("--team-b", default="easy", choices=POLICY_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of matches to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
    results = run_series(args.team_a, args.team_b, n_matches=args.n, seed=args.seed)

    print(f"Wins after {args.n} matches: {args.team_a}={results['wins'][0]}, {args.team_b}={results['wins'][1]}")
    print(f"Hands played: {results['hands']}")


if __name__ == "__main__":
    main()
