"""Computer opponents for Euchre."""

from typing import Dict, Optional

from .base import OpponentPolicy
from .easy import RandomPolicy
from .hard import GreedyPolicy
from .medium import ConservativePolicy

POLICY_REGISTRY: Dict[str, type[OpponentPolicy]] = {
    "easy": RandomPolicy,
    "medium": ConservativePolicy,
    "hard": GreedyPolicy,
}


def policy_for(difficulty: str, *, seed: Optional[int] = None, signal_seat: int = 2) -> OpponentPolicy:
    """Build the policy for a difficulty tier."""
    try:
        policy_cls = POLICY_REGISTRY[difficulty]
    except KeyError:
        raise ValueError(f"Unknown difficulty: {difficulty!r}") from None
    return policy_cls.build(seed=seed, signal_seat=signal_seat)


__all__ = [
    "OpponentPolicy",
    "RandomPolicy",
    "ConservativePolicy",
    "GreedyPolicy",
    "POLICY_REGISTRY",
    "policy_for",
]
