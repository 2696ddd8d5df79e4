"""Exception hierarchy shared by the engine components."""

from __future__ import annotations


class RuleViolation(ValueError):
    """Raised when a submitted command breaks the rules of the game.

    The match controller turns these into silent rejections.
    """


class PhaseError(RuleViolation):
    """Raised when a command arrives in the wrong phase of a hand."""


class EngineInvariantError(RuntimeError):
    """Raised when the engine is driven in an impossible sequence."""
