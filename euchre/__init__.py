"""Core rules engine for Euchre."""

__all__ = [
    "cards",
    "deck",
    "bidding",
    "trick",
    "mechanics",
    "state",
    "scoring",
    "game",
    "match",
    "events",
    "config",
    "errors",
    "service",
]
