"""Validation schema for table configuration."""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator

Difficulty = Literal["easy", "medium", "hard"]

SEATS = range(4)


def _validate_seat(value: int) -> int:
    if value not in SEATS:
        raise ValueError(f"Seat must be between 0 and 3, got {value}.")
    return value


class GameConfig(BaseModel):
    human_seat: Optional[int] = Field(0, description="Seat driven by a person; None for an all-computer table.")
    difficulty: Difficulty = Field("medium", description="Default tier for computer seats.")
    seat_difficulties: Dict[int, Difficulty] = Field(
        default_factory=dict,
        description="Per-seat overrides of the default difficulty.",
    )
    seed: Optional[int] = Field(None, description="Seed for shuffling and random opponents.")
    event_log_limit: int = Field(100, ge=1, description="Number of event log lines kept, oldest dropped first.")
    first_dealer: int = Field(3, description="Dealer of the first hand once the deal rotates.")

    @field_validator("human_seat")
    @classmethod
    def validate_human_seat(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        return _validate_seat(value)

    @field_validator("first_dealer")
    @classmethod
    def validate_first_dealer(cls, value: int) -> int:
        return _validate_seat(value)

    @field_validator("seat_difficulties")
    @classmethod
    def validate_seat_difficulties(cls, value: Dict[int, Difficulty]) -> Dict[int, Difficulty]:
        for seat in value:
            _validate_seat(seat)
        return value

    def difficulty_for(self, seat: int) -> Difficulty:
        return self.seat_difficulties.get(seat, self.difficulty)

    def is_human(self, seat: int) -> bool:
        return self.human_seat is not None and seat == self.human_seat
