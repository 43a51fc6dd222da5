# models/rides.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.clock import parse_hhmm
from models.waypoints import Coordinate


class Ride(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str  # YYYY-MM-DD, informational (single-day batches)
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    pickup: Coordinate
    dropoff: Coordinate
    passengers: int = Field(gt=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def _valid_hhmm(cls, v: str) -> str:
        parse_hhmm(v)  # InvalidArgument is a ValueError -> pydantic reports it
        return v

    @model_validator(mode="after")
    def _ordered(self):
        if self.end_minutes < self.start_minutes:
            raise ValueError(
                f"ride {self.id} ends ({self.end_time}) before it starts ({self.start_time})"
            )
        return self

    @property
    def start_minutes(self) -> int:
        return parse_hhmm(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_hhmm(self.end_time)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes
