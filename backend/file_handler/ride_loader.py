# file_handler/ride_loader.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.clock import parse_hhmm
from core.exceptions import InvalidArgument
from models.fleet import Driver, LicenseClass, ShiftWindow
from models.rides import Ride

Source = Union[str, Path, List[Any]]


# ───────────────────────── raw record shapes ─────────────────────────


class RawShift(BaseModel):
    start: str  # HH:MM
    end: str  # HH:MM

    @field_validator("start", "end")
    @classmethod
    def _hhmm(cls, v: str) -> str:
        parse_hhmm(v)
        return v


class RawDriver(BaseModel):
    model_config = ConfigDict(extra="ignore")

    driverId: str
    firstName: str
    lastName: str
    city: str = ""
    mainPhone: str = ""
    status: str = ""
    licenceDegree: List[LicenseClass] = Field(min_length=1)
    numberOfSeats: int = Field(gt=0)
    fuelCost: float = Field(gt=0)  # shekels per km
    city_coords: Tuple[float, float]
    shifts: Optional[List[RawShift]] = None


class RawRide(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(alias="_id")
    date: str
    startTime: str
    endTime: str
    startPoint: str = ""
    endPoint: str = ""
    numberOfSeats: int = Field(gt=0)
    startPoint_coords: Tuple[float, float]
    endPoint_coords: Tuple[float, float]


# ───────────────────────── mapping ─────────────────────────


def _to_driver(raw: RawDriver) -> Driver:
    return Driver(
        id=raw.driverId,
        name=f"{raw.firstName} {raw.lastName}".strip(),
        license=raw.licenceDegree[0],  # first listed licence wins
        vehicle_seats=raw.numberOfSeats,
        fuel_cost=raw.fuelCost,
        location=raw.city_coords,
        shifts=(
            [
                ShiftWindow(start_minutes=parse_hhmm(s.start), end_minutes=parse_hhmm(s.end))
                for s in raw.shifts
            ]
            if raw.shifts is not None
            else None
        ),
    )


def _to_ride(raw: RawRide) -> Ride:
    return Ride(
        id=raw.id,
        date=raw.date,
        start_time=raw.startTime,
        end_time=raw.endTime,
        pickup=raw.startPoint_coords,
        dropoff=raw.endPoint_coords,
        passengers=raw.numberOfSeats,
    )


def _read(source: Source, what: str) -> List[Any]:
    if isinstance(source, (str, Path)):
        try:
            with open(source, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidArgument(f"cannot read {what} from {source}: {e}") from e
    else:
        data = source
    if not isinstance(data, list):
        raise InvalidArgument(f"{what} must be a JSON array, got {type(data).__name__}")
    return data


def load_drivers(source: Source) -> List[Driver]:
    out: List[Driver] = []
    for i, rec in enumerate(_read(source, "drivers")):
        try:
            out.append(_to_driver(RawDriver.model_validate(rec)))
        except ValidationError as e:
            raise InvalidArgument(f"driver #{i}: {e}") from e
    return out


def load_rides(source: Source) -> List[Ride]:
    out: List[Ride] = []
    for i, rec in enumerate(_read(source, "rides")):
        try:
            out.append(_to_ride(RawRide.model_validate(rec)))
        except ValidationError as e:
            raise InvalidArgument(f"ride #{i}: {e}") from e
    return out
