from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.waypoints import Coordinate


class LicenseClass(str, Enum):
    B = "B"
    D1 = "D1"
    D = "D"


# Passenger cap per license tier. None = no cap (vehicle seats still apply).
LICENSE_PASSENGER_CAPS = {
    LicenseClass.B: 8,
    LicenseClass.D1: 16,
    LicenseClass.D: None,
}


class ShiftWindow(BaseModel):
    """[start, end) in minutes since midnight."""

    model_config = ConfigDict(frozen=True)

    start_minutes: int = Field(ge=0, le=24 * 60)
    end_minutes: int = Field(ge=0, le=24 * 60)

    @model_validator(mode="after")
    def _ordered(self):
        if self.start_minutes > self.end_minutes:
            raise ValueError(
                f"shift starts after it ends ({self.start_minutes} > {self.end_minutes})"
            )
        return self


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    license: LicenseClass
    vehicle_seats: int = Field(gt=0)
    fuel_cost: float = Field(gt=0)  # shekels per km
    location: Coordinate
    # may arrive unordered / overlapping; never merged
    shifts: Optional[List[ShiftWindow]] = None

    @property
    def passenger_cap(self) -> Optional[int]:
        return LICENSE_PASSENGER_CAPS[self.license]
