import math
from pydantic import BaseModel, ConfigDict, Field


class TravelEstimate(BaseModel):
    # Distance in **kilometers**, time in whole **minutes**
    model_config = ConfigDict(frozen=True)

    km: float = Field(ge=0)
    minutes: int = Field(ge=0)

    @classmethod
    def from_osrm(cls, route: dict) -> "TravelEstimate":
        # OSRM returns meters / seconds
        return cls(
            km=float(route["distance"]) / 1000.0,
            minutes=int(math.floor(float(route["duration"]) / 60.0 + 0.5)),
        )
