from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    # Accept [lat, lon] pairs (raw records ship coordinates that way)
    @model_validator(mode="before")
    @classmethod
    def _accept_pair(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                raise ValueError(f"coordinate pair must be [lat, lon], got {v!r}")
            return {"lat": float(v[0]), "lon": float(v[1])}
        if isinstance(v, dict) and "lng" in v and "lon" not in v:
            out = dict(v)
            out["lon"] = out.pop("lng")
            return out
        return v
