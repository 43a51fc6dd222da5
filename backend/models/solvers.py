from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

from models.fleet import Driver
from models.rides import Ride
from models.waypoints import Coordinate


class AssignmentOptions(BaseModel):
    include_deadhead_time: bool = False
    include_deadhead_fuel: bool = False
    use_external_routing: bool = False

    @property
    def tracks_deadhead(self) -> bool:
        return self.include_deadhead_time or self.include_deadhead_fuel


@dataclass
class ScheduleState:
    """Per-driver, per-run position in the day. Never stored on Driver."""

    last_end_time_minutes: int
    last_location: Coordinate

    @classmethod
    def at_home(cls, driver: Driver) -> "ScheduleState":
        return cls(last_end_time_minutes=0, last_location=driver.location)


class Assignment(BaseModel):
    ride: Ride
    driver: Driver
    total_cost_ag: int  # agorot
    loaded_time_minutes: int
    loaded_distance_km: float
    deadhead_time_minutes: Optional[int] = None
    deadhead_distance_km: Optional[float] = None


class StrategyMeta(BaseModel):
    name: str
    elapsed_ms: float = 0.0
    failed: bool = False
    error: Optional[str] = None


class StrategyResult(BaseModel):
    assignments: List[Assignment] = Field(default_factory=list)
    served: int = 0  # -1 marks a failed run
    objective: Union[int, float] = 0  # sum of total_cost_ag (int); +inf for a failed run
    unserved: List[str] = Field(default_factory=list)
    meta: StrategyMeta

    @classmethod
    def failed(cls, name: str, elapsed_ms: float, error: str) -> "StrategyResult":
        return cls(
            served=-1,
            objective=math.inf,
            meta=StrategyMeta(name=name, elapsed_ms=elapsed_ms, failed=True, error=error),
        )


# ───────────────────────── output plan ─────────────────────────


class DriverPlan(BaseModel):
    driver_id: str
    ride_ids: List[str]
    total_cost_ag: int


class AssignmentPlan(BaseModel):
    strategy: str
    assignments: List[DriverPlan] = Field(default_factory=list)
    served: int
    unserved: List[str] = Field(default_factory=list)
    objective_ag: int
    total_cost_shekels: float
    elapsed_ms: float


# ───────────────────────── API ─────────────────────────


class AssignRequest(BaseModel):
    # raw records; validated by file_handler.ride_loader before reaching the engine
    drivers: List[Dict[str, Any]]
    rides: List[Dict[str, Any]]
    strategy: str = "auto"  # any registered strategy name
    options: AssignmentOptions = Field(default_factory=AssignmentOptions)
