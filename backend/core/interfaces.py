from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
from models.distance_matrix import TravelEstimate
from models.fleet import Driver
from models.rides import Ride
from models.solvers import AssignmentOptions, StrategyResult
from models.waypoints import Coordinate


class TravelEstimator(ABC):
    """All local/online distance-time providers must implement this."""

    name: str = "estimator"

    @abstractmethod
    def estimate(self, origin: Coordinate, destination: Coordinate) -> TravelEstimate: ...

    def close(self) -> None:
        """Release held resources (HTTP clients). No-op for offline estimators."""

    def __enter__(self) -> "TravelEstimator":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AssignmentStrategy(ABC):
    """All assignment strategies (greedy, mincost, auto, …) must implement this."""

    name: str = "strategy"

    @abstractmethod
    def run(
        self,
        rides: List[Ride],
        drivers: List[Driver],
        options: Optional[AssignmentOptions] = None,
        estimator: Optional[TravelEstimator] = None,
    ) -> StrategyResult: ...
