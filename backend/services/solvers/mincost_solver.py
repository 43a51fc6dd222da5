# services/solvers/mincost_solver.py
from __future__ import annotations
import logging
import time
from typing import Dict, List, Optional

from core.interfaces import AssignmentStrategy, TravelEstimator
from core.logic.constraints import feasible_drivers
from models.fleet import Driver
from models.rides import Ride
from models.solvers import AssignmentOptions, ScheduleState, StrategyResult
from services.solvers.common import (
    batch_estimator,
    build_assignment,
    cheapest,
    rides_by_start,
    summarize,
)

logger = logging.getLogger(__name__)


class MinCostSingleRideSolver(AssignmentStrategy):
    """
    Baseline without chaining: per ride the cheapest feasible driver (same
    cost model and tie-break as greedy), but every driver serves at most one
    ride and is always evaluated from home at minute 0.
    Not a min-cost-flow solver; it never reconsiders earlier choices.
    """

    name = "mincost"

    def __init__(self, estimator: Optional[TravelEstimator] = None):
        self.estimator = estimator

    def run(
        self,
        rides: List[Ride],
        drivers: List[Driver],
        options: Optional[AssignmentOptions] = None,
        estimator: Optional[TravelEstimator] = None,
    ) -> StrategyResult:
        options = options or AssignmentOptions()
        with batch_estimator(estimator or self.estimator, options) as est:
            return self._assign(rides, drivers, options, est)

    def _assign(
        self,
        rides: List[Ride],
        drivers: List[Driver],
        options: AssignmentOptions,
        estimator: TravelEstimator,
    ) -> StrategyResult:
        started = time.perf_counter()
        home: Dict[str, ScheduleState] = {d.id: ScheduleState.at_home(d) for d in drivers}
        available = list(drivers)
        assignments = []
        unserved: List[str] = []

        for ride in rides_by_start(rides):
            feasible = feasible_drivers(ride, available, home, estimator)
            if not feasible:
                unserved.append(ride.id)
                continue
            best = cheapest(
                [build_assignment(ride, d, home[d.id], estimator, options) for d in feasible]
            )
            assignments.append(best)
            available = [d for d in available if d.id != best.driver.id]

        result = summarize(self.name, assignments, unserved, started)
        logger.info(
            f"mincost: served {result.served}/{len(rides)} rides, objective {result.objective} ag"
        )
        return result
