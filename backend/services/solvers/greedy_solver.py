# services/solvers/greedy_solver.py
from __future__ import annotations
import logging
import time
from typing import Dict, List, Optional

from core.interfaces import AssignmentStrategy, TravelEstimator
from core.logic.constraints import feasible_drivers
from models.fleet import Driver
from models.rides import Ride
from models.solvers import Assignment, AssignmentOptions, ScheduleState, StrategyResult
from services.solvers.common import (
    batch_estimator,
    build_assignment,
    cheapest,
    rides_by_start,
    summarize,
)

logger = logging.getLogger(__name__)


class GreedyChainingSolver(AssignmentStrategy):
    """
    One pass over rides in start-time order. Each ride goes to the cheapest
    driver that is feasible against their *current* schedule state; the winner's
    state then moves to the ride's end time and dropoff, so one driver can
    chain several rides. Decisions are never revisited.
    """

    name = "greedy"

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
        schedules: Dict[str, ScheduleState] = {d.id: ScheduleState.at_home(d) for d in drivers}
        assignments: List[Assignment] = []
        unserved: List[str] = []

        for ride in rides_by_start(rides):
            feasible = feasible_drivers(ride, drivers, schedules, estimator)
            if not feasible:
                logger.debug(f"ride {ride.id}: no feasible driver, left unserved")
                unserved.append(ride.id)
                continue

            best = cheapest(
                [build_assignment(ride, d, schedules[d.id], estimator, options) for d in feasible]
            )
            assignments.append(best)

            state = schedules[best.driver.id]
            state.last_end_time_minutes = ride.end_minutes
            state.last_location = ride.dropoff
            logger.debug(
                f"ride {ride.id} -> driver {best.driver.id} ({best.total_cost_ag} ag, "
                f"{len(feasible)} feasible)"
            )

        result = summarize(self.name, assignments, unserved, started)
        logger.info(
            f"greedy: served {result.served}/{len(rides)} rides with {len(drivers)} drivers, "
            f"objective {result.objective} ag in {result.meta.elapsed_ms:.1f} ms"
        )
        return result
