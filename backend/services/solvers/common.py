# services/solvers/common.py
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional

from adapters.adapter_factory import create_estimator
from core.interfaces import TravelEstimator
from core.logic.cost_functions import fuel_cost, sum_ag, time_cost_minutes
from models.fleet import Driver
from models.rides import Ride
from models.solvers import Assignment, AssignmentOptions, ScheduleState, StrategyMeta, StrategyResult


def rides_by_start(rides: List[Ride]) -> List[Ride]:
    # sorted() is stable: equal start times keep input order
    return sorted(rides, key=lambda r: r.start_minutes)


def build_assignment(
    ride: Ride,
    driver: Driver,
    state: ScheduleState,
    estimator: TravelEstimator,
    options: AssignmentOptions,
) -> Assignment:
    """Loaded cost always; deadhead (from the driver's current position) per options."""
    loaded_km = estimator.estimate(ride.pickup, ride.dropoff).km
    loaded_minutes = ride.duration_minutes
    total = sum_ag(time_cost_minutes(loaded_minutes), fuel_cost(driver, loaded_km))

    deadhead_minutes: Optional[int] = None
    deadhead_km: Optional[float] = None
    if options.tracks_deadhead:
        deadhead = estimator.estimate(state.last_location, ride.pickup)
        deadhead_minutes, deadhead_km = deadhead.minutes, deadhead.km
        if options.include_deadhead_time:
            total = sum_ag(total, time_cost_minutes(deadhead_minutes))
        if options.include_deadhead_fuel:
            total = sum_ag(total, fuel_cost(driver, deadhead_km))

    return Assignment(
        ride=ride,
        driver=driver,
        total_cost_ag=total,
        loaded_time_minutes=loaded_minutes,
        loaded_distance_km=loaded_km,
        deadhead_time_minutes=deadhead_minutes,
        deadhead_distance_km=deadhead_km,
    )


def cheapest(candidates: List[Assignment]) -> Assignment:
    """Lowest total cost; ties go to the lexicographically smallest driver id."""
    return min(candidates, key=lambda a: (a.total_cost_ag, a.driver.id))


def summarize(
    name: str,
    assignments: List[Assignment],
    unserved: List[str],
    started: float,
) -> StrategyResult:
    return StrategyResult(
        assignments=assignments,
        served=len(assignments),
        objective=sum(a.total_cost_ag for a in assignments),
        unserved=unserved,
        meta=StrategyMeta(name=name, elapsed_ms=(time.perf_counter() - started) * 1000.0),
    )


@contextmanager
def batch_estimator(
    estimator: Optional[TravelEstimator], options: AssignmentOptions
) -> Iterator[TravelEstimator]:
    """
    Use the given estimator as is, or build one for this batch and close it
    (and its HTTP client) when the batch ends. Only the builder closes.
    """
    if estimator is not None:
        yield estimator
        return
    with create_estimator(options) as owned:
        yield owned
