# core/logic/constraints.py
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from core.interfaces import TravelEstimator
from models.fleet import Driver
from models.rides import Ride
from models.solvers import ScheduleState, StrategyResult


class ViolationType(str, Enum):
    LEGAL = "legal"
    DEADHEAD = "deadhead"
    SHIFT = "shift"
    OVERLAP = "overlap"


class ConstraintViolation(BaseModel):
    type: ViolationType
    message: str
    driver_id: str
    ride_id: str


class ConstraintResult(BaseModel):
    feasible: bool = True
    violations: List[ConstraintViolation] = Field(default_factory=list)

    @classmethod
    def of(cls, violations: List[ConstraintViolation]) -> "ConstraintResult":
        return cls(feasible=not violations, violations=violations)


def _violation(kind: ViolationType, ride: Ride, driver: Driver, msg: str) -> ConstraintViolation:
    return ConstraintViolation(type=kind, message=msg, driver_id=driver.id, ride_id=ride.id)


def check_legal(ride: Ride, driver: Driver) -> Optional[ConstraintViolation]:
    """License tier cap and vehicle seats must both cover the passenger count."""
    cap = driver.passenger_cap
    if cap is not None and ride.passengers > cap:
        return _violation(
            ViolationType.LEGAL,
            ride,
            driver,
            f"license {driver.license.value} allows {cap} passengers, ride needs {ride.passengers}",
        )
    if ride.passengers > driver.vehicle_seats:
        return _violation(
            ViolationType.LEGAL,
            ride,
            driver,
            f"vehicle has {driver.vehicle_seats} seats, ride needs {ride.passengers}",
        )
    return None


def check_deadhead(
    ride: Ride, driver: Driver, state: ScheduleState, time_to_reach: int
) -> Optional[ConstraintViolation]:
    arrival = state.last_end_time_minutes + time_to_reach
    if arrival > ride.start_minutes:
        return _violation(
            ViolationType.DEADHEAD,
            ride,
            driver,
            f"arrives at minute {arrival}, ride starts at minute {ride.start_minutes}",
        )
    return None


def fits_some_shift(driver: Driver, start: int, end: int, time_to_reach: int) -> bool:
    # No shifts -> always available. Windows are checked one by one, never merged.
    if not driver.shifts:
        return True
    return any(
        start >= shift.start_minutes + time_to_reach and end <= shift.end_minutes
        for shift in driver.shifts
    )


def check_shift(ride: Ride, driver: Driver, time_to_reach: int) -> Optional[ConstraintViolation]:
    if fits_some_shift(driver, ride.start_minutes, ride.end_minutes, time_to_reach):
        return None
    return _violation(
        ViolationType.SHIFT,
        ride,
        driver,
        f"no shift covers {ride.start_time}-{ride.end_time} with {time_to_reach} min deadhead",
    )


def is_feasible(
    ride: Ride,
    driver: Driver,
    state: ScheduleState,
    estimator: TravelEstimator,
) -> ConstraintResult:
    """
    Legal -> deadhead reachability -> shift containment. All reasons are
    collected. Pure given its inputs; call again whenever `state` changes.
    """
    violations: List[ConstraintViolation] = []

    legal = check_legal(ride, driver)
    if legal:
        violations.append(legal)

    time_to_reach = estimator.estimate(state.last_location, ride.pickup).minutes

    deadhead = check_deadhead(ride, driver, state, time_to_reach)
    if deadhead:
        violations.append(deadhead)

    shift = check_shift(ride, driver, time_to_reach)
    if shift:
        violations.append(shift)

    return ConstraintResult.of(violations)


def feasible_drivers(
    ride: Ride,
    drivers: List[Driver],
    schedules: Dict[str, ScheduleState],
    estimator: TravelEstimator,
) -> List[Driver]:
    out: List[Driver] = []
    for driver in drivers:
        state = schedules.get(driver.id)
        if state is None:
            continue
        if is_feasible(ride, driver, state, estimator).feasible:
            out.append(driver)
    return out


def validate_assignments(result: StrategyResult, estimator: TravelEstimator) -> ConstraintResult:
    """
    Replay a result in ride order against fresh schedule state. Reports every
    constraint violation plus any overlapping rides for the same driver.
    """
    violations: List[ConstraintViolation] = []
    schedules: Dict[str, ScheduleState] = {}
    ordered = sorted(result.assignments, key=lambda a: a.ride.start_minutes)

    for a in ordered:
        state = schedules.setdefault(a.driver.id, ScheduleState.at_home(a.driver))
        if state.last_end_time_minutes > a.ride.start_minutes:
            violations.append(
                _violation(
                    ViolationType.OVERLAP,
                    a.ride,
                    a.driver,
                    f"starts at minute {a.ride.start_minutes}, previous ride ends at "
                    f"minute {state.last_end_time_minutes}",
                )
            )
        violations.extend(is_feasible(a.ride, a.driver, state, estimator).violations)
        state.last_end_time_minutes = a.ride.end_minutes
        state.last_location = a.ride.dropoff

    return ConstraintResult.of(violations)
