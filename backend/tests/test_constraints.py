# backend/tests/test_constraints.py
import pytest

from core.logic.constraints import (
    ViolationType,
    check_deadhead,
    check_legal,
    check_shift,
    feasible_drivers,
    is_feasible,
)
from models.solvers import ScheduleState
from data_toy import FixedEstimator, TEL_AVIV, make_driver, make_ride


def _at(minute: int) -> ScheduleState:
    return ScheduleState(last_end_time_minutes=minute, last_location=TEL_AVIV)


# ───────────────────────── legal ─────────────────────────


@pytest.mark.parametrize(
    "license,seats,passengers,ok",
    [
        ("B", 8, 8, True),
        ("B", 8, 9, False),  # license cap
        ("B", 6, 7, False),  # seats
        ("D1", 16, 16, True),
        ("D1", 20, 17, False),  # D1 caps at 16 even with spare seats
        ("D1", 12, 14, False),
        ("D", 50, 40, True),  # D has no passenger cap
        ("D", 30, 31, False),
        ("D", 16, 4, True),  # higher tier may carry lower-tier loads
    ],
)
def test_legal(license, seats, passengers, ok):
    driver = make_driver("d", license=license, seats=seats)
    ride = make_ride("r", passengers=passengers)
    violation = check_legal(ride, driver)
    assert (violation is None) is ok
    if violation:
        assert violation.type == ViolationType.LEGAL


# ───────────────────────── deadhead ─────────────────────────


def test_deadhead_arrival_on_the_minute_is_feasible():
    driver = make_driver("d")
    ride = make_ride("r", start="08:35", end="09:00")  # 515
    assert check_deadhead(ride, driver, _at(500), time_to_reach=15) is None


def test_deadhead_one_minute_late_is_infeasible():
    driver = make_driver("d")
    ride = make_ride("r", start="08:34", end="09:00")  # 514
    v = check_deadhead(ride, driver, _at(500), time_to_reach=15)
    assert v is not None and v.type == ViolationType.DEADHEAD


# ───────────────────────── shifts ─────────────────────────


def test_no_shifts_means_always_available():
    driver = make_driver("d", shifts=None)
    assert check_shift(make_ride("r", start="03:00", end="23:00"), driver, 30) is None
    assert check_shift(make_ride("r", start="03:00", end="23:00"), make_driver("e", shifts=[]), 30) is None


@pytest.mark.parametrize(
    "start,end,ok",
    [
        ("07:15", "13:00", True),  # start == shift start + deadhead
        ("07:14", "13:00", False),
        ("08:00", "14:00", True),  # end == shift end
        ("08:00", "14:01", False),
    ],
)
def test_shift_edges_with_deadhead(start, end, ok):
    driver = make_driver("d", shifts=[("07:00", "14:00")])
    v = check_shift(make_ride("r", start=start, end=end), driver, time_to_reach=15)
    assert (v is None) is ok


def test_overlapping_unordered_windows_are_checked_one_by_one():
    # 07:50-09:50 sits inside the 07:00-10:00 window
    driver = make_driver("d", shifts=[("08:00", "12:00"), ("06:00", "08:00"), ("07:00", "10:00")])
    assert check_shift(make_ride("r", start="07:50", end="09:50"), driver, 0) is None
    # 06:30-10:30 would only fit a merged 06:00-12:00 span
    v = check_shift(make_ride("r", start="06:30", end="10:30"), driver, 0)
    assert v is not None and v.type == ViolationType.SHIFT


def test_duplicate_windows_are_harmless():
    driver = make_driver("d", shifts=[("07:00", "14:00"), ("07:00", "14:00")])
    assert check_shift(make_ride("r", start="08:00", end="09:00"), driver, 0) is None


# ───────────────────────── combined ─────────────────────────


def test_is_feasible_collects_every_reason():
    driver = make_driver("d", license="B", seats=8, shifts=[("10:00", "12:00")])
    ride = make_ride("r", start="08:00", end="09:00", passengers=12)
    result = is_feasible(ride, driver, _at(470), FixedEstimator(minutes=20))

    assert not result.feasible
    kinds = {v.type for v in result.violations}
    assert kinds == {ViolationType.LEGAL, ViolationType.DEADHEAD, ViolationType.SHIFT}
    assert all(v.driver_id == "d" and v.ride_id == "r" for v in result.violations)


def test_is_feasible_happy_path():
    driver = make_driver("d", shifts=[("06:00", "14:00")])
    ride = make_ride("r", start="08:00", end="09:00")
    result = is_feasible(ride, driver, _at(0), FixedEstimator(minutes=30))
    assert result.feasible and result.violations == []


def test_is_feasible_reads_state_each_time():
    driver = make_driver("d")
    ride = make_ride("r", start="08:00", end="09:00")
    est = FixedEstimator(minutes=10)
    state = _at(0)
    assert is_feasible(ride, driver, state, est).feasible
    state.last_end_time_minutes = 475
    assert not is_feasible(ride, driver, state, est).feasible


def test_feasible_drivers_skips_drivers_without_state():
    d1, d2 = make_driver("d1"), make_driver("d2")
    ride = make_ride("r")
    out = feasible_drivers(ride, [d1, d2], {"d1": _at(0)}, FixedEstimator())
    assert [d.id for d in out] == ["d1"]
