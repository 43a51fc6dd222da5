# core/logic/cost_functions.py
from __future__ import annotations
import math
from typing import Union

from core.exceptions import InvalidArgument
from models.fleet import Driver

Number = Union[int, float]

AGOROT_PER_SHEKEL = 100
# 30 ₪/hour
TIME_RATE_AG_PER_MINUTE = 50


def _check_non_negative(value: Number, what: str) -> None:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{what} must be a number, got {value!r}")
    if math.isnan(value) or value < 0:
        raise InvalidArgument(f"{what} must be non-negative, got {value!r}")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_agorot(shekels: Number) -> int:
    _check_non_negative(shekels, "shekels")
    return _round_half_up(shekels * AGOROT_PER_SHEKEL)


def from_agorot(agorot: int) -> float:
    return agorot / AGOROT_PER_SHEKEL


def time_cost_minutes(minutes: Number) -> int:
    _check_non_negative(minutes, "minutes")
    return _round_half_up(minutes * TIME_RATE_AG_PER_MINUTE)


def fuel_cost(driver: Driver, km: Number) -> int:
    _check_non_negative(km, "km")
    return to_agorot(driver.fuel_cost * km)


def sum_ag(*amounts: int) -> int:
    for a in amounts:
        _check_non_negative(a, "amount")
    return sum(int(a) for a in amounts)
