# backend/core/coords.py
from __future__ import annotations
from typing import Any, Tuple

# 6 decimals ~ 0.1 m; enough to collapse float noise between identical stops
KEY_PRECISION = 1_000_000


def _lat_lon(coord: Any) -> Tuple[float, float]:
    """
    Return (lat, lon) from a coordinate-like object.
    Supports objects with .lat/.lon or dicts with those keys.
    """
    if hasattr(coord, "lat") and hasattr(coord, "lon"):
        return float(coord.lat), float(coord.lon)
    c = coord  # type: ignore
    return float(c["lat"]), float(c["lon"])


def point_key(coord: Any) -> str:
    lat, lon = _lat_lon(coord)
    return f"{round(lat * KEY_PRECISION)},{round(lon * KEY_PRECISION)}"


def route_key(origin: Any, destination: Any) -> str:
    """Cache key for a directed origin->destination pair."""
    return f"{point_key(origin)};{point_key(destination)}"


def as_lonlat_str(coord: Any) -> str:
    """OSRM wants 'lon,lat'."""
    lat, lon = _lat_lon(coord)
    return f"{lon},{lat}"
