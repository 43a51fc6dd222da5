import math
from typing import Optional
from config import settings
from core.interfaces import TravelEstimator
from models.distance_matrix import TravelEstimate
from models.waypoints import Coordinate


def _haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    R = 6371.0  # km
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    )
    return 2 * R * math.atan2(math.sqrt(a), math.sqrt(1 - a))  # km


def haversine_km(origin: Coordinate, destination: Coordinate) -> float:
    return _haversine_km(origin.lat, origin.lon, destination.lat, destination.lon)


class HaversineAdapter(TravelEstimator):
    """
    Offline estimator. Great-circle km; minutes = km / average speed, rounded.
    """

    name = "haversine"

    def __init__(self, speed_kmh: Optional[float] = None):
        self.speed_kmh = float(settings.AVERAGE_SPEED_KMH if speed_kmh is None else speed_kmh)
        if self.speed_kmh <= 0:
            raise ValueError("Haversine: speed_kmh must be positive.")

    def estimate(self, origin: Coordinate, destination: Coordinate) -> TravelEstimate:
        km = haversine_km(origin, destination)
        minutes = int(math.floor(km * 60.0 / self.speed_kmh + 0.5))
        return TravelEstimate(km=km, minutes=minutes)
