import logging
from typing import Optional

import httpx

from adapters.offline.haversine_adapter import HaversineAdapter
from config import settings
from core.cache import RouteCache
from core.coords import as_lonlat_str, route_key
from core.exceptions import RoutingUnavailable
from core.interfaces import TravelEstimator
from models.distance_matrix import TravelEstimate
from models.waypoints import Coordinate

logger = logging.getLogger(__name__)


class OSRMRouteAdapter(TravelEstimator):
    """
    Road distance/time from an OSRM /route endpoint.

    Every answer is memoized per (origin, destination) in a batch-scoped cache.
    On any HTTP/parse failure the haversine estimate is returned instead and
    cached too, so a flaky service is not hammered again within the batch.
    """

    name = "osrm"

    def __init__(
        self,
        base_url: Optional[str] = None,
        profile: Optional[str] = None,
        timeout: Optional[float] = None,
        cache: Optional[RouteCache] = None,
        fallback: Optional[TravelEstimator] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = (base_url or settings.OSRM_BASE_URL).rstrip("/")
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.profile = profile or settings.OSRM_PROFILE
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_S
        self.cache = cache if cache is not None else RouteCache()
        self.fallback = fallback or HaversineAdapter()
        # httpx.Client is safe to share between threads; a caller-supplied client stays open
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _fetch(self, origin: Coordinate, destination: Coordinate) -> TravelEstimate:
        coordinate_str = f"{as_lonlat_str(origin)};{as_lonlat_str(destination)}"
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinate_str}"
        try:
            resp = self._client.get(url, params={"overview": "false"})
            resp.raise_for_status()
            data = resp.json()
            if data.get("code") != "Ok" or not data.get("routes"):
                raise RoutingUnavailable(
                    f"OSRM route error: {data.get('message', 'No route found')}"
                )
            return TravelEstimate.from_osrm(data["routes"][0])
        except RoutingUnavailable:
            raise
        except httpx.HTTPStatusError as e:
            raise RoutingUnavailable(
                f"OSRM HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise RoutingUnavailable(f"OSRM request failed: {e}") from e
        except RuntimeError as e:
            # client closed once the batch ended; a timed-out candidate may still be running
            raise RoutingUnavailable(f"OSRM client closed: {e}") from e

    def _fetch_or_fallback(self, origin: Coordinate, destination: Coordinate) -> TravelEstimate:
        try:
            return self._fetch(origin, destination)
        except RoutingUnavailable as e:
            logger.warning(
                f"OSRM unavailable for ({origin.lat}, {origin.lon}) -> "
                f"({destination.lat}, {destination.lon}); using haversine: {e}"
            )
            return self.fallback.estimate(origin, destination)

    def estimate(self, origin: Coordinate, destination: Coordinate) -> TravelEstimate:
        key = route_key(origin, destination)
        return self.cache.get_or_set(key, lambda: self._fetch_or_fallback(origin, destination))
