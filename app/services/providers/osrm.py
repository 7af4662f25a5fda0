# app/services/providers/osrm.py

from app.core.logger import logger
from app.models.providers import OsrmResponse
from app.models.routing import Coordinate, MultiRouteResult, RouteResult
from app.services import normalizer
from app.services.providers.base import AlternativeRouteProvider


class OsrmClient(AlternativeRouteProvider):
    """
    Public OSRM demo server (free, no key).

    OSRM expects coordinates as lon,lat; distances in metres,
    durations in seconds.
    """

    PROFILE = "driving"

    def _route_url(self, origin: Coordinate, destination: Coordinate) -> str:
        coordinates = f"{origin.lon},{origin.lat};{destination.lon},{destination.lat}"
        return f"{self.config.base_url.rstrip('/')}/route/v1/{self.PROFILE}/{coordinates}"

    def fetch_single_route(self, origin: Coordinate, destination: Coordinate) -> RouteResult:
        logger.info("Requesting single route from OSRM")
        response = self._request(
            "GET",
            self._route_url(origin, destination),
            params={"overview": "false"},
        )
        payload = self._parse(response, OsrmResponse)
        if not payload.routes:
            raise self._no_route()

        return normalizer.osrm_route(payload.routes[0], self.name)

    def fetch_alternatives(
        self,
        origin: Coordinate,
        destination: Coordinate,
        max_alternatives: int,
    ) -> MultiRouteResult:
        logger.info("Requesting up to {} alternatives from OSRM", max_alternatives)
        response = self._request(
            "GET",
            self._route_url(origin, destination),
            params={
                "overview": "false",
                "alternatives": str(max_alternatives),
                "steps": "true",
            },
        )
        payload = self._parse(response, OsrmResponse)
        if not payload.routes:
            raise self._no_routes()

        return normalizer.osrm_alternatives(payload, self.name)
