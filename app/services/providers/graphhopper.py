# app/services/providers/graphhopper.py

from typing import List, Optional, Tuple

import httpx

from app.core.config import ProviderConfig
from app.core.exceptions import ConfigurationError
from app.core.logger import logger
from app.models.providers import GraphHopperResponse
from app.models.routing import Coordinate, MultiRouteResult, RouteResult
from app.services import normalizer
from app.services.providers.base import AlternativeRouteProvider


class GraphHopperClient(AlternativeRouteProvider):
    """
    GraphHopper Routing API (keyed, highest priority).

    Distances come in metres, times in milliseconds.
    """

    MAX_WEIGHT_FACTOR = 1.8

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.Client] = None) -> None:
        if not config.api_key:
            raise ConfigurationError(
                "GRAPHHOPPER_API_KEY is not set; GraphHopper cannot be used without a key."
            )
        super().__init__(config, http_client)
        self.url = f"{config.base_url.rstrip('/')}/route"

    def _base_params(self, origin: Coordinate, destination: Coordinate) -> List[Tuple[str, str]]:
        return [
            ("point", f"{origin.lat},{origin.lon}"),
            ("point", f"{destination.lat},{destination.lon}"),
            ("vehicle", "car"),
            ("locale", "es"),
            ("key", self.config.api_key),
        ]

    def fetch_single_route(self, origin: Coordinate, destination: Coordinate) -> RouteResult:
        logger.info("Requesting single route from GraphHopper")
        params = self._base_params(origin, destination) + [("calc_points", "false")]

        response = self._request("GET", self.url, params=params)
        payload = self._parse(response, GraphHopperResponse)
        if not payload.paths:
            raise self._no_route()

        return normalizer.graphhopper_route(payload.paths[0], self.name)

    def fetch_alternatives(
        self,
        origin: Coordinate,
        destination: Coordinate,
        max_alternatives: int,
    ) -> MultiRouteResult:
        logger.info("Requesting up to {} alternatives from GraphHopper", max_alternatives)
        params = self._base_params(origin, destination) + [
            ("instructions", "true"),
            ("algorithm", "alternative_route"),
            ("alternative_route.max_paths", str(max_alternatives)),
            ("alternative_route.max_weight_factor", str(self.MAX_WEIGHT_FACTOR)),
        ]

        response = self._request("GET", self.url, params=params)
        payload = self._parse(response, GraphHopperResponse)
        if not payload.paths:
            raise self._no_routes()

        return normalizer.graphhopper_alternatives(payload, self.name)
