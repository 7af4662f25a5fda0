# app/services/providers/openroute.py

from typing import Optional

import httpx

from app.core.config import ProviderConfig
from app.core.exceptions import ConfigurationError
from app.core.logger import logger
from app.models.providers import OpenRouteResponse
from app.models.routing import Coordinate, RouteResult
from app.services import normalizer
from app.services.providers.base import RouteProvider


class OpenRouteClient(RouteProvider):
    """
    OpenRouteService directions API (keyed, last resort, single route only).
    """

    PROFILE = "driving-car"

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.Client] = None) -> None:
        if not config.api_key:
            raise ConfigurationError(
                "OPENROUTE_API_KEY is not set; OpenRouteService cannot be used without a key."
            )
        super().__init__(config, http_client)
        self.url = f"{config.base_url.rstrip('/')}/v2/directions/{self.PROFILE}"

    def fetch_single_route(self, origin: Coordinate, destination: Coordinate) -> RouteResult:
        logger.info("Requesting single route from OpenRouteService")
        response = self._request(
            "POST",
            self.url,
            headers={"Authorization": self.config.api_key},
            json={
                "coordinates": [
                    [origin.lon, origin.lat],
                    [destination.lon, destination.lat],
                ],
            },
        )
        payload = self._parse(response, OpenRouteResponse)
        if not payload.routes:
            raise self._no_route()

        return normalizer.openroute_route(payload, self.name)
