# app/services/providers/base.py

from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import ProviderConfig
from app.core.exceptions import ProviderError
from app.models.routing import Coordinate, MultiRouteResult, RouteResult

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class RouteProvider(ABC):
    """
    Client for one external routing service.

    Every public call issues exactly one HTTP request and either returns a
    normalised result or raises ProviderError. There are no retries: the
    fallback chain decides what to do next.
    """

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self.name = config.name
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(timeout=config.timeout_s)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @abstractmethod
    def fetch_single_route(self, origin: Coordinate, destination: Coordinate) -> RouteResult:
        """Fetch the best route between two points."""

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request; transport failures and non-2xx answers become
        ProviderError.
        """
        headers = {"Accept": "application/json", **kwargs.pop("headers", {})}
        try:
            response = self.http.request(
                method,
                url,
                headers=headers,
                timeout=self.config.timeout_s,
                **kwargs,
            )
        except httpx.TimeoutException:
            raise ProviderError(
                self.name, f"{self.name} timeout after {self.config.timeout_s:g}s"
            )
        except httpx.HTTPError as exc:
            raise ProviderError(self.name, f"{self.name} connection error: {exc}")

        if not response.is_success:
            raise ProviderError(
                self.name, f"{self.name} error: {response.status_code} - {response.text}"
            )
        return response

    def _parse(self, response: httpx.Response, model: Type[PayloadT]) -> PayloadT:
        try:
            data = response.json()
        except ValueError:
            raise ProviderError(self.name, f"{self.name} returned a non-JSON response")

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise ProviderError(
                self.name,
                f"{self.name} returned an unexpected payload ({exc.error_count()} errors)",
            )

    def _no_route(self) -> ProviderError:
        return ProviderError(self.name, f"No se encontró una ruta en {self.name}")

    def _no_routes(self) -> ProviderError:
        return ProviderError(self.name, f"No se encontraron rutas en {self.name}")


class AlternativeRouteProvider(RouteProvider):
    """
    A provider that can also return several alternative routes in one call.
    """

    @abstractmethod
    def fetch_alternatives(
        self,
        origin: Coordinate,
        destination: Coordinate,
        max_alternatives: int,
    ) -> MultiRouteResult:
        """Fetch up to `max_alternatives` routes between two points."""
