# app/services/routing_service.py

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, Union

import httpx

from app.core.config import Settings
from app.core.exceptions import AllProvidersFailedError, ConfigurationError, ProviderError
from app.core.logger import logger
from app.models.routing import (
    AlternativesResponse,
    Coordinate,
    MultiRouteResult,
    RouteQuery,
    RouteResult,
)
from app.services.providers.base import AlternativeRouteProvider, RouteProvider
from app.services.providers.graphhopper import GraphHopperClient
from app.services.providers.openroute import OpenRouteClient
from app.services.providers.osrm import OsrmClient
from app.services.synthetic import generate_synthetic_alternatives

T = TypeVar("T")


@dataclass
class Attempt(Generic[T]):
    """
    Outcome of calling one provider: exactly one of result / error is set.
    """
    provider: str
    result: Optional[T] = None
    error: Optional[ProviderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RoutingService:
    """
    High-level routing service:
    - tries providers one at a time, in fixed priority order
    - stops at the first provider that answers with a route
    - records every provider failure for the final error response
    - falls back to synthetic alternatives when no provider has real ones
    """

    def __init__(
        self,
        single_route_chain: Sequence[RouteProvider],
        alternatives_chain: Sequence[AlternativeRouteProvider],
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.single_route_chain = list(single_route_chain)
        self.alternatives_chain = list(alternatives_chain)
        # Shared outbound client owned by this service, closed in close()
        self.http_client = http_client
        logger.info(
            "RoutingService initialised: single-route chain [{}], alternatives chain [{}]",
            ", ".join(p.name for p in self.single_route_chain),
            ", ".join(p.name for p in self.alternatives_chain),
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def compute_route(self, query: RouteQuery) -> Union[RouteResult, AlternativesResponse]:
        """
        Main entry point for the /calculate-route endpoint.

        1. In alternatives mode, try the alternatives-capable providers.
        2. Otherwise (or if they all failed) run the single-route chain.
        3. If alternatives were wanted, expand the single route synthetically.
        4. If nothing worked, raise AllProvidersFailedError with every error seen.
        """
        t0 = perf_counter()
        origin, destination = query.origin, query.destination
        errors: List[ProviderError] = []

        logger.info(
            "Calculating route ({:.6f}, {:.6f}) -> ({:.6f}, {:.6f}), alternatives={}, max={}",
            origin.lat,
            origin.lon,
            destination.lat,
            destination.lon,
            query.alternatives,
            query.max_alternatives,
        )

        if query.alternatives:
            multi = self.resolve_alternatives(origin, destination, query.max_alternatives, errors)
            if multi is not None:
                logger.info("Total routing time: {:.2f} ms", (perf_counter() - t0) * 1000.0)
                return AlternativesResponse(
                    alternatives=multi.alternatives,
                    provider=multi.provider,
                    requested=query.max_alternatives,
                    found=len(multi.alternatives),
                )
            logger.warning("No provider returned alternatives; generating synthetic ones")

        route = self.resolve_single_route(origin, destination, errors)
        if route is None:
            logger.error("All routing providers failed: {}", [e.detail() for e in errors])
            raise AllProvidersFailedError(errors)

        logger.info("Total routing time: {:.2f} ms", (perf_counter() - t0) * 1000.0)

        if query.alternatives:
            synthetic = generate_synthetic_alternatives(route)
            return AlternativesResponse(
                alternatives=synthetic.alternatives,
                provider=synthetic.provider,
                synthetic=True,
            )

        return route

    def resolve_single_route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        errors: List[ProviderError],
    ) -> Optional[RouteResult]:
        """
        Run the single-route chain; failures are appended to `errors`.
        """
        for provider in self.single_route_chain:
            attempt = self._attempt(
                provider.name,
                lambda: provider.fetch_single_route(origin, destination),
            )
            if attempt.ok:
                logger.info(
                    "Route calculated with {}: {} km, {} min",
                    provider.name,
                    attempt.result.distance_km,
                    attempt.result.duration_min,
                )
                return attempt.result
            errors.append(attempt.error)
        return None

    def resolve_alternatives(
        self,
        origin: Coordinate,
        destination: Coordinate,
        max_alternatives: int,
        errors: List[ProviderError],
    ) -> Optional[MultiRouteResult]:
        """
        Run the alternatives chain; failures are appended to `errors`.
        """
        for provider in self.alternatives_chain:
            attempt = self._attempt(
                provider.name,
                lambda: provider.fetch_alternatives(origin, destination, max_alternatives),
            )
            if attempt.ok:
                logger.info(
                    "{} alternatives obtained with {}",
                    len(attempt.result.alternatives),
                    provider.name,
                )
                return attempt.result
            errors.append(attempt.error)
        return None

    def close(self) -> None:
        for provider in {id(p): p for p in self.single_route_chain + self.alternatives_chain}.values():
            provider.close()
        if self.http_client is not None:
            self.http_client.close()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _attempt(provider: str, call: Callable[[], T]) -> Attempt[T]:
        t0 = perf_counter()
        try:
            result = call()
        except ProviderError as exc:
            logger.warning(
                "{} failed after {:.2f} ms: {}",
                provider,
                (perf_counter() - t0) * 1000.0,
                exc.message,
            )
            return Attempt(provider=provider, error=exc)
        logger.debug("{} answered in {:.2f} ms", provider, (perf_counter() - t0) * 1000.0)
        return Attempt(provider=provider, result=result)


def build_routing_service(
    settings: Settings,
    http_client: Optional[httpx.Client] = None,
) -> RoutingService:
    """
    Wire the providers in priority order: GraphHopper, OSRM, OpenRouteService.

    OpenRouteService has no alternatives endpoint and only takes part in the
    single-route chain. A keyed provider without its API key is left out of
    both chains; OSRM needs no key and is always wired.
    """
    owned = http_client is None
    client = http_client or httpx.Client(timeout=settings.PROVIDER_TIMEOUT_S)

    single_route_chain: List[RouteProvider] = []
    alternatives_chain: List[AlternativeRouteProvider] = []

    for name, client_class in (
        ("GraphHopper", GraphHopperClient),
        ("OSRM", OsrmClient),
        ("OpenRouteService", OpenRouteClient),
    ):
        try:
            provider = client_class(settings.provider_config(name), client)
        except ConfigurationError as exc:
            logger.error("{} disabled: {}", name, exc)
            continue
        single_route_chain.append(provider)
        if isinstance(provider, AlternativeRouteProvider):
            alternatives_chain.append(provider)

    return RoutingService(
        single_route_chain=single_route_chain,
        alternatives_chain=alternatives_chain,
        http_client=client if owned else None,
    )
