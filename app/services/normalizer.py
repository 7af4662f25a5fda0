# app/services/normalizer.py
"""
Mapping of raw provider payloads into canonical RouteResult / RouteAlternative.

All unit conversion lives here:
- distance: metres -> kilometres with one decimal
- duration: milliseconds (GraphHopper) or seconds (OSRM, ORS) -> whole minutes

Rounding is half-up, so 0.5 always goes up regardless of parity.
"""

import math
from typing import List, Optional

from app.models.providers import (
    GraphHopperPath,
    GraphHopperResponse,
    OpenRouteResponse,
    OsrmResponse,
    OsrmRoute,
)
from app.models.routing import (
    IntermediatePoint,
    MultiRouteResult,
    RouteAlternative,
    RouteResult,
)
from app.services.road_names import (
    GRAPHHOPPER_LABEL,
    OSRM_LABEL,
    extract_road_names,
    primary_via,
)

ALTERNATIVE_NAMES = ["Ruta Principal", "Vía Alterna 1", "Vía Alterna 2", "Vía Alterna 3"]
FASTEST_DESCRIPTION = "Ruta más rápida"
ALTERNATIVE_DESCRIPTION = "Ruta alternativa"

# Maximum number of named waypoints attached to an OSRM alternative
MAX_INTERMEDIATE_POINTS = 5


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_km(km: float) -> float:
    return round_half_up(km * 10) / 10


def distance_km(meters: float) -> float:
    return round_km(meters / 1000)


def minutes_from_ms(milliseconds: float) -> int:
    return round_half_up(milliseconds / 1000 / 60)


def minutes_from_seconds(seconds: float) -> int:
    return round_half_up(seconds / 60)


def alternative_name(index: int) -> str:
    if index < len(ALTERNATIVE_NAMES):
        return ALTERNATIVE_NAMES[index]
    return f"Alternativa {index + 1}"


def alternative_description(index: int, provided: Optional[str] = None) -> str:
    if provided:
        return provided
    return FASTEST_DESCRIPTION if index == 0 else ALTERNATIVE_DESCRIPTION


# --------------------------------------------------------------------------- #
# GraphHopper
# --------------------------------------------------------------------------- #

def _graphhopper_description(path: GraphHopperPath) -> Optional[str]:
    if isinstance(path.description, list):
        text = ", ".join(line for line in path.description if line)
        return text or None
    return path.description or None


def graphhopper_route(path: GraphHopperPath, provider: str) -> RouteResult:
    return RouteResult(
        distance_km=distance_km(path.distance),
        duration_min=minutes_from_ms(path.time),
        provider=provider,
    )


def graphhopper_alternatives(payload: GraphHopperResponse, provider: str) -> MultiRouteResult:
    alternatives: List[RouteAlternative] = []

    for index, path in enumerate(payload.paths):
        vias = extract_road_names(path.instructions or [], GRAPHHOPPER_LABEL)
        alternatives.append(
            RouteAlternative(
                id=index + 1,
                name=alternative_name(index),
                distance_km=distance_km(path.distance),
                duration_min=minutes_from_ms(path.time),
                provider=provider,
                description=alternative_description(index, _graphhopper_description(path)),
                primary_via=primary_via(vias),
                vias=vias,
            )
        )

    return MultiRouteResult(alternatives=alternatives, provider=provider)


# --------------------------------------------------------------------------- #
# OSRM
# --------------------------------------------------------------------------- #

def osrm_route(route: OsrmRoute, provider: str) -> RouteResult:
    return RouteResult(
        distance_km=distance_km(route.distance),
        duration_min=minutes_from_seconds(route.duration),
        provider=provider,
    )


def osrm_intermediate_points(
    route: OsrmRoute,
    limit: int = MAX_INTERMEDIATE_POINTS,
) -> Optional[List[IntermediatePoint]]:
    """
    Named maneuver locations along the route, evenly sampled.

    Departure and arrival maneuvers are skipped: they coincide with the
    request's own origin and destination.
    """
    candidates: List[IntermediatePoint] = []

    for leg in route.legs:
        for step in leg.steps:
            maneuver = step.maneuver
            if maneuver is None or maneuver.type in ("depart", "arrive"):
                continue
            if len(maneuver.location) != 2 or not (step.name and step.name.strip()):
                continue
            lon, lat = maneuver.location
            candidates.append(IntermediatePoint(lat=lat, lon=lon, name=step.name.strip()))

    if not candidates:
        return None
    if len(candidates) <= limit:
        return candidates

    last = len(candidates) - 1
    indices = sorted({round_half_up(i * last / (limit - 1)) for i in range(limit)})
    return [candidates[i] for i in indices]


def osrm_alternatives(payload: OsrmResponse, provider: str) -> MultiRouteResult:
    alternatives: List[RouteAlternative] = []

    for index, route in enumerate(payload.routes):
        steps = [step for leg in route.legs for step in leg.steps]
        vias = extract_road_names(steps, OSRM_LABEL)
        summary = route.legs[0].summary if route.legs else None

        alternatives.append(
            RouteAlternative(
                id=index + 1,
                name=alternative_name(index),
                distance_km=distance_km(route.distance),
                duration_min=minutes_from_seconds(route.duration),
                provider=provider,
                description=alternative_description(index),
                primary_via=primary_via(vias, summary),
                vias=vias,
                intermediate_points=osrm_intermediate_points(route),
            )
        )

    return MultiRouteResult(alternatives=alternatives, provider=provider)


# --------------------------------------------------------------------------- #
# OpenRouteService
# --------------------------------------------------------------------------- #

def openroute_route(payload: OpenRouteResponse, provider: str) -> RouteResult:
    summary = payload.routes[0].summary
    return RouteResult(
        distance_km=distance_km(summary.distance),
        duration_min=minutes_from_seconds(summary.duration),
        provider=provider,
    )
