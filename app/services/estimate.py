# app/services/estimate.py

import math

from app.models.routing import Coordinate, RouteResult
from app.services.normalizer import round_half_up, round_km

EARTH_RADIUS_KM = 6_371.0

# Average road speed assumed for the estimate
AVERAGE_SPEED_KMH = 60.0

PROVIDER_NAME = "Haversine"


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """
    Compute great-circle distance between two points (lat/lon in degrees), in kilometres.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def estimate_route(origin: Coordinate, destination: Coordinate) -> RouteResult:
    """
    Straight-line estimate used when no routing provider is reachable.

    Distance is the great-circle distance (one decimal); duration assumes
    AVERAGE_SPEED_KMH. Always shorter than the real road distance.
    """
    distance = round_km(haversine_km(origin, destination))
    duration = round_half_up(distance / AVERAGE_SPEED_KMH * 60)
    return RouteResult(distance_km=distance, duration_min=duration, provider=PROVIDER_NAME)
