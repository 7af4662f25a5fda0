# app/services/validation.py

import math
from typing import Any, Optional

from app.core.exceptions import CoordinateValidationError
from app.models.routing import Coordinate, RouteQuery

MISSING_ENDPOINTS = "Origen y destino son requeridos"
INVALID_COORDINATES = "Coordenadas inválidas"

MIN_ALTERNATIVES = 1
MAX_ALTERNATIVES = 5
DEFAULT_ALTERNATIVES = 3


def _usable_number(value: Any) -> bool:
    """
    True for a real, non-zero, finite number. Booleans are rejected even
    though they subclass int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value != 0 and math.isfinite(value)


def _is_absent(value: Any) -> bool:
    # Empty objects and arrays count as present; their shape is checked afterwards
    if isinstance(value, (dict, list)):
        return False
    return not value


def _coordinate(raw: Any) -> Coordinate:
    if not isinstance(raw, dict):
        raise CoordinateValidationError(INVALID_COORDINATES)

    lat, lon = raw.get("lat"), raw.get("lon")
    if not (_usable_number(lat) and _usable_number(lon)):
        raise CoordinateValidationError(INVALID_COORDINATES)
    return Coordinate(lat=lat, lon=lon)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def clamp_max_alternatives(value: Any) -> int:
    """
    Clamp the requested number of alternatives to [1, 5].

    Absent or non-numeric values fall back to 3; fractional values are
    truncated after clamping.
    """
    number = _as_number(value)
    if number is None:
        return DEFAULT_ALTERNATIVES
    return int(min(max(number, MIN_ALTERNATIVES), MAX_ALTERNATIVES))


def validate_route_request(body: Any) -> RouteQuery:
    """
    Turn the raw JSON body into a RouteQuery or raise CoordinateValidationError.

    Runs before any provider is contacted.
    """
    if not isinstance(body, dict):
        raise CoordinateValidationError(MISSING_ENDPOINTS)

    raw_origin = body.get("origen")
    raw_destination = body.get("destino")
    if _is_absent(raw_origin) or _is_absent(raw_destination):
        raise CoordinateValidationError(MISSING_ENDPOINTS)

    return RouteQuery(
        origin=_coordinate(raw_origin),
        destination=_coordinate(raw_destination),
        alternatives=bool(body.get("alternatives", False)),
        max_alternatives=clamp_max_alternatives(body.get("maxAlternatives")),
    )
