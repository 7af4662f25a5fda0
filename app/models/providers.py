# app/models/providers.py
"""
Raw response payloads of the external routing providers.

Each provider gets its own model tree; app.services.normalizer holds the
explicit mapping from each of them into RouteResult / RouteAlternative.
Unknown fields are ignored so provider-side additions do not break parsing.
"""

from typing import List, Optional, Union

from pydantic import BaseModel


# --------------------------------------------------------------------------- #
# GraphHopper: paths[], distance in metres, time in milliseconds
# --------------------------------------------------------------------------- #

class GraphHopperInstruction(BaseModel):
    street_name: Optional[str] = None
    name: Optional[str] = None
    road: Optional[str] = None
    ref: Optional[str] = None


class GraphHopperPath(BaseModel):
    distance: float
    time: float
    # Documented as a string, some API versions send a list of lines
    description: Union[str, List[str], None] = None
    instructions: Optional[List[GraphHopperInstruction]] = None


class GraphHopperResponse(BaseModel):
    paths: List[GraphHopperPath] = []


# --------------------------------------------------------------------------- #
# OSRM: routes[].legs[].steps[], distance in metres, duration in seconds
# --------------------------------------------------------------------------- #

class OsrmManeuver(BaseModel):
    type: Optional[str] = None
    # [lon, lat]
    location: List[float] = []


class OsrmStep(BaseModel):
    name: Optional[str] = None
    ref: Optional[str] = None
    maneuver: Optional[OsrmManeuver] = None


class OsrmLeg(BaseModel):
    summary: Optional[str] = None
    steps: List[OsrmStep] = []


class OsrmRoute(BaseModel):
    distance: float
    duration: float
    legs: List[OsrmLeg] = []


class OsrmResponse(BaseModel):
    code: Optional[str] = None
    routes: List[OsrmRoute] = []


# --------------------------------------------------------------------------- #
# OpenRouteService: routes[].summary, distance in metres, duration in seconds
# --------------------------------------------------------------------------- #

class OpenRouteSummary(BaseModel):
    # ORS omits both fields when origin and destination coincide
    distance: float = 0.0
    duration: float = 0.0


class OpenRouteRoute(BaseModel):
    summary: OpenRouteSummary


class OpenRouteResponse(BaseModel):
    routes: List[OpenRouteRoute] = []


ProviderPayload = Union[GraphHopperResponse, OsrmResponse, OpenRouteResponse]
