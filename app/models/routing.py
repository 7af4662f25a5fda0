# app/models/routing.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """
    Simple latitude/longitude coordinate.
    """
    lat: float
    lon: float


class RouteQuery(BaseModel):
    """
    Validated form of the /calculate-route request body.

    Built by app.services.validation from the raw JSON, never parsed
    directly by FastAPI: the error messages for bad coordinates are part
    of the API contract.
    """
    origin: Coordinate
    destination: Coordinate
    alternatives: bool = False
    max_alternatives: int = 3


class WireModel(BaseModel):
    """
    Base for models serialised to clients: Python names are English,
    JSON names are the Spanish aliases the frontend consumes.
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class RouteResult(WireModel):
    """
    One route from a provider, in canonical units.
    """
    distance_km: float = Field(alias="distanciaKm")
    duration_min: int = Field(alias="duracionMinutos")
    provider: str


class IntermediatePoint(WireModel):
    lat: float
    lon: float
    name: Optional[str] = Field(default=None, alias="nombre")


class RouteAlternative(WireModel):
    """
    One of several routes between the same origin and destination.

    `vias` holds at most 8 road names in travel order; `primary_via` is a
    short label built from the first three of them.
    """
    id: int
    name: str = Field(alias="nombre")
    distance_km: float = Field(alias="distanciaKm")
    duration_min: int = Field(alias="duracionMinutos")
    provider: str
    description: Optional[str] = Field(default=None, alias="descripcion")
    primary_via: Optional[str] = Field(default=None, alias="viaPrincipal")
    vias: List[str] = Field(default_factory=list)
    intermediate_points: Optional[List[IntermediatePoint]] = Field(
        default=None, alias="puntosIntermedios"
    )


class MultiRouteResult(WireModel):
    alternatives: List[RouteAlternative] = Field(alias="alternativas")
    provider: str
    synthetic: bool = False


class AlternativesResponse(WireModel):
    """
    Response for alternatives mode.

    Provider-sourced results carry `solicitadas`/`encontradas`;
    synthetic results carry `synthetic: true` instead.
    """
    alternatives: List[RouteAlternative] = Field(alias="alternativas")
    provider: str
    requested: Optional[int] = Field(default=None, alias="solicitadas")
    found: Optional[int] = Field(default=None, alias="encontradas")
    synthetic: Optional[bool] = None


class ErrorResponse(WireModel):
    error: str
    message: Optional[str] = None
    details: Optional[List[str]] = None
