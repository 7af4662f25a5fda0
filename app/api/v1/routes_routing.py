# app/api/v1/routes_routing.py
from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.models.routing import RouteQuery
from app.services.estimate import estimate_route
from app.services.routing_service import RoutingService, build_routing_service
from app.services.validation import validate_route_request

router = APIRouter(
    prefix="/calculate-route",
    tags=["routing"],
)


@lru_cache(maxsize=1)
def get_routing_service() -> RoutingService:
    """
    Single shared service, built on first use from the application settings.
    """
    return build_routing_service(settings)


async def parse_route_query(request: Request) -> RouteQuery:
    """
    Read the raw JSON body and validate it.

    Declared before the service dependency so bad input is rejected before
    any provider client exists.
    """
    body = await request.json()
    return validate_route_request(body)


@router.post("", summary="Compute a driving route between origin and destination")
def calculate_route(
    query: RouteQuery = Depends(parse_route_query),
    service: RoutingService = Depends(get_routing_service),
) -> JSONResponse:
    """
    Compute a driving route, or several alternatives, using external providers.

    - Single-route mode tries GraphHopper, then OSRM, then OpenRouteService.
    - Alternatives mode tries GraphHopper and OSRM, then derives synthetic
      alternatives from a single route if neither returned any.
    """
    result = service.compute_route(query)
    return JSONResponse(content=result.to_wire())


@router.post("/estimate", summary="Straight-line distance and duration estimate")
def estimate(query: RouteQuery = Depends(parse_route_query)) -> JSONResponse:
    """
    Haversine distance and a 60 km/h duration estimate, without calling
    any provider.
    """
    return JSONResponse(content=estimate_route(query.origin, query.destination).to_wire())
