# tests/test_config.py
import pytest

from app.core.config import Settings
from app.services.estimate import estimate_route
from app.services.routing_service import build_routing_service
from app.models.routing import Coordinate


def test_provider_config_carries_keys_and_timeout():
    settings = Settings(
        GRAPHHOPPER_API_KEY="gh",
        OPENROUTE_API_KEY="ors",
        PROVIDER_TIMEOUT_S=5.0,
    )

    graphhopper = settings.provider_config("GraphHopper")
    osrm = settings.provider_config("OSRM")

    assert graphhopper.api_key == "gh"
    assert graphhopper.timeout_s == 5.0
    assert osrm.api_key is None
    assert osrm.base_url == "https://router.project-osrm.org"

    with pytest.raises(ValueError):
        settings.provider_config("Mapbox")


def test_provider_without_key_is_left_out_of_chains(http_client):
    settings = Settings(GRAPHHOPPER_API_KEY=None, OPENROUTE_API_KEY="ors")

    service = build_routing_service(settings, http_client)

    assert [p.name for p in service.single_route_chain] == ["OSRM", "OpenRouteService"]
    assert [p.name for p in service.alternatives_chain] == ["OSRM"]


def test_no_keys_still_routes_through_osrm(http_client):
    settings = Settings(GRAPHHOPPER_API_KEY=None, OPENROUTE_API_KEY=None)

    service = build_routing_service(settings, http_client)

    assert [p.name for p in service.single_route_chain] == ["OSRM"]
    assert [p.name for p in service.alternatives_chain] == ["OSRM"]


def test_chains_are_wired_in_priority_order(routing_service):
    assert [p.name for p in routing_service.single_route_chain] == [
        "GraphHopper",
        "OSRM",
        "OpenRouteService",
    ]
    assert [p.name for p in routing_service.alternatives_chain] == ["GraphHopper", "OSRM"]


def test_haversine_estimate():
    result = estimate_route(Coordinate(lat=1.0, lon=1.0), Coordinate(lat=1.0, lon=2.0))

    assert result.distance_km == 111.2
    assert result.duration_min == 111
    assert result.provider == "Haversine"
