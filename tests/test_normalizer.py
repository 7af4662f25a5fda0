# tests/test_normalizer.py
from app.models.providers import GraphHopperResponse, OpenRouteResponse, OsrmResponse
from app.services import normalizer
from fakes import graphhopper_path, osrm_route, osrm_step


def test_distance_rounds_to_one_decimal():
    assert normalizer.distance_km(12345) == 12.3
    assert normalizer.distance_km(1000) == 1.0
    assert normalizer.distance_km(0) == 0.0


def test_durations_round_half_up():
    assert normalizer.minutes_from_ms(600_000) == 10
    assert normalizer.minutes_from_seconds(90) == 2
    # Python's round() would give 2 here
    assert normalizer.minutes_from_seconds(150) == 3
    assert normalizer.minutes_from_seconds(29) == 0


def test_alternative_names_and_descriptions():
    names = [normalizer.alternative_name(i) for i in range(6)]

    assert names == [
        "Ruta Principal",
        "Vía Alterna 1",
        "Vía Alterna 2",
        "Vía Alterna 3",
        "Alternativa 5",
        "Alternativa 6",
    ]
    assert normalizer.alternative_description(0) == "Ruta más rápida"
    assert normalizer.alternative_description(2) == "Ruta alternativa"
    assert normalizer.alternative_description(1, "Por la costa") == "Por la costa"


def test_graphhopper_alternatives():
    payload = GraphHopperResponse.model_validate(
        {
            "paths": [
                graphhopper_path(
                    distance=420_560,
                    time=27_000_000,
                    instructions=[
                        {"street_name": "Av. Simón Bolívar"},
                        {"street_name": "Panamericana", "ref": "E35"},
                        {"street_name": ""},
                        {"street_name": "Av. Simón Bolívar"},
                        {"street_name": "Vía Alóag"},
                    ],
                ),
                {"distance": 450_000, "time": 30_000_000, "description": ["Por", "Santo Domingo"]},
            ]
        }
    )

    result = normalizer.graphhopper_alternatives(payload, "GraphHopper")

    first, second = result.alternatives
    assert result.provider == "GraphHopper"
    assert result.synthetic is False
    assert (first.id, first.name, first.distance_km, first.duration_min) == (
        1,
        "Ruta Principal",
        420.6,
        450,
    )
    assert first.description == "Ruta más rápida"
    assert first.vias == ["Av. Simón Bolívar", "E35 - Panamericana", "Vía Alóag"]
    assert first.primary_via == "Av. Simón Bolívar → E35 - Panamericana → Vía Alóag"
    assert second.name == "Vía Alterna 1"
    assert second.description == "Por, Santo Domingo"
    assert second.vias == []
    assert second.primary_via is None


def test_osrm_alternatives_use_steps_across_legs():
    route = osrm_route(
        distance=12_345,
        duration=1_530,
        steps=[
            osrm_step("Av. Amazonas", maneuver="depart"),
            osrm_step("Panamericana", ref="E35", location=[-78.6, -0.5]),
            osrm_step("", ref="E30", location=[-79.0, -1.0]),
            osrm_step("Av. Amazonas", maneuver="arrive"),
        ],
    )
    payload = OsrmResponse.model_validate({"code": "Ok", "routes": [route]})

    alternative = normalizer.osrm_alternatives(payload, "OSRM").alternatives[0]

    assert alternative.distance_km == 12.3
    assert alternative.duration_min == 26
    assert alternative.vias == ["Av. Amazonas", "E35 (Panamericana)", "E30"]
    assert [p.name for p in alternative.intermediate_points] == ["Panamericana"]
    assert alternative.intermediate_points[0].lat == -0.5
    assert alternative.intermediate_points[0].lon == -78.6


def test_osrm_primary_via_falls_back_to_summary():
    payload = OsrmResponse.model_validate(
        {"routes": [osrm_route(steps=[osrm_step("")], summary="E35, E25")]}
    )

    alternative = normalizer.osrm_alternatives(payload, "OSRM").alternatives[0]

    assert alternative.vias == []
    assert alternative.primary_via == "E35, E25"
    assert alternative.intermediate_points is None


def test_osrm_intermediate_points_are_sampled():
    steps = [osrm_step(f"Calle {i}", location=[-78.0 - i, -1.0]) for i in range(11)]
    payload = OsrmResponse.model_validate({"routes": [osrm_route(steps=steps)]})

    points = normalizer.osrm_intermediate_points(payload.routes[0])

    assert [p.name for p in points] == ["Calle 0", "Calle 3", "Calle 5", "Calle 8", "Calle 10"]


def test_openroute_route():
    payload = OpenRouteResponse.model_validate(
        {"routes": [{"summary": {"distance": 419_449.2, "duration": 29_130.4}}]}
    )

    result = normalizer.openroute_route(payload, "OpenRouteService")

    assert result.distance_km == 419.4
    assert result.duration_min == 486
    assert result.provider == "OpenRouteService"
