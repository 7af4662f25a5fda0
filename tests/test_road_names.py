# tests/test_road_names.py
from app.models.providers import GraphHopperInstruction, OsrmStep
from app.services.road_names import (
    MAX_VIAS,
    OSRM_LABEL,
    extract_road_names,
    primary_via,
)


def gh(street_name=None, ref=None, **kwargs):
    return GraphHopperInstruction(street_name=street_name, ref=ref, **kwargs)


def test_generic_and_empty_names_are_dropped():
    instructions = [gh("Av. Amazonas"), gh(""), gh("Unnamed Road"), gh("E35")]

    assert extract_road_names(instructions) == ["Av. Amazonas", "E35"]


def test_ref_is_combined_with_name():
    assert extract_road_names([gh("Panamericana", ref="E35")]) == ["E35 - Panamericana"]

    steps = [OsrmStep(name="Panamericana", ref="E35")]
    assert extract_road_names(steps, OSRM_LABEL) == ["E35 (Panamericana)"]


def test_ref_already_in_name_is_not_repeated():
    assert extract_road_names([gh("E35 Panamericana", ref="E35")]) == ["E35 Panamericana"]


def test_ref_alone_and_dash_names():
    instructions = [gh(ref="E20"), gh("-", ref="E35"), gh("-")]

    assert extract_road_names(instructions) == ["E20", "E35"]


def test_name_falls_back_to_road_field():
    assert extract_road_names([gh(road="Vía a la Costa")]) == ["Vía a la Costa"]


def test_sin_nombre_is_case_insensitive():
    instructions = [gh("Calle SIN NOMBRE"), gh("unnamed"), gh("Av. 6 de Diciembre")]

    assert extract_road_names(instructions) == ["Av. 6 de Diciembre"]


def test_duplicates_keep_first_seen_order():
    instructions = [gh("B"), gh("A"), gh("B"), gh("C"), gh("A")]

    assert extract_road_names(instructions) == ["B", "A", "C"]


def test_at_most_eight_vias():
    instructions = [gh(f"Calle {i}") for i in range(20)]

    vias = extract_road_names(instructions)

    assert len(vias) == MAX_VIAS
    assert vias == [f"Calle {i}" for i in range(MAX_VIAS)]


def test_primary_via():
    assert primary_via(["A", "B", "C", "D"]) == "A → B → C"
    assert primary_via(["A"]) == "A"
    assert primary_via([], "Panamericana, E25") == "Panamericana, E25"
    assert primary_via([], "") is None
    assert primary_via([]) is None
