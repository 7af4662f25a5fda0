# app/services/road_names.py

from typing import Iterable, List, Optional, Protocol

# Maximum number of road names kept per route
MAX_VIAS = 8

# Number of vias joined into the primary-via label
PRIMARY_VIA_COUNT = 3
PRIMARY_VIA_SEPARATOR = " → "

# Label conventions for "ref + name" per provider
GRAPHHOPPER_LABEL = "{ref} - {name}"
OSRM_LABEL = "{ref} ({name})"

_GENERIC_NAMES = ("unnamed", "sin nombre")


class RoadInstruction(Protocol):
    """
    Anything carrying a road name and/or a route reference.

    GraphHopper instructions use street_name, OSRM steps use name; both
    may carry a separate ref (e.g. "E35").
    """
    ref: Optional[str]


def _first_name(instruction: RoadInstruction) -> str:
    for field in ("street_name", "name", "road"):
        value = getattr(instruction, field, None)
        if value and value.strip() and value.strip() != "-":
            return value.strip()
    return ""


def _label_for(instruction: RoadInstruction, label_format: str) -> str:
    road_name = _first_name(instruction)
    road_ref = (instruction.ref or "").strip()

    if road_name and road_ref and road_ref not in road_name:
        return label_format.format(ref=road_ref, name=road_name)
    return road_name or road_ref


def _is_usable(label: str) -> bool:
    if not label or label == "-":
        return False
    lower = label.lower()
    return not any(generic in lower for generic in _GENERIC_NAMES)


def extract_road_names(
    instructions: Iterable[RoadInstruction],
    label_format: str = GRAPHHOPPER_LABEL,
) -> List[str]:
    """
    Turn turn-by-turn instructions into the ordered list of roads travelled.

    - label is the road name, the ref, or both combined with `label_format`
      when the name does not already contain the ref
    - empty labels, "-" and generic "unnamed"/"sin nombre" roads are dropped
    - duplicates are removed keeping the first occurrence
    - at most MAX_VIAS names are returned
    """
    vias: List[str] = []
    seen = set()

    for instruction in instructions:
        label = _label_for(instruction, label_format)
        if not _is_usable(label) or label in seen:
            continue
        seen.add(label)
        vias.append(label)
        if len(vias) == MAX_VIAS:
            break

    return vias


def primary_via(vias: List[str], summary: Optional[str] = None) -> Optional[str]:
    """
    Short label for a route: first three vias, else the provider summary.
    """
    if vias:
        return PRIMARY_VIA_SEPARATOR.join(vias[:PRIMARY_VIA_COUNT])
    if summary and summary.strip():
        return summary.strip()
    return None
