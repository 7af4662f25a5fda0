# app/services/synthetic.py

from typing import List, NamedTuple

from app.models.routing import MultiRouteResult, RouteAlternative, RouteResult
from app.services.normalizer import round_half_up, round_km


class SyntheticProfile(NamedTuple):
    name: str
    description: str
    distance_factor: float
    duration_factor: float


# One real route scaled into three plausible options
SYNTHETIC_PROFILES: List[SyntheticProfile] = [
    SyntheticProfile("Ruta Principal", "Ruta más rápida", 1.0, 1.0),
    SyntheticProfile(
        "Vía Alterna (Panorámica)",
        "Ruta escénica, más larga pero con mejores vistas",
        1.15,
        1.20,
    ),
    SyntheticProfile(
        "Vía Alterna (Pueblos)",
        "Ruta que pasa por más localidades",
        1.25,
        1.35,
    ),
]


def generate_synthetic_alternatives(route: RouteResult) -> MultiRouteResult:
    """
    Derive three alternatives from a single real route.

    Used only when alternatives were requested and no provider returned
    real ones. The first entry is the real route unchanged; the others
    scale its distance and duration. Output is tagged `synthetic`.
    """
    alternatives: List[RouteAlternative] = []

    for index, profile in enumerate(SYNTHETIC_PROFILES):
        if index == 0:
            distance, duration = route.distance_km, route.duration_min
        else:
            distance = round_km(route.distance_km * profile.distance_factor)
            duration = round_half_up(route.duration_min * profile.duration_factor)

        alternatives.append(
            RouteAlternative(
                id=index + 1,
                name=profile.name,
                distance_km=distance,
                duration_min=duration,
                provider=route.provider,
                description=profile.description,
            )
        )

    return MultiRouteResult(alternatives=alternatives, provider=route.provider, synthetic=True)
