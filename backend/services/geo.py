"""Great-circle distance utilities for location-based ranking.

Coordinates are supplied by an upstream geocoder; nothing here performs
network calls.
"""

import math
from typing import Callable, Iterable, TypeVar

from models.schemas.candidate_profile import Coordinates

EARTH_RADIUS_KM = 6371.0

T = TypeVar("T")


def distance_km(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance between two points, in km rounded to one decimal."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # min() guards against float drift pushing h past 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(1.0, h)))
    return round(EARTH_RADIUS_KM * c, 1)


def format_distance(km: float) -> str:
    """Human-readable distance: "850m away", "3.4km away", "42km away"."""
    if km < 1:
        return f"{round(km * 1000)}m away"
    if km < 10:
        return f"{km:.1f}km away"
    return f"{round(km)}km away"


def sort_by_distance(
    items: Iterable[T],
    origin: Coordinates,
    get_coordinates: Callable[[T], Coordinates | None],
) -> list[tuple[T, float | None]]:
    """Pair each item with its distance from origin, nearest first.

    Items without coordinates come last, in their original order.
    """
    paired: list[tuple[T, float | None]] = []
    for item in items:
        coords = get_coordinates(item)
        paired.append((item, distance_km(origin, coords) if coords else None))
    paired.sort(key=lambda pair: (pair[1] is None, pair[1] or 0.0))
    return paired
