"""Great-circle distance on a spherical Earth.

All inputs are decimal degrees. Callers validate presence and type before
calling; any finite numbers produce a finite, non-negative result.
"""
from __future__ import annotations

import math
from typing import Any

from ..core.constants import EARTH_RADIUS_METERS


def distance_meters(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """Haversine distance in meters between two (latitude, longitude) points."""
    phi_a = math.radians(lat_a)
    phi_b = math.radians(lat_b)
    d_phi = math.radians(lat_b - lat_a)
    d_lambda = math.radians(lon_b - lon_a)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi_a) * math.cos(phi_b) * math.sin(d_lambda / 2) ** 2
    # Rounding can push ``a`` a hair past 1 for antipodal points.
    a = min(max(a, 0.0), 1.0)
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _as_pair(point: Any) -> tuple[float, float]:
    if hasattr(point, "latitude") and hasattr(point, "longitude"):
        return float(point.latitude), float(point.longitude)
    lat, lon = point
    return float(lat), float(lon)


def within_radius(point: Any, reference: Any, radius_meters: float) -> bool:
    """True iff ``point`` lies within ``radius_meters`` of ``reference`` (boundary included)."""
    lat, lon = _as_pair(point)
    ref_lat, ref_lon = _as_pair(reference)
    return distance_meters(lat, lon, ref_lat, ref_lon) <= radius_meters
