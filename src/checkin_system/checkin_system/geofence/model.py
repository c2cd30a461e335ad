from __future__ import annotations

from dataclasses import dataclass

from .distance import distance_meters, within_radius


@dataclass(frozen=True)
class ReferencePoint:
    """The fixed site coordinate and acceptance radius for check-ins."""

    latitude: float
    longitude: float
    radius_meters: float

    def distance_to(self, latitude: float, longitude: float) -> float:
        return distance_meters(latitude, longitude, self.latitude, self.longitude)

    def contains(self, latitude: float, longitude: float) -> bool:
        return within_radius((latitude, longitude), self, self.radius_meters)
