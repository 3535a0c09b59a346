from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @staticmethod
    def maybe(lat: float | None, lon: float | None) -> "GeoPoint | None":
        """Build a point from upstream coordinates, or None if unusable."""

        if lat is None or lon is None:
            return None
        try:
            return GeoPoint(lat=float(lat), lon=float(lon))
        except (TypeError, ValueError):
            return None
