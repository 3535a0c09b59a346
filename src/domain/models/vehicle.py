from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .geo import GeoPoint


class VehicleStatus(str, Enum):
    IN_TRANSIT_TO = "IN_TRANSIT_TO"
    STOPPED_AT = "STOPPED_AT"
    INCOMING_AT = "INCOMING_AT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: str | None) -> "VehicleStatus":
        value = (raw or "").strip().upper()
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    label: str | None
    current_status: VehicleStatus
    latitude: float | None
    longitude: float | None
    updated_at: datetime | None = None
    speed: float | None = None
    bearing: float | None = None
    route_id: str | None = None
    trip_id: str | None = None
    # Upstream status string as received (may be outside the known enum).
    raw_status: str | None = None

    @property
    def position(self) -> GeoPoint | None:
        return GeoPoint.maybe(self.latitude, self.longitude)
