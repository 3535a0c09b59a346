from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Trip:
    """One scheduled run of a vehicle along a route."""

    id: str
    label: str
    route_id: str | None = None
