from __future__ import annotations

from typing import Iterable

from src.domain.models import Trip, Vehicle


def trip_label(trip_id: str, vehicle_label: str | None) -> str:
    return f"Trip {trip_id} ({vehicle_label or trip_id})"


def derive_trips(vehicles: Iterable[Vehicle]) -> tuple[Trip, ...]:
    """Collect the trips vehicles are currently running, deduplicated by id.

    The first vehicle seen for a trip decides its label.
    """

    seen: set[str] = set()
    out: list[Trip] = []
    for v in vehicles:
        if not v.trip_id or v.trip_id in seen:
            continue
        seen.add(v.trip_id)
        out.append(
            Trip(id=v.trip_id, label=trip_label(v.trip_id, v.label), route_id=v.route_id)
        )
    return tuple(out)


def merge_trips(*batches: Iterable[Trip]) -> tuple[Trip, ...]:
    seen: set[str] = set()
    out: list[Trip] = []
    for batch in batches:
        for trip in batch:
            if trip.id in seen:
                continue
            seen.add(trip.id)
            out.append(trip)
    return tuple(out)


def filter_trips(trips: Iterable[Trip], query: str | None) -> tuple[Trip, ...]:
    """Case-insensitive substring match on trip id or label."""

    needle = (query or "").strip().lower()
    if not needle:
        return tuple(trips)
    return tuple(
        t for t in trips if needle in t.id.lower() or needle in t.label.lower()
    )
