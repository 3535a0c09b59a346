"""Browser filter state and the pure reducer that drives it.

Every user interaction is expressed as an action; `reduce()` maps
`(state, action)` to a new state without side effects. The service layer
decides what to fetch by comparing the old and new state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Union

DEFAULT_PAGE_LIMIT = 10


def _unique(ids: Iterable[str]) -> tuple[str, ...]:
    out: list[str] = []
    for raw in ids:
        value = (raw or "").strip()
        if value and value not in out:
            out.append(value)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class BrowserState:
    selected_routes: tuple[str, ...] = ()
    selected_trips: tuple[str, ...] = ()
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    selected_vehicle_id: str | None = None
    # What the last accepted fetch told us about the page set.
    total_pages: int | None = None
    has_more: bool | None = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"Invalid page: {self.page}")
        if self.limit < 1:
            raise ValueError(f"Invalid page limit: {self.limit}")

    @property
    def fetch_key(self) -> tuple[tuple[str, ...], tuple[str, ...], int, int]:
        return (self.selected_routes, self.selected_trips, self.page, self.limit)


@dataclass(frozen=True, slots=True)
class SelectRoutes:
    route_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SelectTrips:
    trip_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GoToPage:
    page: int


@dataclass(frozen=True, slots=True)
class NextPage:
    pass


@dataclass(frozen=True, slots=True)
class PreviousPage:
    pass


@dataclass(frozen=True, slots=True)
class SetLimit:
    limit: int


@dataclass(frozen=True, slots=True)
class SelectVehicle:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class CloseVehicle:
    pass


@dataclass(frozen=True, slots=True)
class PageLoaded:
    total_pages: int | None
    has_more: bool | None


Action = Union[
    SelectRoutes,
    SelectTrips,
    GoToPage,
    NextPage,
    PreviousPage,
    SetLimit,
    SelectVehicle,
    CloseVehicle,
    PageLoaded,
]


def _bounded_page(state: BrowserState, page: int) -> int:
    page = max(1, int(page))
    if state.total_pages:
        page = min(page, state.total_pages)
    return page


def reduce(state: BrowserState, action: Action) -> BrowserState:
    if isinstance(action, SelectRoutes):
        return replace(
            state,
            selected_routes=_unique(action.route_ids),
            selected_trips=(),
            page=1,
            total_pages=None,
            has_more=None,
        )

    if isinstance(action, SelectTrips):
        # Trips are scoped to the selected routes; without a route there is
        # nothing to scope them to.
        trips = _unique(action.trip_ids) if state.selected_routes else ()
        return replace(
            state, selected_trips=trips, page=1, total_pages=None, has_more=None
        )

    if isinstance(action, GoToPage):
        return replace(state, page=_bounded_page(state, action.page))

    if isinstance(action, NextPage):
        if state.has_more is False:
            return state
        return replace(state, page=_bounded_page(state, state.page + 1))

    if isinstance(action, PreviousPage):
        return replace(state, page=max(1, state.page - 1))

    if isinstance(action, SetLimit):
        if action.limit < 1:
            raise ValueError(f"Invalid page limit: {action.limit}")
        return replace(
            state, limit=int(action.limit), page=1, total_pages=None, has_more=None
        )

    if isinstance(action, SelectVehicle):
        return replace(state, selected_vehicle_id=action.vehicle_id)

    if isinstance(action, CloseVehicle):
        return replace(state, selected_vehicle_id=None)

    if isinstance(action, PageLoaded):
        return replace(state, total_pages=action.total_pages, has_more=action.has_more)

    raise TypeError(f"Unknown action: {action!r}")


def needs_vehicle_fetch(before: BrowserState, after: BrowserState) -> bool:
    return before.fetch_key != after.fetch_key


def needs_trip_resolution(before: BrowserState, after: BrowserState) -> bool:
    return before.selected_routes != after.selected_routes
