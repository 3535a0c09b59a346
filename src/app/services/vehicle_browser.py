from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.services.route_catalog import RouteCatalog
from src.app.services.trip_resolver import TripResolver
from src.app.services.vehicle_fetcher import VehicleFetcher
from src.domain.exceptions.transit_api import TransitApiError
from src.domain.models import Route, Trip, Vehicle, VehiclePage
from src.domain.state import (
    Action,
    BrowserState,
    CloseVehicle,
    PageLoaded,
    SelectRoutes,
    SelectTrips,
    SelectVehicle,
    SetLimit,
    needs_trip_resolution,
    needs_vehicle_fetch,
    reduce,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VehicleBrowser:
    """Application service behind the vehicle dashboard.

    Owns the filter state and the last page shown. Actions go through the pure
    reducer; the service then re-resolves trips and/or refetches vehicles as
    the state change requires.

    - A failed vehicle fetch keeps the previous page on screen.
    - `loading` is cleared whichever way a fetch ends.
    - Each fetch carries a generation number; results of a fetch that was
      superseded by a newer one are dropped.
    """

    catalog: RouteCatalog
    trip_resolver: TripResolver
    fetcher: VehicleFetcher
    state: BrowserState = field(default_factory=BrowserState)

    page: VehiclePage | None = None
    trip_options: tuple[Trip, ...] = ()
    loading: bool = False
    started: bool = False
    _generation: int = 0
    _trip_generation: int = 0

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return self.page.vehicles if self.page is not None else ()

    @property
    def selected_vehicle(self) -> Vehicle | None:
        vehicle_id = self.state.selected_vehicle_id
        if vehicle_id is None:
            return None
        return next((v for v in self.vehicles if v.id == vehicle_id), None)

    async def start(self) -> None:
        self.started = True
        await self.catalog.load()
        await self.refresh()

    async def routes(self) -> tuple[Route, ...]:
        return await self.catalog.list_routes()

    async def dispatch(self, action: Action) -> BrowserState:
        if isinstance(action, SelectVehicle) and not any(
            v.id == action.vehicle_id for v in self.vehicles
        ):
            raise LookupError(f"Vehicle not on the current page: {action.vehicle_id}")

        before = self.state
        self.state = reduce(before, action)

        if isinstance(action, SelectRoutes) or needs_trip_resolution(before, self.state):
            await self.resolve_trips()

        force = isinstance(action, (SelectRoutes, SelectTrips, SetLimit))
        if force or needs_vehicle_fetch(before, self.state):
            await self.refresh()
        return self.state

    async def select_vehicle(self, vehicle_id: str) -> Vehicle | None:
        await self.dispatch(SelectVehicle(vehicle_id=vehicle_id))
        return self.selected_vehicle

    async def close_vehicle(self) -> None:
        await self.dispatch(CloseVehicle())

    async def resolve_trips(self) -> tuple[Trip, ...]:
        self._trip_generation += 1
        generation = self._trip_generation
        # Options from a previous route selection are never carried over.
        self.trip_options = ()

        trips = await self.trip_resolver.resolve_trips(self.state.selected_routes)
        if generation == self._trip_generation:
            self.trip_options = trips
        return trips

    async def search_trips(self, query: str | None) -> tuple[Trip, ...]:
        return await self.trip_resolver.resolve_trips(
            self.state.selected_routes, query=query
        )

    async def refresh(self) -> VehiclePage | None:
        self._generation += 1
        generation = self._generation
        snapshot = self.state

        self.loading = True
        try:
            result = await self.fetcher.fetch_vehicles(
                snapshot.selected_routes,
                snapshot.selected_trips,
                snapshot.page,
                snapshot.limit,
            )
        except TransitApiError:
            logger.exception(
                "Failed to load vehicles; keeping previous page",
                extra={"routes": list(snapshot.selected_routes), "page": snapshot.page},
            )
            return self.page
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.debug("Dropping stale vehicle page (generation %d)", generation)
            return self.page

        self.page = result
        self.state = reduce(
            self.state,
            PageLoaded(total_pages=result.total_pages, has_more=result.has_more),
        )
        return result
