from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from src.app.ports.output import IRequestPacer, ITransitApi
from src.app.services.request_pacers import NoDelayPacer
from src.domain.algorithms.trips import derive_trips, filter_trips, merge_trips
from src.domain.exceptions.transit_api import TransitApiError
from src.domain.models import Trip

logger = logging.getLogger(__name__)

DERIVE_FROM_VEHICLES = "derive-from-vehicles"
QUERY_BY_PREFIX = "query-by-prefix"


@dataclass(slots=True)
class TripResolver:
    """Finds the trips that can be picked in the trip filter.

    - derive-from-vehicles: trips are read off the vehicles currently running
      on each selected route, one request per route.
    - query-by-prefix: one page of trips is fetched (scoped to the route when
      exactly one is selected) and matched against a typed query.

    Upstream failures never escape: they are logged and yield no trips.
    """

    transit_api: ITransitApi
    strategy: str = DERIVE_FROM_VEHICLES
    fetch_limit: int = 100
    pacer: IRequestPacer = field(default_factory=NoDelayPacer)

    async def resolve_trips(
        self, selected_route_ids: Sequence[str], *, query: str | None = None
    ) -> tuple[Trip, ...]:
        # The trip filter only exists once a route is picked.
        if not selected_route_ids:
            return ()
        if self.strategy == QUERY_BY_PREFIX:
            return await self.search_trips(query, selected_route_ids)
        trips = await self.derive_from_vehicles(selected_route_ids)
        return filter_trips(trips, query) if query else trips

    async def derive_from_vehicles(
        self, selected_route_ids: Sequence[str]
    ) -> tuple[Trip, ...]:
        if not selected_route_ids:
            return ()

        batches: list[tuple[Trip, ...]] = []
        try:
            for route_id in selected_route_ids:
                await self.pacer.wait()
                vehicles = await self.transit_api.list_vehicles(
                    route_ids=(route_id,), limit=self.fetch_limit
                )
                batches.append(derive_trips(vehicles))
        except TransitApiError:
            logger.exception(
                "Failed to load trips", extra={"routes": list(selected_route_ids)}
            )
            return ()

        return merge_trips(*batches)

    async def search_trips(
        self, query: str | None, selected_route_ids: Sequence[str] = ()
    ) -> tuple[Trip, ...]:
        route_id = selected_route_ids[0] if len(selected_route_ids) == 1 else None
        try:
            await self.pacer.wait()
            trips = await self.transit_api.list_trips(
                route_id=route_id, limit=self.fetch_limit
            )
        except TransitApiError:
            logger.exception("Failed to search trips", extra={"query": query})
            return ()
        return filter_trips(merge_trips(trips), query)
