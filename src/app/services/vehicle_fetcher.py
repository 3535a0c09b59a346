from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from src.app.ports.output import IRequestPacer, ITransitApi
from src.app.services.request_pacers import NoDelayPacer
from src.domain.algorithms.pagination import (
    is_last_page,
    page_offset,
    slice_page,
    total_pages,
)
from src.domain.models import PaginationStrategy, Vehicle, VehiclePage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VehicleFetcher:
    """Retrieves one page of vehicles for a filter selection.

    Errors from the upstream API propagate; the caller decides what to show
    when a fetch fails.
    """

    transit_api: ITransitApi
    strategy: PaginationStrategy = PaginationStrategy.CLIENT_SLICE
    # Per-request cap when fetching whole result sets for client-side slicing.
    fetch_limit: int = 100
    pacer: IRequestPacer = field(default_factory=NoDelayPacer)

    async def fetch_vehicles(
        self,
        routes: Sequence[str],
        trips: Sequence[str],
        page: int,
        limit: int,
    ) -> VehiclePage:
        if page < 1:
            raise ValueError(f"Invalid page: {page}")
        if limit < 1:
            raise ValueError(f"Invalid page limit: {limit}")

        if self.strategy is PaginationStrategy.SERVER_OFFSET:
            return await self._fetch_server_page(routes, trips, page, limit)
        return await self._fetch_and_slice(routes, trips, page, limit)

    async def fetch_all(
        self, routes: Sequence[str], trips: Sequence[str]
    ) -> tuple[Vehicle, ...]:
        """All matching vehicles, one request per selected route, in route order."""

        if not routes:
            await self.pacer.wait()
            return await self.transit_api.list_vehicles(
                trip_ids=tuple(trips), limit=self.fetch_limit
            )

        merged: list[Vehicle] = []
        for route_id in routes:
            await self.pacer.wait()
            merged.extend(
                await self.transit_api.list_vehicles(
                    route_ids=(route_id,), trip_ids=tuple(trips), limit=self.fetch_limit
                )
            )
        logger.debug("Fetched %d vehicles across %d routes", len(merged), len(routes))
        return tuple(merged)

    async def _fetch_and_slice(
        self, routes: Sequence[str], trips: Sequence[str], page: int, limit: int
    ) -> VehiclePage:
        vehicles = await self.fetch_all(routes, trips)
        pages = total_pages(len(vehicles), limit)
        return VehiclePage(
            vehicles=slice_page(vehicles, page=page, limit=limit),
            page=page,
            limit=limit,
            strategy=PaginationStrategy.CLIENT_SLICE,
            has_more=page < pages,
            total_count=len(vehicles),
            total_pages=pages,
        )

    async def _fetch_server_page(
        self, routes: Sequence[str], trips: Sequence[str], page: int, limit: int
    ) -> VehiclePage:
        await self.pacer.wait()
        vehicles = await self.transit_api.list_vehicles(
            route_ids=tuple(routes),
            trip_ids=tuple(trips),
            limit=limit,
            offset=page_offset(page, limit),
        )
        return VehiclePage(
            vehicles=vehicles,
            page=page,
            limit=limit,
            strategy=PaginationStrategy.SERVER_OFFSET,
            has_more=not is_last_page(len(vehicles), limit),
        )
