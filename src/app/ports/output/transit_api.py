from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.models import Route, Trip, Vehicle


class ITransitApi(ABC):
    """Port for the upstream transit-tracking API (routes, vehicles, trips).

    Implementations raise `NetworkError`/`ParseError` on failure.
    """

    @abstractmethod
    async def list_routes(self) -> tuple[Route, ...]:
        raise NotImplementedError

    @abstractmethod
    async def list_vehicles(
        self,
        *,
        route_ids: Sequence[str] = (),
        trip_ids: Sequence[str] = (),
        limit: int,
        offset: int | None = None,
    ) -> tuple[Vehicle, ...]:
        raise NotImplementedError

    @abstractmethod
    async def list_trips(
        self, *, route_id: str | None = None, limit: int
    ) -> tuple[Trip, ...]:
        raise NotImplementedError
