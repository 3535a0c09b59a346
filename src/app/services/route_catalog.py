from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ITransitApi
from src.domain.exceptions.transit_api import TransitApiError
from src.domain.models import Route

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RouteCatalog:
    """Loads the route list once and keeps it for the rest of the session.

    A failed load leaves the catalog empty; the route filter then simply has
    no options.
    """

    transit_api: ITransitApi
    _routes: tuple[Route, ...] | None = None

    @property
    def loaded(self) -> bool:
        return self._routes is not None

    async def load(self) -> tuple[Route, ...]:
        try:
            self._routes = await self.transit_api.list_routes()
        except TransitApiError:
            logger.exception("Failed to load routes")
            self._routes = ()
        return self._routes

    async def list_routes(self) -> tuple[Route, ...]:
        if self._routes is None:
            return await self.load()
        return self._routes
