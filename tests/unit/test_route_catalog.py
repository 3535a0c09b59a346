from __future__ import annotations

import asyncio

from src.app.services.route_catalog import RouteCatalog
from src.domain.exceptions.transit_api import NetworkError
from src.domain.models import Route

from tests.unit.fakes import FakeTransitApi


def test_routes_are_fetched_once_and_kept_in_order() -> None:
    routes = (Route(id="Red", display_name="Red Line"), Route(id="15", display_name="15"))
    api = FakeTransitApi(routes=routes)
    catalog = RouteCatalog(transit_api=api)

    first = asyncio.run(catalog.list_routes())
    second = asyncio.run(catalog.list_routes())

    assert first == routes
    assert second == routes
    assert len(api.calls) == 1


def test_failed_load_leaves_empty_catalog(caplog) -> None:
    catalog = RouteCatalog(transit_api=FakeTransitApi(error=NetworkError("offline")))

    with caplog.at_level("ERROR"):
        routes = asyncio.run(catalog.load())

    assert routes == ()
    assert catalog.loaded
    assert "Failed to load routes" in caplog.text
