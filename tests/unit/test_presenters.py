from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from src.adapters.api.presenters import (
    VehicleView,
    format_timestamp,
    route_option,
    status_color,
)
from src.app.services.route_catalog import RouteCatalog
from src.app.services.trip_resolver import TripResolver
from src.app.services.vehicle_browser import VehicleBrowser
from src.app.services.vehicle_fetcher import VehicleFetcher
from src.domain.models import Route, Vehicle, VehicleStatus
from src.domain.state import BrowserState

from tests.unit.fakes import FakeTransitApi, make_vehicle


def test_status_colors() -> None:
    assert status_color(VehicleStatus.IN_TRANSIT_TO) == "green"
    assert status_color(VehicleStatus.STOPPED_AT) == "red"
    assert status_color(VehicleStatus.INCOMING_AT) == "yellow"
    assert status_color(VehicleStatus.OTHER) == "gray"


def test_format_timestamp() -> None:
    assert format_timestamp(None) == "-"
    text = format_timestamp(datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc))
    assert "2026" in text
    assert "October" in text


def test_route_option_uses_display_name() -> None:
    opt = route_option(Route(id="Red", display_name="Red Line"))
    assert (opt.value, opt.label) == ("Red", "Red Line")


def test_detail_applies_defaults_for_missing_fields() -> None:
    v = Vehicle(
        id="y1",
        label=None,
        current_status=VehicleStatus.OTHER,
        latitude=42.35,
        longitude=-71.06,
    )

    detail = VehicleView().detail(v)

    assert detail.label == "-"
    assert detail.status == "-"
    assert detail.status_color == "gray"
    assert detail.route == "-"
    assert detail.trip == "-"
    assert detail.speed == 0
    assert detail.bearing == "-"
    assert detail.updated == "-"
    assert detail.map is not None
    assert detail.map.zoom == 15
    assert detail.map.popup == ["Vehicle"]
    assert detail.external_map_url == "https://www.google.com/maps?q=42.35,-71.06"


def test_detail_without_coordinates_has_no_map() -> None:
    v = make_vehicle("y2", lat=None, lon=None, trip_id="T1", label="1802")

    detail = VehicleView().detail(v)

    assert detail.trip == "T1"
    assert detail.map is None
    assert detail.external_map_url is None


def test_map_uses_configured_tiles_and_attribution() -> None:
    view = VehicleView(
        tile_url="https://tiles.test/{z}/{x}/{y}.png",
        attribution="Test Tiles",
        external_map_url="https://maps.test/?ll={lat},{lon}",
    )
    v = make_vehicle("y3", label="1803", status=VehicleStatus.STOPPED_AT, lat=1.5, lon=2.5)

    detail = view.detail(v)

    assert detail.map is not None
    assert detail.map.tile_url == "https://tiles.test/{z}/{x}/{y}.png"
    assert detail.map.attribution == "Test Tiles"
    assert detail.map.popup == ["1803", "STOPPED_AT"]
    assert detail.map.center.lat == 1.5
    assert detail.external_map_url == "https://maps.test/?ll=1.5,2.5"


def test_render_client_slice_view() -> None:
    api = FakeTransitApi(
        vehicles_by_route={None: tuple(make_vehicle(f"v{i}") for i in range(23))}
    )
    browser = VehicleBrowser(
        catalog=RouteCatalog(transit_api=api),
        trip_resolver=TripResolver(transit_api=api),
        fetcher=VehicleFetcher(transit_api=api),
        state=BrowserState(limit=10),
    )
    asyncio.run(browser.refresh())

    view = VehicleView().render(browser)

    assert view.loading is False
    assert view.trip_filter_enabled is False
    assert len(view.vehicles) == 10
    assert view.pagination is not None
    assert view.pagination.total_pages == 3
    assert view.pagination.buttons == [1, 2, 3]
    assert view.pagination.can_previous is False
    assert view.pagination.can_next is True
    assert view.selected_vehicle is None
