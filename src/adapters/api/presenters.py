"""Turns browser state and vehicles into what the dashboard renders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.adapters.api.schemas.browser import (
    BrowserStateSchema,
    BrowserViewSchema,
    MapViewSchema,
    PaginationSchema,
    VehicleCardSchema,
    VehicleDetailSchema,
)
from src.adapters.api.schemas.common import GeoPointSchema, OptionSchema
from src.app.services.vehicle_browser import VehicleBrowser
from src.config import (
    DEFAULT_ATTRIBUTION,
    DEFAULT_EXTERNAL_MAP_URL,
    DEFAULT_TILE_URL,
    BrowserConfig,
)
from src.domain.algorithms.pagination import page_buttons
from src.domain.models import Route, Trip, Vehicle, VehiclePage, VehicleStatus
from src.domain.state import BrowserState

MISSING = "-"
MAP_ZOOM = 15

STATUS_COLORS: dict[VehicleStatus, str] = {
    VehicleStatus.IN_TRANSIT_TO: "green",
    VehicleStatus.STOPPED_AT: "red",
    VehicleStatus.INCOMING_AT: "yellow",
}


def status_color(status: VehicleStatus) -> str:
    return STATUS_COLORS.get(status, "gray")


def format_timestamp(value: datetime | None) -> str:
    # e.g. "Sun, 19 October 2026 14:05", in the server's local time zone.
    if value is None:
        return MISSING
    return value.astimezone().strftime("%a, %d %B %Y %H:%M")


def _status_text(v: Vehicle) -> str:
    return v.raw_status or MISSING


def route_option(route: Route) -> OptionSchema:
    return OptionSchema(value=route.id, label=route.display_name)


def trip_option(trip: Trip) -> OptionSchema:
    return OptionSchema(value=trip.id, label=trip.label)


@dataclass(frozen=True, slots=True)
class VehicleView:
    tile_url: str = DEFAULT_TILE_URL
    attribution: str = DEFAULT_ATTRIBUTION
    external_map_url: str = DEFAULT_EXTERNAL_MAP_URL

    @staticmethod
    def from_config(cfg: BrowserConfig) -> "VehicleView":
        return VehicleView(
            tile_url=cfg.tile_url,
            attribution=cfg.attribution,
            external_map_url=cfg.external_map_url,
        )

    def card(self, v: Vehicle) -> VehicleCardSchema:
        return VehicleCardSchema(
            id=v.id,
            label=v.label or MISSING,
            status=_status_text(v),
            status_color=status_color(v.current_status),
            latitude=v.latitude,
            longitude=v.longitude,
            updated=format_timestamp(v.updated_at),
        )

    def map_link(self, v: Vehicle) -> str | None:
        point = v.position
        if point is None:
            return None
        return self.external_map_url.format(lat=point.lat, lon=point.lon)

    def map_view(self, v: Vehicle) -> MapViewSchema | None:
        point = v.position
        if point is None:
            return None
        popup = [v.label or "Vehicle"]
        if v.raw_status:
            popup.append(v.raw_status)
        return MapViewSchema(
            center=GeoPointSchema(lat=point.lat, lon=point.lon),
            zoom=MAP_ZOOM,
            tile_url=self.tile_url,
            attribution=self.attribution,
            popup=popup,
        )

    def detail(self, v: Vehicle) -> VehicleDetailSchema:
        return VehicleDetailSchema(
            id=v.id,
            label=v.label or MISSING,
            status=_status_text(v),
            status_color=status_color(v.current_status),
            latitude=v.latitude,
            longitude=v.longitude,
            route=v.route_id or MISSING,
            trip=v.trip_id or MISSING,
            updated=format_timestamp(v.updated_at),
            speed=v.speed or 0,
            bearing=f"{v.bearing:g}" if v.bearing is not None else MISSING,
            map=self.map_view(v),
            external_map_url=self.map_link(v),
        )

    def pagination(self, page: VehiclePage, state: BrowserState) -> PaginationSchema:
        return PaginationSchema(
            strategy=page.strategy.value,
            page=state.page,
            limit=state.limit,
            total_count=page.total_count,
            total_pages=page.total_pages,
            has_more=page.has_more,
            is_last_page=page.is_last_page,
            buttons=list(page_buttons(page.total_pages)),
            can_previous=state.page > 1,
            can_next=page.has_more is not False,
        )

    def render(self, browser: VehicleBrowser) -> BrowserViewSchema:
        state = browser.state
        selected = browser.selected_vehicle
        return BrowserViewSchema(
            state=BrowserStateSchema(
                selected_routes=list(state.selected_routes),
                selected_trips=list(state.selected_trips),
                page=state.page,
                limit=state.limit,
                selected_vehicle_id=state.selected_vehicle_id,
            ),
            loading=browser.loading,
            trip_filter_enabled=bool(state.selected_routes),
            vehicles=[self.card(v) for v in browser.vehicles],
            pagination=(
                self.pagination(browser.page, state) if browser.page is not None else None
            ),
            selected_vehicle=self.detail(selected) if selected is not None else None,
        )
