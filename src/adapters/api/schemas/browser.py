from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from src.adapters.api.schemas.common import GeoPointSchema


class BrowserStateSchema(BaseModel):
    selected_routes: list[str] = []
    selected_trips: list[str] = []
    page: int
    limit: int
    selected_vehicle_id: str | None = None


class VehicleCardSchema(BaseModel):
    id: str
    label: str
    status: str
    status_color: str
    latitude: float | None = None
    longitude: float | None = None
    updated: str


class MapViewSchema(BaseModel):
    center: GeoPointSchema
    zoom: int
    tile_url: str
    attribution: str
    popup: list[str]


class VehicleDetailSchema(BaseModel):
    id: str
    label: str
    status: str
    status_color: str
    latitude: float | None = None
    longitude: float | None = None
    route: str
    trip: str
    updated: str
    speed: float
    bearing: str
    map: MapViewSchema | None = None
    external_map_url: str | None = None


class PaginationSchema(BaseModel):
    strategy: Literal["client-slice", "server-offset"]
    page: int
    limit: int
    total_count: int | None = None
    total_pages: int | None = None
    has_more: bool | None = None
    is_last_page: bool
    buttons: list[int] = []
    can_previous: bool
    can_next: bool


class BrowserViewSchema(BaseModel):
    state: BrowserStateSchema
    loading: bool
    trip_filter_enabled: bool
    vehicles: list[VehicleCardSchema]
    pagination: PaginationSchema | None = None
    selected_vehicle: VehicleDetailSchema | None = None


class IdsRequestSchema(BaseModel):
    ids: list[str] = []


class PageRequestSchema(BaseModel):
    page: int | None = Field(default=None, ge=1)
    direction: Literal["next", "prev"] | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "PageRequestSchema":
        if (self.page is None) == (self.direction is None):
            raise ValueError("Provide either 'page' or 'direction'")
        return self


class LimitRequestSchema(BaseModel):
    limit: int = Field(..., ge=1, le=100)


class SelectionRequestSchema(BaseModel):
    vehicle_id: str = Field(..., min_length=1)
