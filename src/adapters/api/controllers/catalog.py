from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_vehicle_browser
from src.adapters.api.presenters import route_option, trip_option
from src.adapters.api.schemas.common import OptionSchema
from src.app.services.vehicle_browser import VehicleBrowser

router = APIRouter(tags=["filters"])


@router.get("/routes", response_model=list[OptionSchema])
async def list_routes(
    browser: VehicleBrowser = Depends(get_vehicle_browser),
) -> list[OptionSchema]:
    return [route_option(r) for r in await browser.routes()]


@router.get("/trips", response_model=list[OptionSchema])
async def list_trips(
    query: str | None = Query(default=None),
    browser: VehicleBrowser = Depends(get_vehicle_browser),
) -> list[OptionSchema]:
    if query is None:
        trips = browser.trip_options
    else:
        trips = await browser.search_trips(query)
    return [trip_option(t) for t in trips]
