from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_vehicle_browser, get_vehicle_view
from src.adapters.api.presenters import VehicleView
from src.adapters.api.schemas.browser import (
    BrowserViewSchema,
    IdsRequestSchema,
    LimitRequestSchema,
    PageRequestSchema,
    SelectionRequestSchema,
)
from src.app.services.vehicle_browser import VehicleBrowser
from src.domain.state import (
    GoToPage,
    NextPage,
    PreviousPage,
    SelectRoutes,
    SelectTrips,
    SetLimit,
)

router = APIRouter(prefix="/browser", tags=["browser"])


@router.get("", response_model=BrowserViewSchema)
async def get_view(
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    return view.render(browser)


@router.put("/routes", response_model=BrowserViewSchema)
async def select_routes(
    req: IdsRequestSchema,
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    await browser.dispatch(SelectRoutes(route_ids=tuple(req.ids)))
    return view.render(browser)


@router.put("/trips", response_model=BrowserViewSchema)
async def select_trips(
    req: IdsRequestSchema,
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    await browser.dispatch(SelectTrips(trip_ids=tuple(req.ids)))
    return view.render(browser)


@router.put("/page", response_model=BrowserViewSchema)
async def change_page(
    req: PageRequestSchema,
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    if req.page is not None:
        action = GoToPage(page=req.page)
    elif req.direction == "next":
        action = NextPage()
    else:
        action = PreviousPage()
    await browser.dispatch(action)
    return view.render(browser)


@router.put("/limit", response_model=BrowserViewSchema)
async def change_limit(
    req: LimitRequestSchema,
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    await browser.dispatch(SetLimit(limit=req.limit))
    return view.render(browser)


@router.put("/selection", response_model=BrowserViewSchema)
async def select_vehicle(
    req: SelectionRequestSchema,
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    try:
        await browser.select_vehicle(req.vehicle_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return view.render(browser)


@router.delete("/selection", response_model=BrowserViewSchema)
async def close_vehicle(
    browser: VehicleBrowser = Depends(get_vehicle_browser),
    view: VehicleView = Depends(get_vehicle_view),
) -> BrowserViewSchema:
    await browser.close_vehicle()
    return view.render(browser)
