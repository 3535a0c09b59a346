from __future__ import annotations

from functools import lru_cache

from src.adapters.api.presenters import VehicleView
from src.adapters.transit.http_jsonapi_transit_client import HttpJsonApiTransitClient
from src.app.ports.output import ITransitApi
from src.app.services.request_pacers import build_pacer
from src.app.services.route_catalog import RouteCatalog
from src.app.services.trip_resolver import TripResolver
from src.app.services.vehicle_browser import VehicleBrowser
from src.app.services.vehicle_fetcher import VehicleFetcher
from src.config import BrowserConfig
from src.domain.state import BrowserState


@lru_cache(maxsize=1)
def get_config() -> BrowserConfig:
    return BrowserConfig.from_env()


def build_vehicle_browser(cfg: BrowserConfig, transit_api: ITransitApi) -> VehicleBrowser:
    return VehicleBrowser(
        catalog=RouteCatalog(transit_api=transit_api),
        trip_resolver=TripResolver(
            transit_api=transit_api,
            strategy=cfg.trip_strategy,
            fetch_limit=cfg.upstream_fetch_limit,
            pacer=build_pacer(cfg.pacer, cfg.trip_request_interval_s),
        ),
        fetcher=VehicleFetcher(
            transit_api=transit_api,
            strategy=cfg.pagination,
            fetch_limit=cfg.upstream_fetch_limit,
            pacer=build_pacer(cfg.pacer, cfg.route_request_interval_s),
        ),
        state=BrowserState(limit=cfg.page_limit),
    )


# One browser per process: filter state lives in memory only.
@lru_cache(maxsize=1)
def _vehicle_browser() -> VehicleBrowser:
    cfg = get_config()
    client = HttpJsonApiTransitClient(base_url=cfg.base_url, timeout_s=cfg.timeout_s)
    return build_vehicle_browser(cfg, client)


async def get_vehicle_browser() -> VehicleBrowser:
    browser = _vehicle_browser()
    if not browser.started:
        await browser.start()
    return browser


def get_vehicle_view() -> VehicleView:
    return VehicleView.from_config(get_config())
