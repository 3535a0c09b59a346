from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.models import PaginationStrategy

DEFAULT_BASE_URL = "https://api-v3.mbta.com"
DEFAULT_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
DEFAULT_ATTRIBUTION = "&copy; OpenStreetMap contributors"
DEFAULT_EXTERNAL_MAP_URL = "https://www.google.com/maps?q={lat},{lon}"

TRIP_STRATEGIES = ("derive-from-vehicles", "query-by-prefix")
PACERS = ("fixed", "token-bucket")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else default


@dataclass(frozen=True, slots=True)
class BrowserConfig:
    """Runtime settings, read from the environment.

    Env vars:
      - TRANSIT_API_BASE_URL (default: MBTA v3)
      - TRANSIT_API_TIMEOUT_S (default 10)
      - PAGINATION_STRATEGY: client-slice | server-offset
      - TRIP_STRATEGY: derive-from-vehicles | query-by-prefix
      - VEHICLE_PAGE_LIMIT (default 10)
      - UPSTREAM_FETCH_LIMIT (default 100)
      - ROUTE_REQUEST_INTERVAL_S (default 0.25)
      - TRIP_REQUEST_INTERVAL_S (default 0.2)
      - REQUEST_PACER: fixed | token-bucket
      - MAP_TILE_URL, MAP_ATTRIBUTION, EXTERNAL_MAP_URL
      - VEHICLE_BROWSER_REVEAL_ERRORS
      - LOG_LEVEL (default INFO)
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0
    pagination: PaginationStrategy = PaginationStrategy.CLIENT_SLICE
    trip_strategy: str = "derive-from-vehicles"
    page_limit: int = 10
    upstream_fetch_limit: int = 100
    route_request_interval_s: float = 0.25
    trip_request_interval_s: float = 0.2
    pacer: str = "fixed"
    tile_url: str = DEFAULT_TILE_URL
    attribution: str = DEFAULT_ATTRIBUTION
    external_map_url: str = DEFAULT_EXTERNAL_MAP_URL
    reveal_errors: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.trip_strategy not in TRIP_STRATEGIES:
            raise ValueError(f"Unknown trip strategy: {self.trip_strategy}")
        if self.pacer not in PACERS:
            raise ValueError(f"Unknown request pacer: {self.pacer}")
        if self.page_limit < 1 or self.upstream_fetch_limit < 1:
            raise ValueError("Page limits must be positive")

    @staticmethod
    def from_env() -> "BrowserConfig":
        return BrowserConfig(
            base_url=_env_str("TRANSIT_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout_s=_env_float("TRANSIT_API_TIMEOUT_S", 10.0),
            pagination=PaginationStrategy(
                _env_str("PAGINATION_STRATEGY", PaginationStrategy.CLIENT_SLICE.value)
            ),
            trip_strategy=_env_str("TRIP_STRATEGY", "derive-from-vehicles"),
            page_limit=_env_int("VEHICLE_PAGE_LIMIT", 10),
            upstream_fetch_limit=_env_int("UPSTREAM_FETCH_LIMIT", 100),
            route_request_interval_s=_env_float("ROUTE_REQUEST_INTERVAL_S", 0.25),
            trip_request_interval_s=_env_float("TRIP_REQUEST_INTERVAL_S", 0.2),
            pacer=_env_str("REQUEST_PACER", "fixed"),
            tile_url=_env_str("MAP_TILE_URL", DEFAULT_TILE_URL),
            attribution=_env_str("MAP_ATTRIBUTION", DEFAULT_ATTRIBUTION),
            external_map_url=_env_str("EXTERNAL_MAP_URL", DEFAULT_EXTERNAL_MAP_URL),
            reveal_errors=_env_bool("VEHICLE_BROWSER_REVEAL_ERRORS", False),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        )
