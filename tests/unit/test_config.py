from __future__ import annotations

import pytest

from src.config import BrowserConfig
from src.domain.models import PaginationStrategy


def test_defaults_when_environment_is_empty(monkeypatch) -> None:
    for name in (
        "TRANSIT_API_BASE_URL",
        "PAGINATION_STRATEGY",
        "TRIP_STRATEGY",
        "VEHICLE_PAGE_LIMIT",
        "REQUEST_PACER",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = BrowserConfig.from_env()

    assert cfg.base_url == "https://api-v3.mbta.com"
    assert cfg.pagination is PaginationStrategy.CLIENT_SLICE
    assert cfg.trip_strategy == "derive-from-vehicles"
    assert cfg.page_limit == 10
    assert cfg.route_request_interval_s == 0.25
    assert cfg.trip_request_interval_s == 0.2


def test_reads_overrides_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TRANSIT_API_BASE_URL", "https://transit.test/")
    monkeypatch.setenv("PAGINATION_STRATEGY", "server-offset")
    monkeypatch.setenv("TRIP_STRATEGY", "query-by-prefix")
    monkeypatch.setenv("VEHICLE_PAGE_LIMIT", "25")
    monkeypatch.setenv("REQUEST_PACER", "token-bucket")
    monkeypatch.setenv("VEHICLE_BROWSER_REVEAL_ERRORS", "yes")

    cfg = BrowserConfig.from_env()

    assert cfg.base_url == "https://transit.test"
    assert cfg.pagination is PaginationStrategy.SERVER_OFFSET
    assert cfg.trip_strategy == "query-by-prefix"
    assert cfg.page_limit == 25
    assert cfg.pacer == "token-bucket"
    assert cfg.reveal_errors is True


def test_rejects_unknown_strategies() -> None:
    with pytest.raises(ValueError):
        BrowserConfig(trip_strategy="guess")
    with pytest.raises(ValueError):
        BrowserConfig(pacer="bursty")
