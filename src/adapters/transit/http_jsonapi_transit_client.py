from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Sequence

import httpx

from src.app.ports.output import ITransitApi
from src.domain.exceptions.transit_api import NetworkError, ParseError
from src.domain.models import Route, Trip, Vehicle, VehicleStatus

logger = logging.getLogger(__name__)

JSONAPI_ACCEPT = "application/vnd.api+json"


@dataclass(slots=True)
class HttpJsonApiTransitClient(ITransitApi):
    """Talks to a JSON:API transit-tracking service (e.g. MBTA v3) over HTTP.

    Env vars:
      - TRANSIT_API_BASE_URL: API root (default https://api-v3.mbta.com)
      - TRANSIT_API_TIMEOUT_S: request timeout (default 10)

    Notes:
      - A new client is opened per call; nothing is cached between calls.
      - `transport` exists so tests can plug in `httpx.MockTransport`.
    """

    base_url: str | None = None
    timeout_s: float | None = None
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("TRANSIT_API_BASE_URL") or "https://api-v3.mbta.com"
        self.base_url = self.base_url.rstrip("/")
        if self.timeout_s is None:
            self.timeout_s = float(os.getenv("TRANSIT_API_TIMEOUT_S") or 10.0)

    async def _get(self, path: str, params: Mapping[str, str]) -> list[Mapping[str, Any]]:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, dict(params))
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.get(
                    url, params=dict(params), headers={"Accept": JSONAPI_ACCEPT}
                )
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"{path} returned HTTP {exc.response.status_code}",
                url=str(exc.request.url),
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"{path} request failed: {exc}", url=url) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ParseError(f"{path} returned malformed JSON") from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ParseError(f"{path} response has no 'data' array")
        return [item for item in data if isinstance(item, dict)]

    async def list_routes(self) -> tuple[Route, ...]:
        items = await self._get("/routes", {})
        return tuple(r for r in (_parse_route(i) for i in items) if r is not None)

    async def list_vehicles(
        self,
        *,
        route_ids: Sequence[str] = (),
        trip_ids: Sequence[str] = (),
        limit: int,
        offset: int | None = None,
    ) -> tuple[Vehicle, ...]:
        params: dict[str, str] = {}
        if route_ids:
            params["filter[route]"] = ",".join(route_ids)
        if trip_ids:
            params["filter[trip]"] = ",".join(trip_ids)
        params["page[limit]"] = str(int(limit))
        if offset is not None:
            params["page[offset]"] = str(int(offset))

        items = await self._get("/vehicles", params)
        return tuple(v for v in (_parse_vehicle(i) for i in items) if v is not None)

    async def list_trips(
        self, *, route_id: str | None = None, limit: int
    ) -> tuple[Trip, ...]:
        params: dict[str, str] = {"page[limit]": str(int(limit))}
        if route_id:
            params["filter[route]"] = route_id

        items = await self._get("/trips", params)
        return tuple(t for t in (_parse_trip(i) for i in items) if t is not None)


def _attrs(item: Mapping[str, Any]) -> Mapping[str, Any]:
    attrs = item.get("attributes")
    return attrs if isinstance(attrs, dict) else {}


def _related_id(item: Mapping[str, Any], name: str) -> str | None:
    rels = item.get("relationships")
    if not isinstance(rels, dict):
        return None
    rel = rels.get(name)
    if not isinstance(rel, dict):
        return None
    data = rel.get("data")
    if not isinstance(data, dict):
        return None
    value = data.get("id")
    return str(value) if value else None


def _str_or_none(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_timestamp(raw: Any) -> datetime | None:
    text = _str_or_none(raw)
    if text is None:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_route(item: Mapping[str, Any]) -> Route | None:
    route_id = _str_or_none(item.get("id"))
    if route_id is None:
        return None
    name = _str_or_none(_attrs(item).get("long_name"))
    return Route(id=route_id, display_name=name or route_id)


def _parse_vehicle(item: Mapping[str, Any]) -> Vehicle | None:
    vehicle_id = _str_or_none(item.get("id"))
    if vehicle_id is None:
        return None

    attrs = _attrs(item)
    raw_status = _str_or_none(attrs.get("current_status"))
    return Vehicle(
        id=vehicle_id,
        label=_str_or_none(attrs.get("label")),
        current_status=VehicleStatus.parse(raw_status),
        latitude=_float_or_none(attrs.get("latitude")),
        longitude=_float_or_none(attrs.get("longitude")),
        updated_at=_parse_timestamp(attrs.get("updated_at")),
        speed=_float_or_none(attrs.get("speed")),
        bearing=_float_or_none(attrs.get("bearing")),
        route_id=_related_id(item, "route"),
        trip_id=_related_id(item, "trip"),
        raw_status=raw_status,
    )


def _parse_trip(item: Mapping[str, Any]) -> Trip | None:
    trip_id = _str_or_none(item.get("id"))
    if trip_id is None:
        return None
    attrs = _attrs(item)
    label = _str_or_none(attrs.get("headsign")) or _str_or_none(attrs.get("name"))
    return Trip(
        id=trip_id,
        label=label or trip_id,
        route_id=_related_id(item, "route"),
    )
