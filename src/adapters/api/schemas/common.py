from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class OptionSchema(BaseModel):
    """A dropdown option as consumed by the dashboard's select controls."""

    value: str
    label: str
