from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Route:
    """A named transit line as listed by the upstream API."""

    id: str
    display_name: str
