from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .vehicle import Vehicle


class PaginationStrategy(str, Enum):
    CLIENT_SLICE = "client-slice"
    SERVER_OFFSET = "server-offset"


@dataclass(frozen=True, slots=True)
class VehiclePage:
    """One page of vehicles plus whatever is known about the remaining pages.

    `total_count`/`total_pages` are only known for client-side slicing; the
    server-offset strategy only knows whether the page came back full.
    """

    vehicles: tuple[Vehicle, ...]
    page: int
    limit: int
    strategy: PaginationStrategy
    has_more: bool | None = None
    total_count: int | None = None
    total_pages: int | None = None

    @property
    def is_last_page(self) -> bool:
        return self.has_more is False
