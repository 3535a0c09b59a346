from __future__ import annotations

from abc import ABC, abstractmethod


class IRequestPacer(ABC):
    """Port awaited before every upstream request to self-limit the request rate."""

    @abstractmethod
    async def wait(self) -> None:
        """Suspend until the next request may be sent."""
