from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from src.app.ports.output import IRequestPacer

Sleep = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class NoDelayPacer(IRequestPacer):
    async def wait(self) -> None:
        return None


@dataclass(slots=True)
class FixedDelayPacer(IRequestPacer):
    """Keeps at least `interval_s` between consecutive requests.

    The first call never waits.
    """

    interval_s: float = 0.25
    clock: Callable[[], float] = time.monotonic
    sleep: Sleep = asyncio.sleep

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _last_at: float | None = field(default=None, init=False)

    async def wait(self) -> None:
        async with self._lock:
            if self._last_at is not None and self.interval_s > 0:
                remaining = self.interval_s - (self.clock() - self._last_at)
                if remaining > 0:
                    await self.sleep(remaining)
            self._last_at = self.clock()


@dataclass(slots=True)
class TokenBucketPacer(IRequestPacer):
    """Token bucket: `rate_per_s` tokens refill continuously, up to `burst`.

    Every request spends one token. Unlike `FixedDelayPacer`, `burst > 1`
    lets a caller that was idle long enough send several requests at once;
    sustained traffic is held at `rate_per_s` requests per second.
    """

    rate_per_s: float = 4.0
    burst: int = 1
    clock: Callable[[], float] = time.monotonic
    sleep: Sleep = asyncio.sleep

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _tokens: float = field(default=-1.0, init=False)
    _updated_at: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.rate_per_s <= 0:
            raise ValueError(f"Invalid rate: {self.rate_per_s}")
        if self.burst < 1:
            raise ValueError(f"Invalid burst: {self.burst}")

    def _refill(self) -> None:
        now = self.clock()
        if self._tokens < 0:
            # First use: start with a full bucket.
            self._tokens = float(self.burst)
        else:
            elapsed = max(0.0, now - self._updated_at)
            self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate_per_s)
        self._updated_at = now

    async def wait(self) -> None:
        async with self._lock:
            self._refill()
            if self._tokens < 1.0:
                await self.sleep((1.0 - self._tokens) / self.rate_per_s)
                self._refill()
            self._tokens = max(0.0, self._tokens - 1.0)


def build_pacer(kind: str, interval_s: float) -> IRequestPacer:
    if interval_s <= 0:
        return NoDelayPacer()
    if kind == "token-bucket":
        return TokenBucketPacer(rate_per_s=1.0 / interval_s, burst=1)
    return FixedDelayPacer(interval_s=interval_s)
