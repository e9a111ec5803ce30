"""Token bucket rate limiting for outbound marketplace requests.

Tokens refill continuously from elapsed time up to a burst cap. Callers
either poll with try_acquire() or wait in line with acquire().

Waiting callers are served strictly in arrival order by a single drain
task. Only the drain task takes tokens on behalf of waiters, so two
callers can never both be handed the same token. All state lives on one
event loop, which is what serializes access to it.

Usage:
    limiter = create_minute_rate_limiter(60)
    await limiter.acquire()
    response = await client.get(url)
"""

import asyncio
import logging
import time
from collections import deque
from typing import Callable, Optional

from seatsniper.config import Settings
from seatsniper.scoring.models import Platform

logger = logging.getLogger(__name__)

INTERVAL_SECONDS: dict[str, float] = {
    "second": 1.0,
    "minute": 60.0,
    "hour": 60.0 * 60,
    "day": 24 * 60.0 * 60,
}

# Never sleep less than this while waiting for a token
MIN_WAIT_SECONDS = 0.001


class RateLimiter:
    """Token bucket with a FIFO wait queue."""

    def __init__(
        self,
        tokens_per_interval: float,
        interval: str = "minute",
        max_tokens: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tokens_per_interval <= 0:
            raise ValueError(f"tokens_per_interval must be positive, got {tokens_per_interval}")
        if interval not in INTERVAL_SECONDS:
            raise ValueError(f"Unknown interval: {interval!r}")

        self.tokens_per_interval = tokens_per_interval
        self.interval_seconds = INTERVAL_SECONDS[interval]
        self.max_tokens = max_tokens if max_tokens is not None else tokens_per_interval
        self._clock = clock
        self._tokens = float(self.max_tokens)
        self._last_refill = clock()
        self._waiters: deque[asyncio.Future[None]] = deque()
        self._drain_task: Optional[asyncio.Task[None]] = None

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        refill = elapsed / self.interval_seconds * self.tokens_per_interval
        self._tokens = min(self.max_tokens, self._tokens + refill)
        self._last_refill = now

    def _seconds_until_token(self) -> float:
        if self._tokens >= 1:
            return 0.0
        needed = 1 - self._tokens
        return needed / self.tokens_per_interval * self.interval_seconds

    def try_acquire(self) -> bool:
        """Take a token immediately if one is free.

        Returns False while other callers are queued in acquire(), so
        polling never jumps the line.
        """
        if self.queued:
            return False

        self._refill()
        if self._tokens >= 1:
            self._tokens -= 1
            return True
        return False

    async def acquire(self, timeout: Optional[float] = None) -> None:
        """Wait for a token.

        Args:
            timeout: Seconds to wait before giving up (None waits forever)

        Raises:
            TimeoutError: If no token was handed over within timeout
        """
        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[None] = loop.create_future()
        self._waiters.append(waiter)

        if self._drain_task is None or self._drain_task.done():
            self._drain_task = loop.create_task(self._drain())

        try:
            if timeout is None:
                await waiter
            else:
                await asyncio.wait_for(waiter, timeout)
        except asyncio.TimeoutError:
            self._return_unused_token(waiter)
            self._stop_idle_drain()
            raise TimeoutError(f"No rate limit token within {timeout}s") from None
        except asyncio.CancelledError:
            self._return_unused_token(waiter)
            self._stop_idle_drain()
            raise

    def _return_unused_token(self, waiter: asyncio.Future[None]) -> None:
        # Token was handed over but the caller gave up before resuming
        if waiter.done() and not waiter.cancelled():
            self._tokens = min(self.max_tokens, self._tokens + 1)

    def _stop_idle_drain(self) -> None:
        # Nobody left to serve; don't keep sleeping toward the next token
        if self.queued == 0 and self._drain_task is not None and not self._drain_task.done():
            self._drain_task.cancel()
            self._drain_task = None
            self._waiters.clear()

    async def _drain(self) -> None:
        while self._waiters:
            waiter = self._waiters[0]
            if waiter.done():
                # Cancelled or timed out before its turn
                self._waiters.popleft()
                continue

            self._refill()
            if self._tokens >= 1:
                self._tokens -= 1
                self._waiters.popleft()
                waiter.set_result(None)
                continue

            await asyncio.sleep(max(MIN_WAIT_SECONDS, self._seconds_until_token()))

    @property
    def queued(self) -> int:
        """Callers currently waiting in acquire()."""
        return sum(1 for waiter in self._waiters if not waiter.done())

    @property
    def available_tokens(self) -> int:
        """Whole tokens available right now."""
        self._refill()
        return int(self._tokens)

    def wait_time(self) -> float:
        """Seconds until the next token is available."""
        self._refill()
        return self._seconds_until_token()


def create_minute_rate_limiter(requests_per_minute: int) -> RateLimiter:
    """Rate limiter allowing a full minute's quota as burst."""
    return RateLimiter(
        tokens_per_interval=requests_per_minute,
        interval="minute",
        max_tokens=requests_per_minute,
    )


def create_daily_rate_limiter(requests_per_day: int) -> RateLimiter:
    """Rate limiter spreading a daily quota evenly across minutes."""
    requests_per_minute = max(1, requests_per_day // (24 * 60))
    return RateLimiter(
        tokens_per_interval=requests_per_minute,
        interval="minute",
        max_tokens=min(requests_per_minute * 5, 50),
    )


def build_platform_limiters(settings: Settings) -> dict[Platform, RateLimiter]:
    """One rate limiter per marketplace from configured quotas."""
    limiters = {
        Platform.STUBHUB: create_minute_rate_limiter(settings.stubhub_requests_per_minute),
        Platform.TICKETMASTER: create_daily_rate_limiter(settings.ticketmaster_requests_per_day),
        Platform.SEATGEEK: create_minute_rate_limiter(settings.seatgeek_requests_per_minute),
        Platform.VIVIDSEATS: create_minute_rate_limiter(settings.vividseats_requests_per_minute),
    }
    for platform, limiter in limiters.items():
        logger.debug(
            f"Rate limiter for {platform.value}: {limiter.tokens_per_interval}/min, "
            f"burst {limiter.max_tokens}"
        )
    return limiters
