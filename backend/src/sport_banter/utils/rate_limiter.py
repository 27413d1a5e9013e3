"""
Rate limiter for Gemini API calls to prevent quota exhaustion.

Implements a strict sliding window: at most `limit` admissions in any
trailing `window_seconds`. One instance is shared by every generation call
in the process and is the single serialization point for them.
"""

import asyncio
import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Awaitable, Callable, Deque, Optional

logger = logging.getLogger(__name__)


@dataclass
class RateLimitStats:
    """Counters describing how often callers had to wait."""
    total_requests: int = 0
    waits: int = 0
    total_wait_seconds: float = 0.0
    last_wait_seconds: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_requests": self.total_requests,
            "waits": self.waits,
            "total_wait_seconds": round(self.total_wait_seconds, 3),
            "last_wait_seconds": round(self.last_wait_seconds, 3),
        }


class RateLimiter:
    """
    Asyncio sliding-window rate limiter.

    The prune-check-append sequence runs under an asyncio.Lock, which is held
    while a caller waits for a slot. Waiters are therefore admitted in arrival
    order and no admission can slip in between the check and the append.
    """

    def __init__(
        self,
        limit: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the rate limiter.

        Args:
            limit: Maximum number of admissions per window
            window_seconds: Length of the trailing window in seconds
            clock: Monotonic time source in seconds
            sleep: Coroutine used to wait (replaced by a fake in tests)
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._sleep = sleep
        self._timestamps: Deque[float] = deque()
        self._lock: Optional[asyncio.Lock] = None
        self._stats = RateLimitStats()

        logger.info(f"[RATE_LIMITER] Initialized with {limit} requests per {window_seconds:.0f}s window")

    @property
    def stats(self) -> RateLimitStats:
        return self._stats

    @property
    def timestamps(self) -> tuple:
        """Admission times currently recorded (oldest first)."""
        return tuple(self._timestamps)

    def _get_lock(self) -> asyncio.Lock:
        # Created lazily so the limiter can be built outside a running loop
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def _prune(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    def wait_time(self, now: float) -> float:
        """Seconds until a slot frees up at `now` (0 if one is free)."""
        self._prune(now)
        if len(self._timestamps) < self.limit:
            return 0.0
        return self.window_seconds - (now - self._timestamps[0])

    async def acquire(self) -> float:
        """
        Suspend until an admission slot is free, then record the admission.

        Never fails, only delays.

        Returns:
            float: Total seconds spent waiting (0 if admitted immediately)
        """
        async with self._get_lock():
            self._stats.total_requests += 1
            waited = 0.0

            while True:
                now = self._clock()
                wait_time = self.wait_time(now)
                if wait_time <= 0:
                    break

                logger.info(f"[RATE_LIMITER] Throttling... Sleeping {wait_time:.2f}s to respect "
                            f"{self.limit} requests per {self.window_seconds:.0f}s")
                await self._sleep(wait_time)
                waited += wait_time

            self._timestamps.append(now)

            if waited > 0:
                self._stats.waits += 1
                self._stats.total_wait_seconds += waited
                self._stats.last_wait_seconds = waited
            return waited

    def reset(self) -> None:
        """Reset the rate limiter state (useful for testing)."""
        self._timestamps.clear()
        self._stats = RateLimitStats()
        logger.info("[RATE_LIMITER] State reset")
