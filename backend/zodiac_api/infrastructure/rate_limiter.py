"""Rate Limiter - in-memory sliding window of request timestamps per client.

Invariants:
    - At most max_requests accepted per client within any window_seconds span
    - Rejected requests are NOT recorded (they don't extend the block)
    - Clock injectable for deterministic tests
    - Keys idle for a whole window are swept at most once per window, so
      memory tracks active clients only

Design Decisions:
    - Sliding window over fixed buckets: no burst at bucket edges
    - Per-process state: fine for a single uvicorn worker
"""

import asyncio
import math
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after_seconds: int = 0


class SlidingWindowRateLimiter:
    """Track request timestamps per client key and enforce a window budget."""

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 900,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {max_requests}")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._requests: dict[str, deque[float]] = {}
        self._last_sweep = clock()
        self._lock = asyncio.Lock()

    async def hit(self, key: str) -> RateLimitDecision:
        """Record a request for `key` if budget allows."""
        async with self._lock:
            now = self._clock()
            cutoff = now - self.window_seconds
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now
            window = self._requests.setdefault(key, deque())
            while window and window[0] <= cutoff:
                window.popleft()
            if len(window) >= self.max_requests:
                retry_after = math.ceil(window[0] + self.window_seconds - now)
                return RateLimitDecision(
                    allowed=False, remaining=0,
                    retry_after_seconds=max(retry_after, 1),
                )
            window.append(now)
            return RateLimitDecision(
                allowed=True, remaining=self.max_requests - len(window),
            )

    def _sweep(self, cutoff: float) -> None:
        # A deque's newest timestamp is its last; expired there means expired everywhere.
        stale = [k for k, w in self._requests.items() if not w or w[-1] <= cutoff]
        for key in stale:
            del self._requests[key]
