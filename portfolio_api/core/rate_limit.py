"""
In-process fixed-window rate limiting keyed by client IP
"""

from __future__ import annotations

from typing import Dict, Tuple
import time


class FixedWindowLimiter:
    """Counts requests per bucket inside ``window_seconds`` windows.

    State lives in process memory and resets on restart.
    """

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._counts: Dict[str, Tuple[int, int]] = {}

    async def check(self, bucket: str) -> tuple[bool, int]:
        """
        Record one request.
        Returns (allowed, remaining).
        """
        window = int(time.time()) // self.window_seconds
        current_window, count = self._counts.get(bucket, (window, 0))
        if current_window != window:
            count = 0
        count += 1
        self._counts[bucket] = (window, count)
        if len(self._counts) > 10000:
            self._evict(window)
        remaining = max(0, self.max_requests - count)
        return (count <= self.max_requests, remaining)

    def _evict(self, window: int) -> None:
        stale = [key for key, (w, _) in self._counts.items() if w != window]
        for key in stale:
            del self._counts[key]
