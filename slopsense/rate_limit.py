"""
Rate Limiter — Per-Client Request Throttling

Sliding window rate limiter backed by an in-memory dict, keyed by the
caller's client id (the remote address unless a proxy supplies one).

Defaults: 60 requests/minute, 1000/hour. SLOPSENSE_RATE_LIMIT=false
disables limiting entirely.
"""

from __future__ import annotations

import os
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from fastapi import HTTPException

from slopsense.logging import get_logger

logger = get_logger("rate_limit")

# Maximum number of unique clients tracked before LRU eviction
MAX_TRACKED_CLIENTS = 5000


@dataclass
class RateWindow:
    """Sliding window counter."""
    timestamps: list[float] = field(default_factory=list)

    def prune(self, now: float, max_window: float = 3600):
        """Drop timestamps older than the widest window."""
        cutoff = now - max_window
        self.timestamps = [t for t in self.timestamps if t > cutoff]

    def count_within(self, window_seconds: float, now: float) -> int:
        cutoff = now - window_seconds
        return sum(1 for t in self.timestamps if t > cutoff)

    def record(self, now: float):
        self.timestamps.append(now)


@dataclass(frozen=True)
class RateLimits:
    per_minute: int = 60
    per_hour: int = 1000


DEFAULT_LIMITS = RateLimits(
    per_minute=int(os.getenv("SLOPSENSE_RATE_PER_MINUTE", "60")),
    per_hour=int(os.getenv("SLOPSENSE_RATE_PER_HOUR", "1000")),
)

RATE_LIMIT_ENABLED = os.getenv("SLOPSENSE_RATE_LIMIT", "true").lower() == "true"

# client_id -> RateWindow, in least-recently-used order
_windows: OrderedDict[str, RateWindow] = OrderedDict()
_lock = threading.Lock()


def check_rate_limit(
    client_id: Optional[str],
    limits: Optional[RateLimits] = None,
) -> None:
    """
    Check and record one request for a client.

    Args:
        client_id: Caller identifier. None means untracked (no limit).
        limits: Override DEFAULT_LIMITS.

    Raises:
        HTTPException 429 if either window is full.
    """
    if not RATE_LIMIT_ENABLED or client_id is None:
        return

    limits = limits or DEFAULT_LIMITS
    now = time.time()

    with _lock:
        if client_id not in _windows:
            if len(_windows) >= MAX_TRACKED_CLIENTS:
                _windows.popitem(last=False)
            _windows[client_id] = RateWindow()
        else:
            _windows.move_to_end(client_id)

        window = _windows[client_id]
        window.prune(now)

        if window.count_within(60, now) >= limits.per_minute:
            retry_after = 60 - int(now % 60)
            logger.warning("Rate limit exceeded", extra={"client_id": client_id})
            raise HTTPException(
                status_code=429,
                detail=f"Rate limit exceeded: {limits.per_minute} requests/minute. "
                       f"Retry after {retry_after} seconds.",
                headers={"Retry-After": str(retry_after)},
            )

        if window.count_within(3600, now) >= limits.per_hour:
            logger.warning("Rate limit exceeded", extra={"client_id": client_id})
            raise HTTPException(
                status_code=429,
                detail=f"Rate limit exceeded: {limits.per_hour} requests/hour.",
                headers={"Retry-After": "3600"},
            )

        window.record(now)


def get_usage(client_id: str) -> dict:
    """Current usage for a client."""
    now = time.time()
    with _lock:
        window = _windows.get(client_id)
        if not window:
            return {"minute": 0, "hour": 0}
        window.prune(now)
        return {
            "minute": window.count_within(60, now),
            "hour": window.count_within(3600, now),
        }


def reset():
    """Forget every tracked client."""
    with _lock:
        _windows.clear()
