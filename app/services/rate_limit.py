from __future__ import annotations

import asyncio
import time
from collections import defaultdict, deque
from math import ceil

from app.api.errors import RateLimitedError
from app.core.config import get_settings

_validate_rate_limit_buckets: dict[tuple[str, str], deque[float]] = defaultdict(deque)
_validate_rate_limit_lock = asyncio.Lock()


def _build_rate_limit_key(*, puzzle_key: str, client_ip: str | None) -> tuple[str, str]:
    return (puzzle_key, client_ip or "unknown")


def _drop_drained_buckets(window_start: float) -> None:
    drained = [
        key for key, bucket in _validate_rate_limit_buckets.items() if not bucket or bucket[-1] <= window_start
    ]
    for key in drained:
        del _validate_rate_limit_buckets[key]


async def enforce_validate_rate_limit(*, puzzle_key: str, client_ip: str | None) -> None:
    settings = get_settings()
    limit = settings.validate_rate_limit_requests
    window_seconds = settings.validate_rate_limit_window_seconds

    async with _validate_rate_limit_lock:
        now = time.monotonic()
        window_start = now - float(window_seconds)
        key = _build_rate_limit_key(puzzle_key=puzzle_key, client_ip=client_ip)
        _drop_drained_buckets(window_start)
        bucket = _validate_rate_limit_buckets[key]

        while bucket and bucket[0] <= window_start:
            bucket.popleft()

        if len(bucket) >= limit:
            retry_after_seconds = max(1, ceil(bucket[0] + float(window_seconds) - now))
            raise RateLimitedError(retry_after_seconds=retry_after_seconds)

        bucket.append(now)


def reset_validate_rate_limits() -> None:
    _validate_rate_limit_buckets.clear()


__all__ = ["enforce_validate_rate_limit", "reset_validate_rate_limits"]
