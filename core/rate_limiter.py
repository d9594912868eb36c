"""
Simple rate limiter middleware (in-memory sliding window).

- Keyed per client IP; not shared across processes.
- Usage: app.add_middleware(RateLimiterMiddleware, calls=120, per_seconds=60)
"""
import time
import asyncio
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request
from fastapi.responses import JSONResponse

from .response import error as resp_error

class RateLimiterMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, calls: int = 60, per_seconds: int = 60):
        super().__init__(app)
        self.calls = calls
        self.per_seconds = per_seconds
        self._buckets = {}  # key -> [timestamps]
        self._lock = asyncio.Lock()
        self._last_sweep = 0.0

    def _sweep(self, window_start: float) -> None:
        """Drop clients whose every timestamp has left the window."""
        stale = [key for key, stamps in self._buckets.items() if not stamps or stamps[-1] <= window_start]
        for key in stale:
            del self._buckets[key]
        self._last_sweep = window_start + self.per_seconds

    async def dispatch(self, request: Request, call_next):
        client = request.client.host if request.client else "anon"
        key = f"ip:{client}"

        now = time.time()
        async with self._lock:
            window_start = now - self.per_seconds
            if now - self._last_sweep >= self.per_seconds:
                self._sweep(window_start)
            timestamps = [ts for ts in self._buckets.get(key, []) if ts > window_start]
            if len(timestamps) >= self.calls:
                retry_after = max(int(timestamps[0] + self.per_seconds - now), 1)
                self._buckets[key] = timestamps
                return JSONResponse(
                    status_code=429,
                    content=resp_error(error=f"Rate limit exceeded. Retry after {retry_after} seconds"),
                    headers={"Retry-After": str(retry_after)},
                )
            timestamps.append(now)
            self._buckets[key] = timestamps
        return await call_next(request)
