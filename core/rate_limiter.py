# core/rate_limiter.py

import time
from collections import deque
from threading import Lock
from typing import Deque, Dict, Optional, Tuple

from fastapi import HTTPException, Request

from core.logging_config import get_logger

log = get_logger("rate_limiter")


class SlidingWindowLimiter:
    """
    In-memory sliding window, per identifier. State lives in this process
    only; it is lost on restart and not shared between workers.

    Identifiers whose window has fully elapsed are dropped by a sweep every
    ``sweep_every`` hits, so idle identifiers do not accumulate.
    """

    def __init__(self, sweep_every: int = 256):
        self._hits: Dict[str, Deque[float]] = {}
        self._windows: Dict[str, int] = {}
        self._lock = Lock()
        self._sweep_every = sweep_every
        self._since_sweep = 0

    def hit(self, identifier: str, max_requests: int, window_seconds: int) -> Tuple[bool, int]:
        """Record one request. Returns (allowed, remaining)."""
        now = time.monotonic()

        with self._lock:
            self._since_sweep += 1
            if self._since_sweep >= self._sweep_every:
                self._sweep(now)

            hits = self._hits.get(identifier)
            if hits is not None:
                self._prune(hits, now - window_seconds)
            else:
                hits = deque()

            if len(hits) >= max_requests:
                return False, 0

            hits.append(now)
            self._hits[identifier] = hits
            self._windows[identifier] = window_seconds
            return True, max_requests - len(hits)

    @staticmethod
    def _prune(hits: Deque[float], window_start: float):
        while hits and hits[0] <= window_start:
            hits.popleft()

    def _sweep(self, now: float):
        for identifier in list(self._hits):
            hits = self._hits[identifier]
            self._prune(hits, now - self._windows.get(identifier, 0))
            if not hits:
                del self._hits[identifier]
                self._windows.pop(identifier, None)
        self._since_sweep = 0

    def tracked(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self, identifier: Optional[str] = None):
        with self._lock:
            if identifier is None:
                self._hits.clear()
                self._windows.clear()
            else:
                self._hits.pop(identifier, None)
                self._windows.pop(identifier, None)


_limiter = SlidingWindowLimiter()


def get_limiter() -> SlidingWindowLimiter:
    return _limiter


def get_rate_limit_identifier(request: Request, subject: Optional[str] = None) -> str:
    """
    ``<subject>|<client ip>`` when a subject (e.g. an email) is given,
    otherwise the client ip alone. The first X-Forwarded-For hop wins
    over the socket address.
    """
    client_ip = request.client.host if request.client else "unknown"

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()

    if subject:
        return f"{subject.lower()}|{client_ip}"
    return f"ip:{client_ip}"


def require_rate_limit(
    request: Request,
    identifier: Optional[str] = None,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> int:
    """Raise 429 once ``identifier`` exceeds the window; returns requests left."""
    if identifier is None:
        identifier = get_rate_limit_identifier(request)

    allowed, remaining = _limiter.hit(identifier, max_requests, window_seconds)

    if not allowed:
        log.warning(f"Rate limit exceeded for {identifier} on {request.url.path}")
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(window_seconds),
            },
        )

    return remaining
