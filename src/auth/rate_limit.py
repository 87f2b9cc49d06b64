"""In-memory rate limiter for the login and registration endpoints."""
import math
import threading
import time

from src.auth.exceptions import RateLimitExceededError


class RateLimiter:
    """Sliding-window rate limiter.

    Tracks request timestamps per key (client address) within a window.
    State is process-local; each worker process limits independently.

    Usage:
        limiter = RateLimiter(max_requests=5, window_seconds=60)
        limiter.check(request.remote_addr)  # raises when over the limit
    """

    def __init__(self, max_requests: int = 10, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: dict[str, list[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = 0.0

    def allow(self, key: str) -> bool:
        """Record a request for key; False if it is over the limit."""
        now = time.monotonic()
        with self._lock:
            self._sweep(now)
            recent = self._prune(key, now)
            if len(recent) >= self.max_requests:
                return False
            recent.append(now)
            self._requests[key] = recent
            return True

    def check(self, key: str) -> None:
        """Like allow(), but raises RateLimitExceededError instead of returning False."""
        if not self.allow(key):
            raise RateLimitExceededError(self.retry_after(key))

    def retry_after(self, key: str) -> int:
        """Seconds until the oldest request in the window expires."""
        now = time.monotonic()
        with self._lock:
            recent = self._prune(key, now)
            if len(recent) < self.max_requests:
                return 0
            return max(1, math.ceil(recent[0] + self.window_seconds - now))

    def remaining(self, key: str) -> int:
        """Get remaining requests allowed for a key."""
        now = time.monotonic()
        with self._lock:
            return max(0, self.max_requests - len(self._prune(key, now)))

    def reset(self, key: str | None = None) -> None:
        """Forget one key, or every key when none is given."""
        with self._lock:
            if key is None:
                self._requests.clear()
            else:
                self._requests.pop(key, None)

    def _prune(self, key: str, now: float) -> list[float]:
        """Drop expired timestamps; keys with none left are forgotten."""
        cutoff = now - self.window_seconds
        recent = [t for t in self._requests.get(key, ()) if t > cutoff]
        if recent:
            self._requests[key] = recent
        else:
            self._requests.pop(key, None)
        return recent

    def _sweep(self, now: float) -> None:
        # Forget idle clients, at most once per window
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        for key in list(self._requests):
            self._prune(key, now)
