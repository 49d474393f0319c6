import math
import time
from threading import Lock

from cachetools import TTLCache

from dnarepair.errors import TooManyRequests


class SlidingWindowRateLimiter:
    """
    Allows at most `max_attempts` hits per key within any `window` seconds.

    State lives in this process only; instances behind a load balancer each keep their own counts.
    """

    def __init__(self, max_attempts, window, maxsize=10_000, clock=time.monotonic,
                 message="Too many requests, please try again later."):
        self.max_attempts = max_attempts
        self.window = window
        self.clock = clock
        self.message = message
        # An entry expires once its newest hit leaves the window.
        self._hits = TTLCache(maxsize=maxsize, ttl=window, timer=clock)
        self._lock = Lock()

    def hit(self, key):
        """
        Records an attempt for `key` and returns the attempts left, or raises TooManyRequests.
        Rejected attempts are not recorded.
        """
        with self._lock:
            now = self.clock()
            hits = [t for t in self._hits.get(key, ()) if now - t < self.window]
            if len(hits) >= self.max_attempts:
                retry_after = max(1, math.ceil(self.window - (now - hits[0])))
                raise TooManyRequests(self.message, headers={"Retry-After": str(retry_after)})
            hits.append(now)
            self._hits[key] = hits
            return self.max_attempts - len(hits)

    def reset(self, key=None):
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)
