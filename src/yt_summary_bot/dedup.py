"""Short-lived memory of processed Slack events.

Slack delivers events at least once. Keys seen within the TTL window are
skipped. State is in-memory (reset on instance restart) and per process.
"""

from cachetools import TTLCache


class EventDeduplicator:
    """TTL-bounded set of recently processed event keys."""

    def __init__(self, ttl_seconds: float = 600, maxsize: int = 1024) -> None:
        self._seen: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds)

    def seen(self, key: str) -> bool:
        """Return True if key was recorded within the window; otherwise record it."""
        if key in self._seen:
            return True
        self._seen[key] = True
        return False

    def clear(self) -> None:
        """Forget all recorded keys. Used for testing."""
        self._seen.clear()
