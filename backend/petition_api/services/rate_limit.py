"""
In-memory daily usage limiter.

Counts successful generations per client per UTC calendar day. Keys carry
the date, so usage resets at day rollover without any expiry job; entries
for other days are swept on every check.

State is per process and lost on restart. There is no lock around the
read-then-write, so concurrent requests from one client may both pass a
check near the limit. This is a soft deterrent, not billing enforcement.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Dict, Optional

from petition_api.core.config import settings

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class RateLimitStatus:
    """Result of a rate limit check."""

    allowed: bool
    used: int
    remaining: int
    limit: int


class DailyRateLimiter:
    """Counter map keyed by "<client>_<YYYY-MM-DD>"."""

    def __init__(self, limit: int, today: Optional[Callable[[], date]] = None):
        self.limit = limit
        self._today = today or utc_today
        self._counts: Dict[str, int] = {}

    def _day_suffix(self) -> str:
        return f"_{self._today().isoformat()}"

    def _key(self, client: str) -> str:
        return f"{client}{self._day_suffix()}"

    def _sweep(self, suffix: str) -> None:
        stale_keys = [k for k in self._counts if not k.endswith(suffix)]
        for k in stale_keys:
            del self._counts[k]
        if stale_keys:
            logger.debug(f"Swept {len(stale_keys)} stale rate limit entries")

    def check(self, client: str) -> RateLimitStatus:
        """Report today's usage for a client. Only side effect is the sweep."""
        suffix = self._day_suffix()
        self._sweep(suffix)

        used = self._counts.get(f"{client}{suffix}", 0)
        return RateLimitStatus(
            allowed=used < self.limit,
            used=used,
            remaining=max(0, self.limit - used),
            limit=self.limit,
        )

    def increment(self, client: str) -> None:
        key = self._key(client)
        self._counts[key] = self._counts.get(key, 0) + 1

    def reset(self) -> None:
        self._counts.clear()

    def __len__(self) -> int:
        return len(self._counts)


# Singleton instance
rate_limiter = DailyRateLimiter(settings.DAILY_LIMIT)

def get_rate_limiter() -> DailyRateLimiter:
    """Dependency for API routes."""
    return rate_limiter
