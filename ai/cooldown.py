"""Process-wide cooldown between AI commands of the same category."""
import asyncio
import logging
import math
from time import monotonic
from typing import Callable, Mapping, Optional

from ai.errors import CooldownError

logger = logging.getLogger(__name__)


class CooldownGate:
    """Rejects a category invoked again before its minimum interval elapsed.

    One instance is shared by every request of the process. The timestamp is
    recorded as soon as a call is allowed, so a provider failure further down
    still consumes the slot.
    """

    def __init__(
        self,
        default_seconds: float,
        overrides: Optional[Mapping[str, float]] = None,
        clock: Callable[[], float] = monotonic,
    ):
        intervals = dict(overrides or {})
        for category, seconds in [("<default>", default_seconds), *intervals.items()]:
            if seconds <= 0:
                raise ValueError(f"Cooldown for {category} must be positive, got {seconds!r}")
        self._default = float(default_seconds)
        self._intervals = intervals
        self._clock = clock
        self._last_call: dict[str, float] = {}
        self._lock = asyncio.Lock()

    def interval_for(self, category: str) -> float:
        return float(self._intervals.get(category, self._default))

    async def enforce(self, category: str) -> None:
        """Record a call for category or raise CooldownError with the wait left."""
        interval = self.interval_for(category)
        async with self._lock:
            now = self._clock()
            last = self._last_call.get(category)
            if last is not None:
                elapsed = now - last
                if elapsed < interval:
                    remaining = max(math.ceil(interval - elapsed), 1)
                    logger.info("Cooldown active for %s (%ds left)", category, remaining)
                    raise CooldownError(category, remaining)
            self._last_call[category] = now
        logger.debug("Cooldown slot taken for %s", category)
