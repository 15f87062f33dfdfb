"""System clock implementation."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from service_health.domain.ports.clock import IClock


class SystemClock(IClock):
    """Clock backed by ``datetime.now`` and ``time.monotonic``."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
