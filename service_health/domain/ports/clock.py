"""Clock abstraction used to timestamp reports and measure uptime."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class IClock(Protocol):
    """Source of wall-clock and monotonic time."""

    def now(self) -> datetime:
        """Return the current UTC timestamp."""
        ...

    def monotonic(self) -> float:
        """Return a monotonic reading in seconds."""
        ...
