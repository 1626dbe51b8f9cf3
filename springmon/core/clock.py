"""Wall-clock helper shared by every timestamp field."""

from __future__ import annotations

import time


def current_millis() -> int:
    """Return the current epoch time in whole milliseconds."""
    return time.time_ns() // 1_000_000
