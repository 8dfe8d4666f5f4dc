"""Reading Rules — pure decisions applied to an inbound reading before it is stored.

Invariants:
    - resolve_timestamp never returns None
    - secret_matches is exact string equality; a missing header compares as ""

Design Decisions:
    - Plain == comparison, not hmac.compare_digest (timing side channel
      accepted, see DESIGN.md)
    - `now` injectable so callers and tests control the clock
"""

import time
from typing import Callable

from esp_telemetry.core.domain_types import EpochSeconds

SECRET_HEADER = "X-Secret-Key"


def current_epoch_seconds() -> EpochSeconds:
    """Current UTC time as whole epoch seconds."""
    return EpochSeconds(int(time.time()))


def resolve_timestamp(
    timestamp: int | None,
    now: Callable[[], EpochSeconds] = current_epoch_seconds,
) -> EpochSeconds:
    """Keep a device-supplied timestamp, otherwise stamp with server time."""
    if timestamp is None:
        return now()
    return EpochSeconds(timestamp)


def secret_matches(provided: str | None, expected: str) -> bool:
    return (provided or "") == expected
