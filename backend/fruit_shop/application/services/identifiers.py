"""Timestamp-based record identifiers."""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StampIdGenerator:
    """Issues millisecond-stamp ids that never repeat within one generator.

    Two requests in the same millisecond get consecutive stamps.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last_stamp = 0

    def next_id(self, prefix: str = "") -> str:
        stamp = int(self._clock().timestamp() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return f"{prefix}{stamp}"
