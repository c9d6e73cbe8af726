"""
Clock used for every createdAt / updatedAt value.

Timestamps are UTC and truncated to milliseconds, the precision BSON dates keep,
so a value read back from the store compares equal to the value written.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)
