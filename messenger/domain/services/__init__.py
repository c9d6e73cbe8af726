"""Pure domain services (no I/O)."""

from messenger.domain.services.clock import utc_now
from messenger.domain.services.ordering import (
    sort_chats_by_activity,
    sort_messages_newest_first,
)

__all__ = [
    "utc_now",
    "sort_chats_by_activity",
    "sort_messages_newest_first",
]
