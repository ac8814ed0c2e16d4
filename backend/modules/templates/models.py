"""
Template module code sets.

Driver templates and passenger quick replies are closed numeric code sets.
The codes are stable: they are stored on messages and in allow-lists.
"""

from enum import IntEnum


class DriverTemplate(IntEnum):
    """System templates a verified driver may send into a thread."""

    EN_ROUTE = 0
    ARRIVING_SOON = 1
    ARRIVING_NOW = 2
    DELAYED = 3
    CANCELLED = 4
    PAYMENT_RECEIVED = 5
    RIDE_COMPLETED = 6


class QuickReply(IntEnum):
    """Shortcut replies a passenger may send into a thread."""

    ON_MY_WAY = 0
    NEED_HELP = 1
    CANCEL_RIDE = 2
    RATE_DRIVER = 3
    PAYMENT_SENT = 4


# ETA thresholds (minutes) used to pick an arrival template
ARRIVING_NOW_MAX_MINUTES = 0
ARRIVING_SOON_MAX_MINUTES = 2
