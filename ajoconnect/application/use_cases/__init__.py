"""Aggregate application use cases."""

from .notifications import deliver_notification, send_notification
from .two_factor import is_two_factor_enabled

__all__ = [
    "deliver_notification",
    "is_two_factor_enabled",
    "send_notification",
]
