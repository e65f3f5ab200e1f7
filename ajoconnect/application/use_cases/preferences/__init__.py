"""Notification preference use cases."""

from .preferences import (
    clear_push_subscription,
    get_preferences,
    renew_push_subscription,
    save_push_subscription,
    update_preferences,
)

__all__ = [
    "clear_push_subscription",
    "get_preferences",
    "renew_push_subscription",
    "save_push_subscription",
    "update_preferences",
]
