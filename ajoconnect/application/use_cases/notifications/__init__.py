"""Public helpers for requesting and delivering user notifications."""

from .deliver_notification import build_push_message, deliver_notification
from .send_notification import SEND_NOTIFICATION_FUNCTION, send_notification

__all__ = [
    "SEND_NOTIFICATION_FUNCTION",
    "build_push_message",
    "deliver_notification",
    "send_notification",
]
