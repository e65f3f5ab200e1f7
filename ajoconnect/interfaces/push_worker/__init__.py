"""Push delivery worker and the platform ports it runs against."""

from .config import WorkerConfig
from .events import (
    ExtendableEvent,
    NotificationClickEvent,
    PushEvent,
    PushMessageData,
    PushSubscriptionChangeEvent,
)
from .payload import build_notification_options, parse_push_payload
from .worker import (
    NOTIFICATION_CLICK,
    PUSH,
    PUSH_SUBSCRIPTION_CHANGE,
    PushDeliveryWorker,
)

__all__ = [
    "ExtendableEvent",
    "NOTIFICATION_CLICK",
    "NotificationClickEvent",
    "PUSH",
    "PUSH_SUBSCRIPTION_CHANGE",
    "PushDeliveryWorker",
    "PushEvent",
    "PushMessageData",
    "PushSubscriptionChangeEvent",
    "WorkerConfig",
    "build_notification_options",
    "parse_push_payload",
]
