"""Domain entities exposed by the application."""

from .notification import (
    DeliveryReport,
    DispatchResult,
    Notification,
    NotificationRequest,
    NotificationType,
)
from .notification_preferences import PREFERENCE_FLAGS, NotificationPreferences
from .profile import Profile
from .push import (
    InvalidPushSubscriptionError,
    NotificationOptions,
    PushPayload,
    PushPayloadError,
    PushSubscription,
)
from .two_factor import UserTwoFactor

__all__ = [
    "DeliveryReport",
    "DispatchResult",
    "InvalidPushSubscriptionError",
    "Notification",
    "NotificationOptions",
    "NotificationPreferences",
    "NotificationRequest",
    "NotificationType",
    "PREFERENCE_FLAGS",
    "Profile",
    "PushPayload",
    "PushPayloadError",
    "PushSubscription",
    "UserTwoFactor",
]
