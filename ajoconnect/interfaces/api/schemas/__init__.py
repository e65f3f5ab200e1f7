from .functions import SendNotificationRequest, TwoFactorStatusRequest
from .notification import NotificationMarkReadRequest, NotificationRead
from .preferences import (
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
    PushSubscriptionSaved,
)

__all__ = [
    "NotificationMarkReadRequest",
    "NotificationPreferencesRead",
    "NotificationPreferencesUpdate",
    "NotificationRead",
    "PushSubscriptionSaved",
    "SendNotificationRequest",
    "TwoFactorStatusRequest",
]
