"""Domain entity holding per-user notification preferences."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .notification import NotificationType

_CATEGORY_BY_TYPE: dict[NotificationType, str] = {
    NotificationType.CONTRIBUTION_REMINDER: "contribution_reminders",
    NotificationType.GROUP_INVITE: "group_updates",
    NotificationType.GROUP_JOINED: "group_updates",
    NotificationType.JOIN_REQUEST: "group_updates",
    NotificationType.PAYMENT_SUCCESS: "payment_alerts",
    NotificationType.PAYOUT_RECEIVED: "payment_alerts",
}

PREFERENCE_FLAGS: tuple[str, ...] = (
    "email_enabled",
    "push_enabled",
    "contribution_reminders",
    "group_updates",
    "payment_alerts",
)


@dataclass
class NotificationPreferences:
    """Channel and category switches chosen by a user."""

    id: str | None
    user_id: str
    email_enabled: bool = True
    push_enabled: bool = True
    contribution_reminders: bool = True
    group_updates: bool = True
    payment_alerts: bool = True
    push_subscription: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def allows(self, notification_type: str) -> bool:
        """Return ``True`` unless the category of ``notification_type`` is muted."""

        try:
            category = _CATEGORY_BY_TYPE.get(NotificationType(notification_type))
        except ValueError:
            return True
        if category is None:
            return True
        return bool(getattr(self, category))


__all__ = ["NotificationPreferences", "PREFERENCE_FLAGS"]
