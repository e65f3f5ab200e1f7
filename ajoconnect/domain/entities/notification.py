"""Domain entities describing user notifications and dispatch requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Kinds of notification-worthy events raised by the application."""

    GROUP_INVITE = "group_invite"
    GROUP_JOINED = "group_joined"
    JOIN_REQUEST = "join_request"
    CONTRIBUTION_REMINDER = "contribution_reminder"
    PAYMENT_SUCCESS = "payment_success"
    PAYOUT_RECEIVED = "payout_received"
    REFERRAL_BONUS = "referral_bonus"


@dataclass
class Notification:
    """In-app message stored for a specific user."""

    id: str | None
    user_id: str
    type: str
    title: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class NotificationRequest:
    """Request handed to the remote delivery function."""

    user_id: str
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    send_email: bool = True
    send_push: bool = True

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body expected by ``send-notification``."""

        return {
            "user_id": self.user_id,
            "type": NotificationType(self.type).value,
            "title": self.title,
            "message": self.message,
            "data": dict(self.data),
            "send_email": self.send_email,
            "send_push": self.send_push,
        }


@dataclass(frozen=True)
class DispatchResult:
    """Outcome reported back to the caller of the dispatch client."""

    success: bool
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            result["error"] = self.error
        for key, value in self.details.items():
            result.setdefault(key, value)
        return result


@dataclass(frozen=True)
class DeliveryReport:
    """Channels that actually accepted a notification."""

    email_sent: bool = False
    push_sent: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "email_sent": self.email_sent,
            "push_sent": self.push_sent,
        }


__all__ = [
    "DeliveryReport",
    "DispatchResult",
    "Notification",
    "NotificationRequest",
    "NotificationType",
]
