"""Request bodies accepted by the functions endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ajoconnect.domain.entities import NotificationRequest, NotificationType


class SendNotificationRequest(BaseModel):
    """Body of ``send-notification``."""

    user_id: str = Field(..., min_length=1)
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
    send_email: bool = True
    send_push: bool = True

    def to_entity(self) -> NotificationRequest:
        return NotificationRequest(
            user_id=self.user_id,
            type=self.type,
            title=self.title,
            message=self.message,
            data=self.data,
            send_email=self.send_email,
            send_push=self.send_push,
        )


class TwoFactorStatusRequest(BaseModel):
    """Body of ``check-2fa-status``; a missing id is reported as HTTP 400."""

    user_id: str | None = None


__all__ = ["SendNotificationRequest", "TwoFactorStatusRequest"]
