"""Pydantic models for notification preferences and push subscriptions."""

from __future__ import annotations

from pydantic import BaseModel


class NotificationPreferencesRead(BaseModel):
    user_id: str
    email_enabled: bool
    push_enabled: bool
    contribution_reminders: bool
    group_updates: bool
    payment_alerts: bool
    push_subscribed: bool


class NotificationPreferencesUpdate(BaseModel):
    """Partial update; only the fields sent are changed."""

    email_enabled: bool | None = None
    push_enabled: bool | None = None
    contribution_reminders: bool | None = None
    group_updates: bool | None = None
    payment_alerts: bool | None = None

    def changes(self) -> dict[str, bool]:
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class PushSubscriptionSaved(BaseModel):
    success: bool = True
    endpoint: str


__all__ = [
    "NotificationPreferencesRead",
    "NotificationPreferencesUpdate",
    "PushSubscriptionSaved",
]
