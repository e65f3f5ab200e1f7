"""Endpoints exposing the caller's notification preferences."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ajoconnect.application.use_cases.preferences import get_preferences, update_preferences
from ajoconnect.domain.entities import NotificationPreferences
from ajoconnect.infrastructure.database import get_db
from ajoconnect.interfaces.api.dependencies import get_current_user_id
from ajoconnect.interfaces.api.schemas import (
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
)

router = APIRouter(prefix="/notification-preferences", tags=["notification-preferences"])


def _to_schema(preferences: NotificationPreferences) -> NotificationPreferencesRead:
    return NotificationPreferencesRead(
        user_id=preferences.user_id,
        email_enabled=preferences.email_enabled,
        push_enabled=preferences.push_enabled,
        contribution_reminders=preferences.contribution_reminders,
        group_updates=preferences.group_updates,
        payment_alerts=preferences.payment_alerts,
        push_subscribed=bool(preferences.push_subscription),
    )


@router.get("", response_model=NotificationPreferencesRead)
def read_preferences(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> NotificationPreferencesRead:
    """Return the caller's preferences, creating the defaults on first read."""

    return _to_schema(get_preferences(db, user_id))


@router.patch("", response_model=NotificationPreferencesRead)
def patch_preferences(
    payload: NotificationPreferencesUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> NotificationPreferencesRead:
    return _to_schema(update_preferences(db, user_id, payload.changes()))
