"""Read and change a user's notification preferences."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.orm import Session

from ajoconnect.domain.entities import NotificationPreferences, PushSubscription
from ajoconnect.infrastructure.repositories import NotificationPreferencesRepository


def get_preferences(session: Session, user_id: str) -> NotificationPreferences:
    """Return the preferences of ``user_id``, creating the defaults on first read."""

    return NotificationPreferencesRepository(session).get_or_create(user_id)


def update_preferences(
    session: Session, user_id: str, updates: Mapping[str, bool]
) -> NotificationPreferences:
    return NotificationPreferencesRepository(session).update_flags(user_id, updates)


def save_push_subscription(
    session: Session, user_id: str, subscription: Mapping[str, Any]
) -> PushSubscription:
    """Validate and store the browser's subscription JSON for ``user_id``.

    Raises :class:`InvalidPushSubscriptionError` when no endpoint is present.
    """

    parsed = PushSubscription.from_mapping(subscription)
    NotificationPreferencesRepository(session).set_push_subscription(user_id, subscription)
    return parsed


def renew_push_subscription(
    session: Session, old_endpoint: str, subscription: Mapping[str, Any]
) -> str | None:
    """Replace the subscription stored at ``old_endpoint`` with ``subscription``.

    Used when the push service rotates a subscription and the worker cannot
    present user credentials. Returns the owning user id, or ``None`` when no
    user is subscribed at ``old_endpoint``.
    """

    PushSubscription.from_mapping(subscription)
    repository = NotificationPreferencesRepository(session)
    current = repository.get_by_push_endpoint(old_endpoint)
    if current is None:
        return None
    repository.set_push_subscription(current.user_id, subscription)
    return current.user_id


def clear_push_subscription(session: Session, user_id: str) -> None:
    NotificationPreferencesRepository(session).set_push_subscription(user_id, None)
