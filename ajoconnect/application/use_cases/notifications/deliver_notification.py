"""Fan a notification request out to the in-app feed, email and push."""

from __future__ import annotations

import logging
from typing import Any, Callable

from sqlalchemy.orm import Session

from ajoconnect.config import get_settings
from ajoconnect.domain.entities import (
    DeliveryReport,
    InvalidPushSubscriptionError,
    Notification,
    NotificationPreferences,
    NotificationRequest,
    Profile,
    PushSubscription,
)
from ajoconnect.infrastructure.email import send_notification_email
from ajoconnect.infrastructure.notifications import dispatch_notification
from ajoconnect.infrastructure.push_sender import PushDeliveryError, PushSender, build_push_sender
from ajoconnect.infrastructure.repositories import (
    NotificationPreferencesRepository,
    NotificationRepository,
    ProfileRepository,
)

logger = logging.getLogger(__name__)

EmailSender = Callable[..., bool]


def deliver_notification(
    session: Session,
    request: NotificationRequest,
    *,
    push_sender: PushSender | None = None,
    email_sender: EmailSender = send_notification_email,
) -> DeliveryReport:
    """Store ``request`` as an in-app notification and deliver it.

    Storing the in-app row is mandatory and its failures propagate. Email and
    push are best effort: they are skipped when the user has no profile or
    muted the channel or category, and their failures are only logged.
    """

    saved = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=request.user_id,
            type=request.type.value,
            title=request.title,
            message=request.message,
            data=dict(request.data),
        )
    )
    dispatch_notification(saved)

    preferences = NotificationPreferencesRepository(session).get_for_user(request.user_id)
    profile = ProfileRepository(session).get_by_user_id(request.user_id)
    if profile is None:
        logger.info("User profile %s not found, skipping email/push", request.user_id)
        return DeliveryReport()

    email_sent = False
    if request.send_email and _email_allowed(preferences, request):
        email_sent = email_sender(
            recipient=profile.email,
            user_name=profile.display_name(),
            notification_type=request.type.value,
            title=request.title,
            message=request.message,
        )

    push_sent = False
    if request.send_push and _push_allowed(preferences, request):
        push_sent = _send_push(
            session,
            preferences,
            request,
            push_sender or build_push_sender(get_settings()),
        )

    return DeliveryReport(email_sent=bool(email_sent), push_sent=push_sent)


def build_push_message(request: NotificationRequest) -> dict[str, Any]:
    """Return the JSON document read by the push worker."""

    message: dict[str, Any] = {
        "title": request.title,
        "message": request.message,
        "data": {"type": request.type.value, **request.data},
    }
    url = request.data.get("url")
    if isinstance(url, str) and url:
        message["url"] = url
    return message


def _email_allowed(
    preferences: NotificationPreferences | None, request: NotificationRequest
) -> bool:
    if preferences is None:
        return True
    return preferences.email_enabled and preferences.allows(request.type)


def _push_allowed(
    preferences: NotificationPreferences | None, request: NotificationRequest
) -> bool:
    return bool(
        preferences is not None
        and preferences.push_enabled
        and preferences.push_subscription
        and preferences.allows(request.type)
    )


def _send_push(
    session: Session,
    preferences: NotificationPreferences,
    request: NotificationRequest,
    push_sender: PushSender,
) -> bool:
    try:
        subscription = PushSubscription.from_mapping(preferences.push_subscription or {})
        return push_sender.send(subscription, build_push_message(request))
    except InvalidPushSubscriptionError as exc:
        logger.info(
            "Clearing push subscription for user %s: %s", request.user_id, exc
        )
        NotificationPreferencesRepository(session).set_push_subscription(
            request.user_id, None
        )
    except PushDeliveryError as exc:
        logger.error("Error sending push notification to %s: %s", request.user_id, exc)
    return False


__all__ = ["build_push_message", "deliver_notification"]
