"""Caller-facing helper that requests delivery of a notification."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ajoconnect.domain.entities import DispatchResult, NotificationRequest, NotificationType
from ajoconnect.infrastructure.functions import FunctionsClient

logger = logging.getLogger(__name__)

SEND_NOTIFICATION_FUNCTION = "send-notification"


async def send_notification(
    *,
    user_id: str,
    notification_type: NotificationType | str,
    title: str,
    message: str,
    data: Mapping[str, Any] | None = None,
    send_email: bool = True,
    send_push: bool = True,
    client: FunctionsClient | None = None,
) -> DispatchResult:
    """Ask the delivery function to notify ``user_id`` by email and/or push.

    The coroutine always resolves. Errors reported by the function and any
    exception raised on the way (unknown type, unserializable ``data``,
    network failure) come back as ``DispatchResult(success=False, error=...)``.
    A successful result only means the request was accepted; the function's
    answer (``email_sent``, ``push_sent``) is carried in ``details``.
    """

    try:
        request = NotificationRequest(
            user_id=user_id,
            type=NotificationType(notification_type),
            title=title,
            message=message,
            data=dict(data or {}),
            send_email=send_email,
            send_push=send_push,
        )
        functions = client or FunctionsClient.from_settings()
        response = await functions.invoke(SEND_NOTIFICATION_FUNCTION, request.to_payload())
    except Exception as exc:
        logger.error("Error sending notification: %s", exc)
        return DispatchResult(success=False, error=str(exc) or "Unknown error")

    if response.error is not None:
        logger.error("Error sending notification: %s", response.error.message)
        return DispatchResult(success=False, error=response.error.message)

    details = response.data if isinstance(response.data, dict) else {}
    return DispatchResult(success=True, details=details)


__all__ = ["SEND_NOTIFICATION_FUNCTION", "send_notification"]
