"""Web Push delivery backed by ``pywebpush``."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Protocol

import requests
from pywebpush import WebPushException, webpush

from ajoconnect.config import Settings
from ajoconnect.domain.entities import InvalidPushSubscriptionError, PushSubscription

logger = logging.getLogger(__name__)


class PushDeliveryError(RuntimeError):
    """Raised when the push service rejects a message for a non-expiry reason."""


class PushSender(Protocol):
    def send(self, subscription: PushSubscription, payload: dict[str, Any]) -> bool:
        """Deliver ``payload`` to ``subscription``; return ``True`` when accepted."""


@dataclass(frozen=True)
class VapidConfig:
    """Configuration required to sign Web Push requests."""

    public_key: str
    private_key: str
    subject: str


class WebPushSender:
    """Send encrypted payloads to browser push services."""

    def __init__(self, *, vapid_config: VapidConfig, timeout_seconds: float = 10.0) -> None:
        self._vapid_config = vapid_config
        self._timeout_seconds = timeout_seconds

    def send(self, subscription: PushSubscription, payload: dict[str, Any]) -> bool:
        if not subscription.can_receive_payloads():
            raise InvalidPushSubscriptionError("Push subscription has no encryption keys")

        try:
            webpush(
                subscription_info=subscription.to_dict(),
                data=json.dumps(payload),
                vapid_private_key=self._vapid_config.private_key,
                vapid_claims={"sub": self._vapid_config.subject},
                timeout=self._timeout_seconds,
            )
        except WebPushException as exc:
            status_code = _extract_status_code(exc)
            if status_code in {HTTPStatus.GONE, HTTPStatus.NOT_FOUND}:
                raise InvalidPushSubscriptionError(
                    f"Push subscription is no longer valid (status={status_code})"
                ) from exc
            raise PushDeliveryError(
                f"Push delivery failed (status={status_code or 'unknown'})"
            ) from exc
        except requests.RequestException as exc:
            raise PushDeliveryError(f"Push service unreachable: {exc}") from exc
        return True


class NullPushSender:
    """Push sender used when VAPID keys are not configured."""

    def send(self, subscription: PushSubscription, payload: dict[str, Any]) -> bool:
        logger.info("Push delivery not configured; skipping push to %s", subscription.endpoint)
        return False


def build_push_sender(settings: Settings) -> PushSender:
    """Return a sender matching the configured VAPID credentials."""

    if not settings.push_delivery_configured():
        return NullPushSender()
    return WebPushSender(
        vapid_config=VapidConfig(
            public_key=settings.vapid_public_key or "",
            private_key=settings.vapid_private_key or "",
            subject=settings.vapid_subject or "",
        ),
        timeout_seconds=settings.functions_timeout_seconds,
    )


def _extract_status_code(exc: WebPushException) -> int | None:
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


__all__ = [
    "NullPushSender",
    "PushDeliveryError",
    "PushSender",
    "VapidConfig",
    "WebPushSender",
    "build_push_sender",
]
