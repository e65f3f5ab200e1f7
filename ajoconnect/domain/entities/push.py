"""Domain entities for push payloads, display options and subscriptions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class PushPayloadError(ValueError):
    """Raised when a push message cannot be read as a notification payload."""


class InvalidPushSubscriptionError(ValueError):
    """Raised when a push subscription is malformed, expired or revoked."""


@dataclass(frozen=True)
class PushPayload:
    """Fields read from an untrusted push message.

    Every attribute is optional because the producer is external; defaults are
    applied when the payload is turned into :class:`NotificationOptions`.
    """

    title: str | None = None
    message: str | None = None
    body: str | None = None
    url: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    actions: list[Any] = field(default_factory=list)
    tag: str | None = None
    renotify: bool = False


@dataclass(frozen=True)
class NotificationOptions:
    """Options passed to the platform when showing a system notification."""

    body: str
    icon: str
    badge: str
    vibrate: tuple[int, ...]
    data: dict[str, Any]
    actions: list[Any]
    tag: str
    renotify: bool


@dataclass(frozen=True)
class PushSubscription:
    """Endpoint and keys identifying where the push service delivers messages."""

    endpoint: str
    p256dh: str | None = None
    auth: str | None = None
    expiration_time: int | None = None

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> "PushSubscription":
        """Build a subscription from its browser JSON representation."""

        endpoint = value.get("endpoint")
        if not isinstance(endpoint, str) or not endpoint:
            raise InvalidPushSubscriptionError("Push subscription endpoint is required")
        keys = value.get("keys")
        if not isinstance(keys, Mapping):
            keys = {}
        return cls(
            endpoint=endpoint,
            p256dh=keys.get("p256dh"),
            auth=keys.get("auth"),
            expiration_time=value.get("expirationTime"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the browser ``PushSubscription.toJSON()`` shape."""

        keys = {}
        if self.p256dh is not None:
            keys["p256dh"] = self.p256dh
        if self.auth is not None:
            keys["auth"] = self.auth
        return {
            "endpoint": self.endpoint,
            "expirationTime": self.expiration_time,
            "keys": keys,
        }

    def can_receive_payloads(self) -> bool:
        return bool(self.p256dh and self.auth)


__all__ = [
    "InvalidPushSubscriptionError",
    "NotificationOptions",
    "PushPayload",
    "PushPayloadError",
    "PushSubscription",
]
