"""Events delivered by the host platform to the push worker."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable

from ajoconnect.domain.entities import PushSubscription

from .platform import DisplayedNotification


class PushMessageData:
    """Raw bytes attached to a push message."""

    def __init__(self, raw: bytes | str) -> None:
        self._raw = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)

    def bytes(self) -> bytes:
        return self._raw

    def text(self) -> str:
        """Decode the message as UTF-8; raises ``ValueError`` on bad bytes."""

        return self._raw.decode("utf-8")

    def json(self) -> Any:
        """Parse the message as JSON; raises ``ValueError`` when malformed."""

        return json.loads(self.text())


class ExtendableEvent:
    """Base event whose lifetime handlers can extend with ``wait_until``.

    The host must await :meth:`settle` before it considers the event handled
    and tears the execution context down.
    """

    def __init__(self) -> None:
        self._extensions: list[asyncio.Future[Any]] = []

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        """Keep the event alive until ``awaitable`` settles.

        Coroutines are scheduled right away, so this must be called while the
        host's event loop is running.
        """

        self._extensions.append(asyncio.ensure_future(awaitable))

    @property
    def extension_count(self) -> int:
        return len(self._extensions)

    async def settle(self) -> list[Any]:
        """Wait for every extension, including ones added while waiting.

        Returns the fulfilled values in registration order and re-raises the
        first failure once all extensions have settled.
        """

        outcomes: list[Any] = []
        while len(outcomes) < len(self._extensions):
            batch = self._extensions[len(outcomes):]
            outcomes.extend(await asyncio.gather(*batch, return_exceptions=True))

        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return outcomes


class PushEvent(ExtendableEvent):
    """A push message arrived; ``data`` is ``None`` for payload-less pushes."""

    def __init__(self, data: PushMessageData | None = None) -> None:
        super().__init__()
        self.data = data

    @classmethod
    def with_payload(cls, raw: bytes | str) -> "PushEvent":
        return cls(PushMessageData(raw))


class NotificationClickEvent(ExtendableEvent):
    """The user clicked a notification shown earlier."""

    def __init__(self, notification: DisplayedNotification, action: str = "") -> None:
        super().__init__()
        self.notification = notification
        self.action = action


class PushSubscriptionChangeEvent(ExtendableEvent):
    """The push service invalidated the current subscription."""

    def __init__(
        self,
        old_subscription: PushSubscription | None = None,
        new_subscription: PushSubscription | None = None,
    ) -> None:
        super().__init__()
        self.old_subscription = old_subscription
        self.new_subscription = new_subscription


__all__ = [
    "ExtendableEvent",
    "NotificationClickEvent",
    "PushEvent",
    "PushMessageData",
    "PushSubscriptionChangeEvent",
]
