"""In-process implementation of the push worker's platform ports.

Useful to run the worker outside a browser: the tray applies the platform's
tag rules and the client registry records navigation and focus.
"""

from __future__ import annotations

import itertools
import secrets
from collections.abc import Sequence
from urllib.parse import urljoin

from ajoconnect.domain.entities import NotificationOptions, PushSubscription


class ShownNotification:
    """Notification currently visible in a :class:`NotificationTray`."""

    def __init__(
        self, tray: "NotificationTray", title: str, options: NotificationOptions, *, alerted: bool
    ) -> None:
        self._tray = tray
        self.title = title
        self.options = options
        self.alerted = alerted
        self.closed = False

    @property
    def data(self) -> dict:
        return self.options.data

    @property
    def tag(self) -> str:
        return self.options.tag

    def close(self) -> None:
        self.closed = True
        self._tray.discard(self)


class NotificationTray:
    """System notification area keyed by tag.

    Showing a notification whose tag is already visible replaces it in place;
    the user is alerted again only when ``renotify`` is set. A new tag always
    alerts.
    """

    def __init__(self) -> None:
        self._visible: list[ShownNotification] = []
        self.alert_count = 0

    @property
    def notifications(self) -> list[ShownNotification]:
        return list(self._visible)

    async def show_notification(self, title: str, options: NotificationOptions) -> None:
        for index, existing in enumerate(self._visible):
            if existing.tag == options.tag:
                shown = ShownNotification(self, title, options, alerted=options.renotify)
                self._visible[index] = shown
                break
        else:
            shown = ShownNotification(self, title, options, alerted=True)
            self._visible.append(shown)
        if shown.alerted:
            self.alert_count += 1

    def discard(self, notification: ShownNotification) -> None:
        if notification in self._visible:
            self._visible.remove(notification)


class InMemoryWindowClient:
    def __init__(self, url: str, *, controlled: bool = True, focused: bool = False) -> None:
        self.url = url
        self.controlled = controlled
        self.focused = focused
        self.navigations: list[str] = []

    async def navigate(self, url: str) -> "InMemoryWindowClient":
        self.navigations.append(url)
        self.url = urljoin(self.url, url)
        return self

    async def focus(self) -> "InMemoryWindowClient":
        self.focused = True
        return self


class InMemoryClients:
    """Registry of open windows, in enumeration order."""

    def __init__(self, origin: str, windows: Sequence[InMemoryWindowClient] = ()) -> None:
        self.origin = origin
        self.windows = list(windows)
        self.opened: list[InMemoryWindowClient] = []

    async def match_all(
        self, *, type: str = "window", include_uncontrolled: bool = False
    ) -> list[InMemoryWindowClient]:
        if type not in ("window", "all"):
            return []
        return [
            window for window in self.windows if include_uncontrolled or window.controlled
        ]

    async def open_window(self, url: str) -> InMemoryWindowClient:
        window = InMemoryWindowClient(urljoin(self.origin, url), focused=True)
        self.windows.append(window)
        self.opened.append(window)
        return window


class InMemoryPushManager:
    """Issues fresh subscriptions on an endpoint prefix and records each call."""

    def __init__(self, endpoint_prefix: str = "https://push.example.test/send/") -> None:
        self._endpoint_prefix = endpoint_prefix
        self._counter = itertools.count(1)
        self.calls: list[dict[str, object]] = []

    async def subscribe(
        self, *, user_visible_only: bool, application_server_key: str | None = None
    ) -> PushSubscription:
        self.calls.append(
            {
                "user_visible_only": user_visible_only,
                "application_server_key": application_server_key,
            }
        )
        return PushSubscription(
            endpoint=f"{self._endpoint_prefix}{next(self._counter)}",
            p256dh=secrets.token_urlsafe(65),
            auth=secrets.token_urlsafe(16),
        )


__all__ = [
    "InMemoryClients",
    "InMemoryPushManager",
    "InMemoryWindowClient",
    "NotificationTray",
    "ShownNotification",
]
