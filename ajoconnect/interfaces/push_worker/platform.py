"""Ports implemented by the platform hosting the push worker."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from ajoconnect.domain.entities import NotificationOptions, PushSubscription


class DisplayedNotification(Protocol):
    title: str

    @property
    def data(self) -> Any: ...

    def close(self) -> None: ...


class NotificationRegistration(Protocol):
    async def show_notification(self, title: str, options: NotificationOptions) -> None: ...


class WindowClient(Protocol):
    url: str

    async def navigate(self, url: str) -> "WindowClient | None": ...

    async def focus(self) -> "WindowClient": ...


class Clients(Protocol):
    async def match_all(
        self, *, type: str = "window", include_uncontrolled: bool = False
    ) -> Sequence[WindowClient]: ...

    async def open_window(self, url: str) -> WindowClient | None: ...


class PushManager(Protocol):
    async def subscribe(
        self, *, user_visible_only: bool, application_server_key: str | None = None
    ) -> PushSubscription: ...


__all__ = [
    "Clients",
    "DisplayedNotification",
    "NotificationRegistration",
    "PushManager",
    "WindowClient",
]
