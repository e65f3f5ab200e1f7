"""Background worker turning push events into system notifications."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable
from urllib.parse import urlsplit

import httpx

from ajoconnect.config import Settings
from ajoconnect.domain.entities import PushPayloadError, PushSubscription

from .config import WorkerConfig
from .events import (
    ExtendableEvent,
    NotificationClickEvent,
    PushEvent,
    PushSubscriptionChangeEvent,
)
from .payload import build_notification_options, parse_push_payload, resolve_title
from .platform import Clients, NotificationRegistration, PushManager, WindowClient

logger = logging.getLogger(__name__)

PUSH = "push"
NOTIFICATION_CLICK = "notificationclick"
PUSH_SUBSCRIPTION_CHANGE = "pushsubscriptionchange"


def _origin(url: str) -> tuple[str, str]:
    parts = urlsplit(url)
    return parts.scheme.lower(), parts.netloc.lower()


class PushDeliveryWorker:
    """Handle ``push``, ``notificationclick`` and ``pushsubscriptionchange``.

    The worker keeps no state between events. Each handler returns right
    away after registering its asynchronous work with ``event.wait_until``;
    the host must await ``event.settle()`` (``dispatch_event`` does) before
    the work is considered done. ``http_client`` must carry the application
    origin as its ``base_url``. It need not carry user credentials: a
    renewal includes the previous endpoint as ``oldEndpoint`` and the server
    matches it to the subscribed user.
    """

    def __init__(
        self,
        *,
        config: WorkerConfig,
        registration: NotificationRegistration,
        clients: Clients,
        push_manager: PushManager,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._config = config
        self._registration = registration
        self._clients = clients
        self._push_manager = push_manager
        self._http = http_client
        self._listeners: dict[str, Callable[[Any], None]] = {
            PUSH: self.handle_push,
            NOTIFICATION_CLICK: self.handle_notification_click,
            PUSH_SUBSCRIPTION_CHANGE: self.handle_subscription_change,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        registration: NotificationRegistration,
        clients: Clients,
        push_manager: PushManager,
        http_client: httpx.AsyncClient,
    ) -> "PushDeliveryWorker":
        return cls(
            config=WorkerConfig.from_settings(settings),
            registration=registration,
            clients=clients,
            push_manager=push_manager,
            http_client=http_client,
        )

    async def dispatch_event(self, event_type: str, event: ExtendableEvent) -> list[Any]:
        """Run the listener for ``event_type`` and wait for its extensions."""

        listener = self._listeners.get(event_type)
        if listener is None:
            raise ValueError(f"Unsupported event type: {event_type}")
        listener(event)
        return await event.settle()

    def handle_push(self, event: PushEvent) -> None:
        # Payload-less pushes are wake-up signals.
        if event.data is None:
            return

        try:
            payload = parse_push_payload(event.data)
        except PushPayloadError as exc:
            logger.error("Error showing notification: %s", exc)
            return

        options = build_notification_options(payload, self._config)
        event.wait_until(
            self._registration.show_notification(resolve_title(payload, self._config), options)
        )

    def handle_notification_click(self, event: NotificationClickEvent) -> None:
        event.notification.close()

        data = event.notification.data
        url = data.get("url") if isinstance(data, Mapping) else None
        event.wait_until(self._focus_or_open(url or self._config.default_url))

    def handle_subscription_change(self, event: PushSubscriptionChangeEvent) -> None:
        event.wait_until(self._renew_subscription(event.old_subscription))

    async def _focus_or_open(self, url: str) -> WindowClient | None:
        window_clients = await self._clients.match_all(
            type="window", include_uncontrolled=True
        )
        app_origin = _origin(self._config.origin)
        # First matching window wins.
        for client in window_clients:
            if _origin(client.url) == app_origin and callable(getattr(client, "focus", None)):
                await client.navigate(url)
                return await client.focus()
        return await self._clients.open_window(url)

    async def _renew_subscription(
        self, old_subscription: PushSubscription | None
    ) -> httpx.Response:
        subscription = await self._push_manager.subscribe(
            user_visible_only=True,
            application_server_key=self._config.application_server_key,
        )
        body = subscription.to_dict()
        if old_subscription is not None:
            body["oldEndpoint"] = old_subscription.endpoint
        response = await self._http.post(
            self._config.subscription_update_path,
            json=body,
            headers={"Content-Type": "application/json"},
        )
        if not response.is_success:
            logger.warning(
                "Push subscription update answered with status %s", response.status_code
            )
        return response


__all__ = [
    "NOTIFICATION_CLICK",
    "PUSH",
    "PUSH_SUBSCRIPTION_CHANGE",
    "PushDeliveryWorker",
]
