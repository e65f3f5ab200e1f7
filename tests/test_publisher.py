"""Tests for realtime publication of stored notifications."""

from __future__ import annotations

import anyio
import pytest

from ajoconnect.domain.entities import Notification
from ajoconnect.infrastructure.notifications import NotificationConnectionManager
from ajoconnect.infrastructure.notifications.publisher import NotificationPublisher

pytestmark = pytest.mark.anyio


class FakeSocket:
    def __init__(self) -> None:
        self.accepted = False
        self.sent: list[dict] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        self.sent.append(message)


def _notification(user_id: str) -> Notification:
    return Notification(
        id="n-1",
        user_id=user_id,
        type="payout_received",
        title="Payout",
        message="Sent",
        data={"amount": 5000},
    )


async def test_dispatch_reaches_every_open_socket_of_the_user():
    manager = NotificationConnectionManager()
    first, second, stranger = FakeSocket(), FakeSocket(), FakeSocket()
    await manager.connect("user-1", first)
    await manager.connect("user-1", second)
    await manager.connect("user-2", stranger)

    NotificationPublisher(manager).dispatch(_notification("user-1"))
    await anyio.sleep(0.01)

    for socket in (first, second):
        [message] = socket.sent
        assert message["type"] == "notification"
        assert message["data"]["id"] == "n-1"
        assert message["data"]["data"] == {"amount": 5000}
        assert message["data"]["created_at"] is None
    assert stranger.sent == []


async def test_dispatch_without_connections_is_a_no_op():
    manager = NotificationConnectionManager()
    socket = FakeSocket()
    await manager.connect("user-1", socket)
    manager.disconnect("user-1", socket)

    NotificationPublisher(manager).dispatch(_notification("user-1"))
    await anyio.sleep(0)

    assert manager.connection_count("user-1") == 0
    assert socket.sent == []
