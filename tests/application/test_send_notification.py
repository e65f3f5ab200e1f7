"""Tests for the notification dispatch client."""

from __future__ import annotations

import json

import httpx
import pytest

from ajoconnect.application.use_cases import send_notification
from ajoconnect.domain.entities import NotificationType
from ajoconnect.infrastructure.functions import FunctionsClient

pytestmark = pytest.mark.anyio

BASE_URL = "https://functions.example.com/functions"


def _client(handler, *, api_key=None) -> FunctionsClient:
    return FunctionsClient(
        base_url=BASE_URL, api_key=api_key, transport=httpx.MockTransport(handler)
    )


async def test_defaults_request_both_channels():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"success": True, "email_sent": True, "push_sent": False})

    result = await send_notification(
        user_id="u-1",
        notification_type="payment_success",
        title="Payment confirmed",
        message="Your contribution was received",
        client=_client(handler),
    )

    assert result.success is True
    assert result.error is None
    assert result.details == {"success": True, "email_sent": True, "push_sent": False}
    assert result.to_dict() == {"success": True, "email_sent": True, "push_sent": False}

    [request] = captured
    assert str(request.url) == f"{BASE_URL}/send-notification"
    assert json.loads(request.content) == {
        "user_id": "u-1",
        "type": "payment_success",
        "title": "Payment confirmed",
        "message": "Your contribution was received",
        "data": {},
        "send_email": True,
        "send_push": True,
    }
    assert "authorization" not in request.headers


async def test_channel_flags_data_and_api_key_are_forwarded():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"success": True})

    await send_notification(
        user_id="u-2",
        notification_type=NotificationType.GROUP_INVITE,
        title="Invitation",
        message="Join Lagos Savers",
        data={"url": "/groups/g-1"},
        send_email=False,
        client=_client(handler, api_key="service-key"),
    )

    [request] = captured
    body = json.loads(request.content)
    assert body["type"] == "group_invite"
    assert body["data"] == {"url": "/groups/g-1"}
    assert body["send_email"] is False
    assert body["send_push"] is True
    assert request.headers["authorization"] == "Bearer service-key"


async def test_remote_error_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Failed to store notification"})

    result = await send_notification(
        user_id="u-1",
        notification_type="payout_received",
        title="Payout",
        message="Sent",
        client=_client(handler),
    )

    assert result.success is False
    assert result.error == "Failed to store notification"
    assert result.to_dict() == {"success": False, "error": "Failed to store notification"}


async def test_remote_error_without_body_uses_status_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    result = await send_notification(
        user_id="u-1",
        notification_type="payout_received",
        title="Payout",
        message="Sent",
        client=_client(handler),
    )

    assert result.success is False
    assert result.error == "Function send-notification returned status 503"


async def test_transport_failure_never_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await send_notification(
        user_id="u-1",
        notification_type="referral_bonus",
        title="Bonus",
        message="You earned N1,000",
        client=_client(handler),
    )

    assert result.success is False
    assert result.error == "connection refused"


async def test_unknown_type_is_reported_as_failure():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"success": True})

    result = await send_notification(
        user_id="u-1",
        notification_type="birthday",
        title="Hi",
        message="Hello",
        client=_client(handler),
    )

    assert result.success is False
    assert "birthday" in result.error
    assert requests == []
