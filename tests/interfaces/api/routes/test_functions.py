"""Tests for the check-2fa-status and send-notification functions."""

from __future__ import annotations

from types import SimpleNamespace

from sqlalchemy.exc import OperationalError

from ajoconnect.domain.entities import Profile, UserTwoFactor
from ajoconnect.infrastructure.repositories import (
    NotificationRepository,
    ProfileRepository,
    TwoFactorRepository,
)

CHECK_2FA = "/functions/check-2fa-status"
SEND_NOTIFICATION = "/functions/send-notification"


def _assert_cors(response) -> None:
    assert response.headers["access-control-allow-origin"] == "*"
    assert (
        response.headers["access-control-allow-headers"]
        == "authorization, x-client-info, apikey, content-type"
    )


def test_two_factor_status_defaults_to_disabled(client):
    response = client.post(CHECK_2FA, json={"user_id": "no-such-user"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"isEnabled": False}}
    _assert_cors(response)


def test_two_factor_status_reports_enabled_enrolment(client, db_session):
    TwoFactorRepository(db_session).create(
        UserTwoFactor(id=None, user_id="user-2fa", totp_secret="JBSWY3DPEHPK3PXP", is_enabled=True)
    )

    response = client.post(CHECK_2FA, json={"user_id": "user-2fa"})

    assert response.json() == {"success": True, "data": {"isEnabled": True}}


def test_two_factor_status_requires_user_id(client):
    for kwargs in ({"json": {}}, {"json": {"user_id": ""}}, {}):
        response = client.post(CHECK_2FA, **kwargs)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "User ID is required"}
        _assert_cors(response)


def test_two_factor_status_reports_storage_failure(client, monkeypatch):
    def _fail(session, user_id):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(
        "ajoconnect.interfaces.api.routes.functions.is_two_factor_enabled", _fail
    )

    response = client.post(CHECK_2FA, json={"user_id": "user-1"})

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]
    _assert_cors(response)


def test_preflight_answers_with_empty_body(client):
    for path in (CHECK_2FA, SEND_NOTIFICATION):
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        _assert_cors(response)


def test_send_notification_stores_and_reports_channels(client, db_session):
    ProfileRepository(db_session).create(
        Profile(id=None, user_id="user-1", email="ada@example.com", full_name="Ada Obi")
    )

    response = client.post(
        SEND_NOTIFICATION,
        json={
            "user_id": "user-1",
            "type": "contribution_reminder",
            "title": "Contribution due",
            "message": "Your weekly contribution is due tomorrow",
            "data": {"url": "/groups/g-1"},
        },
    )

    assert response.status_code == 200
    # Neither SendGrid nor VAPID keys are configured in tests.
    assert response.json() == {"success": True, "email_sent": False, "push_sent": False}
    [stored] = NotificationRepository(db_session).list_for_user("user-1")
    assert stored.title == "Contribution due"
    assert stored.data == {"url": "/groups/g-1"}


def test_send_notification_rejects_unknown_type(client):
    response = client.post(
        SEND_NOTIFICATION,
        json={"user_id": "user-1", "type": "birthday", "title": "Hi", "message": "Hello"},
    )

    assert response.status_code == 422


def test_send_notification_reports_storage_failure(client, monkeypatch):
    def _fail(session, request):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(
        "ajoconnect.interfaces.api.routes.functions.deliver_notification", _fail
    )

    response = client.post(
        SEND_NOTIFICATION,
        json={"user_id": "user-1", "type": "payment_success", "title": "t", "message": "m"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to store notification"}


def test_send_notification_requires_configured_service_key(client, monkeypatch):
    monkeypatch.setattr(
        "ajoconnect.infrastructure.security.get_settings",
        lambda: SimpleNamespace(functions_api_key="service-key"),
    )
    body = {"user_id": "user-1", "type": "payment_success", "title": "t", "message": "m"}

    missing = client.post(SEND_NOTIFICATION, json=body)
    wrong = client.post(
        SEND_NOTIFICATION, json=body, headers={"Authorization": "Bearer nope"}
    )
    accepted = client.post(
        SEND_NOTIFICATION, json=body, headers={"Authorization": "Bearer service-key"}
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert accepted.status_code == 200
    assert accepted.json()["success"] is True


def test_two_factor_status_validation_error_keeps_cors_headers(client):
    response = client.post(CHECK_2FA, json={"user_id": ["not", "a", "string"]})

    assert response.status_code == 422
    _assert_cors(response)


def test_two_factor_status_invalid_json_keeps_cors_headers(client):
    response = client.post(
        CHECK_2FA, content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    _assert_cors(response)


def test_rejected_service_key_keeps_cors_headers(client, monkeypatch):
    monkeypatch.setattr(
        "ajoconnect.infrastructure.security.get_settings",
        lambda: SimpleNamespace(functions_api_key="service-key"),
    )

    response = client.post(
        SEND_NOTIFICATION,
        json={"user_id": "user-1", "type": "payment_success", "title": "t", "message": "m"},
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid service key"}
    assert response.headers["www-authenticate"] == "Bearer"
    _assert_cors(response)
