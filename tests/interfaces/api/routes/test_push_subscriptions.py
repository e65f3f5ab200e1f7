"""Tests for push subscription registration and notification preferences."""

from __future__ import annotations

from ajoconnect.infrastructure.repositories import NotificationPreferencesRepository

SUBSCRIPTION = {
    "endpoint": "https://push.example.test/send/xyz",
    "expirationTime": None,
    "keys": {"p256dh": "p256dh-key", "auth": "auth-secret"},
}


def test_subscription_is_stored_for_caller(client, db_session, auth_headers):
    response = client.post(
        "/api/update-push-subscription", json=SUBSCRIPTION, headers=auth_headers("user-1")
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "endpoint": SUBSCRIPTION["endpoint"]}
    preferences = NotificationPreferencesRepository(db_session).get_for_user("user-1")
    assert preferences.push_subscription == SUBSCRIPTION
    assert preferences.push_enabled is True


def test_subscription_without_endpoint_is_rejected(client, auth_headers):
    response = client.post(
        "/api/update-push-subscription",
        json={"keys": {"p256dh": "x", "auth": "y"}},
        headers=auth_headers("user-1"),
    )

    assert response.status_code == 400


def test_subscription_requires_authentication(client):
    assert client.post("/api/update-push-subscription", json=SUBSCRIPTION).status_code == 401
    assert (
        client.post(
            "/api/update-push-subscription",
            json=SUBSCRIPTION,
            headers={"Authorization": "Bearer not-a-token"},
        ).status_code
        == 401
    )


def test_unsubscribe_clears_subscription(client, auth_headers):
    headers = auth_headers("user-1")
    client.post("/api/update-push-subscription", json=SUBSCRIPTION, headers=headers)

    response = client.delete("/api/update-push-subscription", headers=headers)

    assert response.status_code == 204
    assert client.get("/notification-preferences", headers=headers).json()["push_subscribed"] is False


def test_preferences_default_and_partial_update(client, auth_headers):
    headers = auth_headers("user-1")

    initial = client.get("/notification-preferences", headers=headers)
    assert initial.status_code == 200
    assert initial.json() == {
        "user_id": "user-1",
        "email_enabled": True,
        "push_enabled": True,
        "contribution_reminders": True,
        "group_updates": True,
        "payment_alerts": True,
        "push_subscribed": False,
    }

    updated = client.patch(
        "/notification-preferences",
        json={"email_enabled": False, "group_updates": False},
        headers=headers,
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["email_enabled"] is False
    assert body["group_updates"] is False
    assert body["push_enabled"] is True
    assert body["payment_alerts"] is True


def test_renewal_without_token_uses_previous_endpoint(client, db_session):
    repository = NotificationPreferencesRepository(db_session)
    repository.set_push_subscription("user-1", SUBSCRIPTION)
    renewed = {**SUBSCRIPTION, "endpoint": "https://push.example.test/send/renewed"}

    response = client.post(
        "/api/update-push-subscription",
        json={**renewed, "oldEndpoint": SUBSCRIPTION["endpoint"]},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "endpoint": renewed["endpoint"]}
    assert repository.get_for_user("user-1").push_subscription == renewed


def test_renewal_for_unknown_previous_endpoint_is_rejected(client):
    response = client.post(
        "/api/update-push-subscription",
        json={**SUBSCRIPTION, "oldEndpoint": "https://push.example.test/send/unknown"},
    )

    assert response.status_code == 401
