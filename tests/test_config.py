"""Tests for settings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ajoconnect.config import Settings
from ajoconnect.interfaces.push_worker import WorkerConfig


def test_sendgrid_requires_key_and_sender_together():
    with pytest.raises(ValidationError):
        Settings(secret_key="s", sendgrid_api_key="SG.fake")
    with pytest.raises(ValidationError):
        Settings(secret_key="s", sendgrid_api_key="SG.fake", sendgrid_sender="not-an-address")

    settings = Settings(
        secret_key="s", sendgrid_api_key="SG.fake", sendgrid_sender="noreply@example.com"
    )
    assert settings.sendgrid_sender == "noreply@example.com"


def test_worker_config_follows_settings():
    settings = Settings(
        secret_key="s",
        app_origin="https://ajo.example.com",
        default_notification_url="/home",
        vapid_public_key="public-key",
    )

    config = WorkerConfig.from_settings(settings)

    assert config.origin == "https://ajo.example.com"
    assert config.default_url == "/home"
    assert config.application_server_key == "public-key"
    assert config.subscription_update_path == "/api/update-push-subscription"
