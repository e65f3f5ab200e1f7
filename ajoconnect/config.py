"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./ajoconnect.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_name: str = Field(default="AjoConnect", min_length=1)
    app_origin: str = Field(
        default="http://localhost:5173",
        description="Origin of the web application that hosts the push worker",
    )
    app_timezone: str = Field(default="Africa/Lagos")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    default_notification_url: str = Field(
        default="/dashboard",
        description="Route opened when a notification carries no target URL",
    )
    notification_icon: str = Field(default="/favicon.ico")
    notification_badge: str = Field(default="/favicon.ico")
    default_notification_tag: str = Field(default="default")
    push_subscription_update_path: str = Field(
        default="/api/update-push-subscription",
        description="Server path receiving renewed push subscriptions",
    )

    functions_base_url: str = Field(
        default="http://localhost:8000/functions",
        description="Base URL of the remote functions (send-notification, check-2fa-status)",
    )
    functions_api_key: str | None = Field(
        default=None,
        description="Shared key presented as a bearer token when invoking remote functions",
    )
    functions_timeout_seconds: float = Field(default=10.0, gt=0)

    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )

    vapid_public_key: str | None = Field(
        default=None,
        description="VAPID application server key handed to push subscriptions",
    )
    vapid_private_key: str | None = Field(
        default=None,
        description="VAPID private key used to sign Web Push requests",
    )
    vapid_subject: str | None = Field(
        default=None,
        description="Contact claim (mailto: or https:) sent with Web Push requests",
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    def push_delivery_configured(self) -> bool:
        """Return ``True`` when every VAPID value needed to sign pushes is set."""

        return bool(
            self.vapid_public_key and self.vapid_private_key and self.vapid_subject
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
