"""Display and routing defaults used by the push worker."""

from __future__ import annotations

from dataclasses import dataclass

from ajoconnect.config import Settings

DEFAULT_VIBRATION: tuple[int, ...] = (100, 50, 100)


@dataclass(frozen=True)
class WorkerConfig:
    origin: str
    app_name: str = "AjoConnect"
    default_url: str = "/dashboard"
    default_body: str = "You have a new notification"
    icon: str = "/favicon.ico"
    badge: str = "/favicon.ico"
    vibrate: tuple[int, ...] = DEFAULT_VIBRATION
    default_tag: str = "default"
    subscription_update_path: str = "/api/update-push-subscription"
    application_server_key: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "WorkerConfig":
        return cls(
            origin=settings.app_origin,
            app_name=settings.app_name,
            default_url=settings.default_notification_url,
            icon=settings.notification_icon,
            badge=settings.notification_badge,
            default_tag=settings.default_notification_tag,
            subscription_update_path=settings.push_subscription_update_path,
            application_server_key=settings.vapid_public_key,
        )


__all__ = ["DEFAULT_VIBRATION", "WorkerConfig"]
