"""Turn untrusted push messages into notification display options."""

from __future__ import annotations

from typing import Any

from ajoconnect.domain.entities import NotificationOptions, PushPayload, PushPayloadError

from .config import WorkerConfig
from .events import PushMessageData


def _optional_text(value: Any) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value) if value else None
    if isinstance(value, str) and value:
        return value
    return None


def parse_push_payload(data: PushMessageData) -> PushPayload:
    """Read a push message as a notification payload.

    Raises :class:`PushPayloadError` when the message is not UTF-8 JSON, nests
    too deeply to decode, or is not a JSON object. Fields of the wrong type
    are ignored.
    """

    try:
        document = data.json()
    except (ValueError, RecursionError) as exc:
        raise PushPayloadError(f"Push payload is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise PushPayloadError(
            f"Push payload must be a JSON object, got {type(document).__name__}"
        )

    extra = document.get("data")
    actions = document.get("actions")
    return PushPayload(
        title=_optional_text(document.get("title")),
        message=_optional_text(document.get("message")),
        body=_optional_text(document.get("body")),
        url=_optional_text(document.get("url")),
        data=dict(extra) if isinstance(extra, dict) else {},
        actions=list(actions) if isinstance(actions, list) else [],
        tag=_optional_text(document.get("tag")),
        renotify=bool(document.get("renotify")),
    )


def resolve_title(payload: PushPayload, config: WorkerConfig) -> str:
    return payload.title or config.app_name


def build_notification_options(
    payload: PushPayload, config: WorkerConfig
) -> NotificationOptions:
    """Apply display defaults to ``payload``.

    ``message`` wins over ``body``. The payload's ``data`` is merged after the
    resolved ``url`` so producers may override it.
    """

    return NotificationOptions(
        body=payload.message or payload.body or config.default_body,
        icon=config.icon,
        badge=config.badge,
        vibrate=config.vibrate,
        data={"url": payload.url or config.default_url, **payload.data},
        actions=list(payload.actions),
        tag=payload.tag or config.default_tag,
        renotify=payload.renotify,
    )


__all__ = ["build_notification_options", "parse_push_payload", "resolve_title"]
