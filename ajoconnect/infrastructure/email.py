"""Transactional email delivery via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from ajoconnect.config import get_settings
from ajoconnect.infrastructure.email_templates import render_notification_email

logger = logging.getLogger(__name__)


def _describe_sendgrid_body(body: Any) -> str | None:
    """Return a readable summary of a SendGrid error body, if there is one."""

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body
    if not isinstance(body, dict):
        return None

    errors = body.get("errors")
    if isinstance(errors, list):
        messages = [
            str(item["message"])
            for item in errors
            if isinstance(item, dict) and item.get("message")
        ]
        if messages:
            return "; ".join(messages)
    return json.dumps(body)


def _log_failure(status_code: Any, body: Any, exc: Exception | None = None) -> None:
    details = _describe_sendgrid_body(body)
    if status_code and details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid request failed with status %s", status_code)
    elif exc is not None:
        logger.error("Error sending email via SendGrid: %s", exc)
    else:
        logger.error("SendGrid request failed: %s", details)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=(settings.sendgrid_sender, settings.app_name),
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_failure(getattr(exc, "status_code", None), getattr(exc, "body", None), exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_failure(status_code, getattr(response, "body", None))
        return False

    logger.info("Email sent successfully to %s", recipient)
    return True


def send_notification_email(
    *,
    recipient: str,
    user_name: str,
    notification_type: str,
    title: str,
    message: str,
) -> bool:
    """Render the template for ``notification_type`` and send it."""

    subject, html_content = render_notification_email(
        notification_type,
        title=title,
        message=message,
        user_name=user_name,
    )
    return send_email(subject, html_content, recipient)


__all__ = ["send_email", "send_notification_email"]
