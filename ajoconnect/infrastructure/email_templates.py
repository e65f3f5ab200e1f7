"""HTML templates for notification emails."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from ajoconnect.config import get_settings


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    heading: str
    accent: str
    action_label: str
    action_path: str


_GREEN = "#10B981"

TEMPLATES: dict[str, EmailTemplate] = {
    "group_invite": EmailTemplate(
        subject="You've been invited to join a group on {app}",
        heading="Group Invitation",
        accent=_GREEN,
        action_label="View Invitation",
        action_path="/dashboard/groups",
    ),
    "contribution_reminder": EmailTemplate(
        subject="Contribution Reminder - {app}",
        heading="Contribution Reminder",
        accent="#F59E0B",
        action_label="View Groups",
        action_path="/dashboard/groups",
    ),
    "payment_success": EmailTemplate(
        subject="Payment Successful - {app}",
        heading="Payment Successful",
        accent=_GREEN,
        action_label="View Transactions",
        action_path="/dashboard/transactions",
    ),
    "payout_received": EmailTemplate(
        subject="You've Received a Payout! - {app}",
        heading="\U0001F389 Payout Received!",
        accent=_GREEN,
        action_label="View Wallet",
        action_path="/dashboard/wallet",
    ),
    "referral_bonus": EmailTemplate(
        subject="Referral Bonus Earned! - {app}",
        heading="\U0001F381 Referral Bonus!",
        accent="#8B5CF6",
        action_label="View Wallet",
        action_path="/dashboard/wallet",
    ),
}

DEFAULT_TEMPLATE = EmailTemplate(
    subject="{title} - {app}",
    heading="{title}",
    accent=_GREEN,
    action_label="Go to Dashboard",
    action_path="/dashboard",
)


def render_notification_email(
    notification_type: str,
    *,
    title: str,
    message: str,
    user_name: str,
) -> tuple[str, str]:
    """Return ``(subject, html)`` for a notification email."""

    settings = get_settings()
    template = TEMPLATES.get(notification_type, DEFAULT_TEMPLATE)
    app_name = settings.app_name
    subject = template.subject.format(app=app_name, title=title)
    heading = template.heading.format(title=escape(title))
    action_url = settings.app_origin.rstrip("/") + template.action_path

    html_content = (
        '<div style="font-family: sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<h1 style="color: {template.accent};">{heading}</h1>'
        f"<p>Hi {escape(user_name)},</p>"
        f"<p>{escape(message)}</p>"
        '<p style="margin-top: 24px;">'
        f'<a href="{escape(action_url, quote=True)}" '
        f'style="background: {_GREEN}; color: white; padding: 12px 24px; '
        'text-decoration: none; border-radius: 8px;">'
        f"{template.action_label}</a></p>"
        '<p style="color: #6B7280; margin-top: 24px; font-size: 14px;">'
        f"The {escape(app_name)} Team</p>"
        "</div>"
    )
    return subject, html_content


__all__ = ["DEFAULT_TEMPLATE", "TEMPLATES", "render_notification_email"]
