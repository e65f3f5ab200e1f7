"""Domain entity describing a user's two-factor authentication setup."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserTwoFactor:
    """TOTP enrolment row for a user."""

    id: str | None
    user_id: str
    totp_secret: str
    is_enabled: bool = False
    backup_codes: list[str] | None = None
    created_at: datetime | None = None
