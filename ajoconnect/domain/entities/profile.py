"""Domain entity representing a user profile."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Profile:
    """Contact details used when addressing a user."""

    id: str | None
    user_id: str
    email: str
    full_name: str
    username: str | None = None
    created_at: datetime | None = None

    def display_name(self) -> str:
        return self.full_name or "there"
