"""Repository implementations for infrastructure layer."""

from .notification_preferences_repository import NotificationPreferencesRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository
from .two_factor_repository import TwoFactorRepository

__all__ = [
    "NotificationPreferencesRepository",
    "NotificationRepository",
    "ProfileRepository",
    "TwoFactorRepository",
]
