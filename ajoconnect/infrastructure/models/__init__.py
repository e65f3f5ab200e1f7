"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .notification_preferences import NotificationPreferencesModel
from .profile import ProfileModel
from .user_two_factor import UserTwoFactorModel

__all__ = [
    "NotificationModel",
    "NotificationPreferencesModel",
    "ProfileModel",
    "UserTwoFactorModel",
]
