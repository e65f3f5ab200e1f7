"""SQLAlchemy model for notification preferences."""

from sqlalchemy import Boolean, Column, DateTime, JSON, String

from ajoconnect.infrastructure.database import Base

from ._columns import new_uuid, now_naive


class NotificationPreferencesModel(Base):
    """Database representation of a user's notification switches."""

    __tablename__ = "notification_preferences"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    email_enabled = Column(Boolean, nullable=False, default=True)
    push_enabled = Column(Boolean, nullable=False, default=True)
    contribution_reminders = Column(Boolean, nullable=False, default=True)
    group_updates = Column(Boolean, nullable=False, default=True)
    payment_alerts = Column(Boolean, nullable=False, default=True)
    push_subscription = Column(JSON, nullable=True)
    push_endpoint = Column(String(2048), nullable=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_naive)
    updated_at = Column(DateTime(), nullable=False, default=now_naive, onupdate=now_naive)


__all__ = ["NotificationPreferencesModel"]
