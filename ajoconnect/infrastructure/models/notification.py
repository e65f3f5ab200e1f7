"""SQLAlchemy model for persisted in-app notifications."""

from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text

from ajoconnect.infrastructure.database import Base

from ._columns import new_uuid, now_naive


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    data = Column(JSON, nullable=True, default=dict)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_naive)


__all__ = ["NotificationModel"]
