"""SQLAlchemy model for user profiles."""

from sqlalchemy import Column, DateTime, String

from ajoconnect.infrastructure.database import Base

from ._columns import new_uuid, now_naive


class ProfileModel(Base):
    """Database representation of a user profile."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False, default="")
    username = Column(String(50), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_naive)


__all__ = ["ProfileModel"]
