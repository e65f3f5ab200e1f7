"""SQLAlchemy model for two-factor enrolments."""

from sqlalchemy import Boolean, Column, DateTime, JSON, String

from ajoconnect.infrastructure.database import Base

from ._columns import new_uuid, now_naive


class UserTwoFactorModel(Base):
    """Database representation of a TOTP enrolment."""

    __tablename__ = "user_two_factor"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    totp_secret = Column(String(64), nullable=False)
    is_enabled = Column(Boolean, nullable=False, default=False)
    backup_codes = Column(JSON, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_naive)


__all__ = ["UserTwoFactorModel"]
