"""Persistence helpers for two-factor enrolments."""

from __future__ import annotations

from sqlalchemy.orm import Session

from ajoconnect.domain.entities import UserTwoFactor
from ajoconnect.infrastructure.models import UserTwoFactorModel
from ajoconnect.utils import ensure_app_timezone


class TwoFactorRepository:
    """Provide access to :class:`UserTwoFactor` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, user_id: str) -> UserTwoFactor | None:
        model = (
            self.session.query(UserTwoFactorModel)
            .filter(UserTwoFactorModel.user_id == user_id)
            .one_or_none()
        )
        return self._to_entity(model) if model is not None else None

    def create(self, enrolment: UserTwoFactor) -> UserTwoFactor:
        model = UserTwoFactorModel(
            user_id=enrolment.user_id,
            totp_secret=enrolment.totp_secret,
            is_enabled=enrolment.is_enabled,
            backup_codes=enrolment.backup_codes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserTwoFactorModel) -> UserTwoFactor:
        return UserTwoFactor(
            id=model.id,
            user_id=model.user_id,
            totp_secret=model.totp_secret,
            is_enabled=bool(model.is_enabled),
            backup_codes=model.backup_codes,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["TwoFactorRepository"]
