"""Persistence helpers for user profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from ajoconnect.domain.entities import Profile
from ajoconnect.infrastructure.models import ProfileModel
from ajoconnect.utils import ensure_app_timezone


class ProfileRepository:
    """Provide lookups for :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_user_id(self, user_id: str) -> Profile | None:
        model = (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == user_id)
            .one_or_none()
        )
        return self._to_entity(model) if model is not None else None

    def create(self, profile: Profile) -> Profile:
        model = ProfileModel(
            user_id=profile.user_id,
            email=profile.email,
            full_name=profile.full_name,
            username=profile.username,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            user_id=model.user_id,
            email=model.email,
            full_name=model.full_name or "",
            username=model.username,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProfileRepository"]
