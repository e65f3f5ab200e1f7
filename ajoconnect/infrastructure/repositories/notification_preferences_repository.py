"""Persistence helpers for notification preferences."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.orm import Session

from ajoconnect.domain.entities import PREFERENCE_FLAGS, NotificationPreferences
from ajoconnect.infrastructure.models import NotificationPreferencesModel
from ajoconnect.utils import ensure_app_timezone


class NotificationPreferencesRepository:
    """Read and update :class:`NotificationPreferences` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, user_id: str) -> NotificationPreferences | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model is not None else None

    def get_or_create(self, user_id: str) -> NotificationPreferences:
        """Return the row for ``user_id``, inserting the defaults on first use."""

        model = self._get_model(user_id)
        if model is None:
            model = NotificationPreferencesModel(user_id=user_id)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update_flags(
        self, user_id: str, updates: Mapping[str, bool]
    ) -> NotificationPreferences:
        unknown = set(updates) - set(PREFERENCE_FLAGS)
        if unknown:
            raise ValueError(f"Unknown preference flags: {', '.join(sorted(unknown))}")
        self.get_or_create(user_id)
        model = self._get_model(user_id)
        for name, value in updates.items():
            setattr(model, name, bool(value))
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_push_subscription(
        self, user_id: str, subscription: Mapping[str, Any] | None
    ) -> NotificationPreferences:
        self.get_or_create(user_id)
        model = self._get_model(user_id)
        if subscription is None:
            model.push_subscription = None
            model.push_endpoint = None
        else:
            model.push_subscription = dict(subscription)
            model.push_endpoint = subscription.get("endpoint")
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_by_push_endpoint(self, endpoint: str) -> NotificationPreferences | None:
        """Return the preferences row currently subscribed at ``endpoint``."""

        model = (
            self.session.query(NotificationPreferencesModel)
            .filter(NotificationPreferencesModel.push_endpoint == endpoint)
            .first()
        )
        return self._to_entity(model) if model is not None else None

    def _get_model(self, user_id: str) -> NotificationPreferencesModel | None:
        return (
            self.session.query(NotificationPreferencesModel)
            .filter(NotificationPreferencesModel.user_id == user_id)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: NotificationPreferencesModel) -> NotificationPreferences:
        return NotificationPreferences(
            id=model.id,
            user_id=model.user_id,
            email_enabled=bool(model.email_enabled),
            push_enabled=bool(model.push_enabled),
            contribution_reminders=bool(model.contribution_reminders),
            group_updates=bool(model.group_updates),
            payment_alerts=bool(model.payment_alerts),
            push_subscription=model.push_subscription,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationPreferencesRepository"]
