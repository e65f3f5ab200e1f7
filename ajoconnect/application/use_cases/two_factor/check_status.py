"""Use case reporting whether a user has two-factor authentication on."""

import logging

from sqlalchemy.orm import Session

from ajoconnect.infrastructure.repositories import TwoFactorRepository

logger = logging.getLogger(__name__)


def is_two_factor_enabled(session: Session, user_id: str) -> bool:
    """Return the enrolment flag for ``user_id``; users without a row are off."""

    logger.info("Checking 2FA status for user %s", user_id)
    enrolment = TwoFactorRepository(session).get_for_user(user_id)
    is_enabled = bool(enrolment and enrolment.is_enabled)
    logger.info(
        "2FA status for user %s: %s", user_id, "enabled" if is_enabled else "disabled"
    )
    return is_enabled
