"""Create a user profile and print a bearer token for it."""

from __future__ import annotations

import argparse
import uuid

from sqlalchemy.exc import SQLAlchemyError

from ajoconnect.domain.entities import Profile
from ajoconnect.infrastructure.database import SessionLocal, initialize_database
from ajoconnect.infrastructure.repositories import (
    NotificationPreferencesRepository,
    ProfileRepository,
)
from ajoconnect.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a profile that can receive AjoConnect notifications.",
    )
    parser.add_argument("--email", required=True, help="Address used for notification emails")
    parser.add_argument("--full-name", default="", help="Name used to greet the user")
    parser.add_argument(
        "--user-id",
        default=None,
        help="Identifier of the user (a new UUID is generated when omitted)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    user_id = args.user_id or str(uuid.uuid4())

    initialize_database()

    session = SessionLocal()
    try:
        profile = ProfileRepository(session).create(
            Profile(id=None, user_id=user_id, email=args.email, full_name=args.full_name)
        )
        NotificationPreferencesRepository(session).get_or_create(user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the profile: {exc}") from exc
    finally:
        session.close()

    print(
        "Profile created:\n"
        f"  User ID: {profile.user_id}\n"
        f"  Email: {profile.email}\n"
        f"  Token: {create_access_token(profile.user_id)}"
    )


if __name__ == "__main__":
    main()
