"""Shared fixtures: a throwaway SQLite database and an API client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "ajoconnect_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_ORIGIN"] = "https://ajo.example.com"
for _name in (
    "FUNCTIONS_API_KEY",
    "SENDGRID_API_KEY",
    "SENDGRID_SENDER",
    "VAPID_PUBLIC_KEY",
    "VAPID_PRIVATE_KEY",
    "VAPID_SUBJECT",
):
    os.environ.pop(_name, None)

from ajoconnect.config import reset_settings_cache  # noqa: E402

reset_settings_cache()


@pytest.fixture(scope="session", autouse=True)
def _remove_test_database():
    yield
    from ajoconnect.infrastructure.database import engine

    engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table before each test."""

    from ajoconnect.infrastructure import database

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield


@pytest.fixture()
def db_session():
    from ajoconnect.infrastructure.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Build bearer headers for an arbitrary user id."""

    from ajoconnect.infrastructure.security import create_access_token

    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest.fixture()
def anyio_backend():
    """The push worker and publisher are built on asyncio."""

    return "asyncio"
