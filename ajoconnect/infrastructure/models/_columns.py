"""Column helpers shared by the ORM models."""

import uuid

from ajoconnect.utils import ensure_app_naive_datetime, now_in_app_timezone


def new_uuid() -> str:
    return str(uuid.uuid4())


def now_naive():
    return ensure_app_naive_datetime(now_in_app_timezone())
