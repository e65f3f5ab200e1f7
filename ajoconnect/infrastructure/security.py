"""Security helpers for bearer token generation and validation."""

from datetime import datetime, timedelta, timezone
import hmac

from jose import JWTError, jwt

from ajoconnect.config import get_settings

_ALGORITHM = "HS256"


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode(
        {"sub": user_id, "exp": expire}, settings.secret_key, algorithm=_ALGORITHM
    )


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def is_valid_service_key(candidate: str | None) -> bool:
    """Compare ``candidate`` with the configured functions key in constant time."""

    expected = get_settings().functions_api_key
    if not expected:
        return True
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode(), expected.encode())
