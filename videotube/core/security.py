"""
Security Helpers
================

Password hashing (bcrypt) and signed token issuance/verification (PyJWT).

Access tokens carry the public identity of the user so handlers can
trust them without a lookup; refresh tokens carry only the id and are
also stored on the user document, which makes them single-session.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from videotube.core.config import get_settings
from videotube.domain.models.user import User

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    settings = get_settings()
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash or over-long password
        return False


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def _encode(payload: Dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    settings = get_settings()
    to_encode = payload.copy()
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, secret, algorithm=settings.jwt_algorithm)


def create_access_token(user: User) -> str:
    settings = get_settings()
    return _encode(
        {
            "_id": user.id,
            "email": user.email,
            "username": user.username,
            "fullName": user.full_name,
            "type": ACCESS_TOKEN_TYPE,
        },
        settings.access_token_secret,
        timedelta(minutes=settings.access_token_expiry_minutes),
    )


def create_refresh_token(user: User) -> str:
    settings = get_settings()
    return _encode(
        {"_id": user.id, "type": REFRESH_TOKEN_TYPE},
        settings.refresh_token_secret,
        timedelta(days=settings.refresh_token_expiry_days),
    )


def _decode(token: str, secret: str, token_type: str) -> Optional[Dict[str, Any]]:
    settings = get_settings()
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError:
        return None

    if payload.get("type") != token_type or not payload.get("_id"):
        return None
    return payload


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Payload of a valid, unexpired access token, or None."""
    return _decode(token, get_settings().access_token_secret, ACCESS_TOKEN_TYPE)


def decode_refresh_token(token: str) -> Optional[Dict[str, Any]]:
    """Payload of a valid, unexpired refresh token, or None."""
    return _decode(token, get_settings().refresh_token_secret, REFRESH_TOKEN_TYPE)
