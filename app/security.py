"""
Password hashing and access token helpers.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from app.config import Settings
from app.exceptions import ServiceValidationError, UnauthorizedError


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str, rounds: int = 10) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ServiceValidationError("Password is empty.", details={"field": "password"})
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(settings: Settings, *, user_id: int) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    payload = {
        "sub": str(user_id),
        "userId": user_id,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise UnauthorizedError("Access token is empty.")

    try:
        payload = jwt.decode(
            raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedError("Invalid access token.") from exc

    return payload


def user_id_from_claims(claims: dict[str, Any]) -> int:
    raw = claims.get("sub", claims.get("userId"))
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise UnauthorizedError("Token does not identify a user.") from exc


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of a ``Bearer <token>`` header, or None when absent or malformed."""
    raw = (authorization or "").strip()
    if not raw:
        return None

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token
