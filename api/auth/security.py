"""
Auth security helpers: bcrypt password hashing and JWT access tokens.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from core import config


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds())
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, user_id: int) -> str:
    issued_at = now_epoch_s()
    payload = {
        "userId": user_id,
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + config.jwt_expires_in_s(),
    }
    return jwt.encode(payload, config.jwt_secret(), algorithm=config.jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, config.jwt_secret(), algorithms=[config.jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid or expired token.") from exc

    return payload


def token_user_id(payload: dict[str, Any]) -> int:
    user_id = payload.get("userId")
    # bool is an int subclass; reject it explicitly.
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        raise AuthSecurityError("Token carries no user id.")
    return user_id
