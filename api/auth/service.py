"""
Auth business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _duplicate_email() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="User with this email already exists",
    )


def _user_payload(model: type[schemas.UserSummary], user_row: dict) -> dict:
    return model.model_validate(user_row).to_json()


async def register(payload: schemas.RegisterRequest) -> dict:
    existing = await repository.get_user_by_email(payload.email)
    if existing is not None:
        raise _duplicate_email()

    password_hash = security.hash_password(payload.password)
    try:
        user_row = await repository.create_user(
            email=payload.email,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
    except asyncpg.UniqueViolationError as exc:
        # Lost a race with a concurrent registration for the same email.
        raise _duplicate_email() from exc

    user_id = int(user_row["id"])
    logger.info("user_registered user_id=%s", user_id)
    return {
        "user": _user_payload(schemas.RegisteredUser, user_row),
        "token": security.build_access_token(user_id=user_id),
    }


async def login(payload: schemas.LoginRequest) -> dict:
    user_row = await repository.get_user_by_email(payload.email)
    if user_row is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    is_valid = security.verify_password(payload.password, str(user_row.get("password") or ""))
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if user_row.get("is_active") is False:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User is inactive")

    user_id = int(user_row["id"])
    logger.info("user_logged_in user_id=%s", user_id)
    return {
        "user": _user_payload(schemas.UserResponse, user_row),
        "token": security.build_access_token(user_id=user_id),
    }


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
        user_id = security.token_user_id(payload)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        ) from exc

    user_row = await repository.get_user_by_id(user_id)
    if user_row is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    if user_row.get("is_active") is False:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User is inactive")
    return user_row


def profile(user_row: dict) -> dict:
    return {"user": _user_payload(schemas.UserSummary, user_row)}
