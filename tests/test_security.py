import time

import jwt
import pytest

from auth import security
from core import config


def test_password_hash_round_trip():
    hashed = security.hash_password("secret123")

    assert hashed != "secret123"
    assert security.verify_password("secret123", hashed)
    assert not security.verify_password("secret124", hashed)


def test_verify_password_tolerates_bad_hash():
    assert not security.verify_password("secret123", "not-a-bcrypt-hash")
    assert not security.verify_password("", "")


def test_hash_password_uses_configured_rounds(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")

    assert security.hash_password("secret123").startswith("$2b$05$")


def test_access_token_carries_user_id_and_expiry(monkeypatch):
    monkeypatch.setenv("JWT_EXPIRES_IN", "2h")

    payload = security.decode_access_token(security.build_access_token(user_id=7))

    assert security.token_user_id(payload) == 7
    assert payload["sub"] == "7"
    assert payload["exp"] - payload["iat"] == 7200


def test_expired_token_is_rejected():
    past = int(time.time()) - 60
    token = jwt.encode({"userId": 1, "exp": past}, config.jwt_secret(), algorithm="HS256")

    with pytest.raises(security.AuthSecurityError):
        security.decode_access_token(token)


def test_token_without_user_id_is_rejected():
    payload = security.decode_access_token(
        jwt.encode({"sub": "1"}, config.jwt_secret(), algorithm="HS256")
    )

    with pytest.raises(security.AuthSecurityError):
        security.token_user_id(payload)
