"""
Process configuration read from environment variables.

Values are read at call time so tests (and a restarted worker) pick up
changes without re-importing modules.
"""

from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

DEV_JWT_SECRET = "dev-change-this-secret"
DEFAULT_JWT_EXPIRES_IN = "7d"

_DURATION_RE = re.compile(r"^(\d+)\s*([smhd]?)$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def app_env() -> str:
    return _env_str("APP_ENV", "development").lower()


def is_production() -> bool:
    return app_env() == "production"


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", 3000)


def log_level() -> str:
    default = "INFO" if is_production() else "DEBUG"
    return _env_str("LOG_LEVEL", default).upper()


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGIN", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def jwt_secret() -> str:
    secret = os.environ.get("JWT_SECRET", "").strip()
    if secret:
        return secret
    if is_production():
        raise RuntimeError("JWT_SECRET is not set.")
    return DEV_JWT_SECRET


def jwt_algorithm() -> str:
    return _env_str("JWT_ALG", "HS256")


def parse_duration_s(raw: str) -> int | None:
    """
    Parse "3600", "45s", "30m", "12h" or "7d" into seconds.
    """
    match = _DURATION_RE.match((raw or "").strip().lower())
    if match is None:
        return None
    amount, unit = match.groups()
    return int(amount) * _DURATION_UNITS[unit]


def jwt_expires_in_s() -> int:
    raw = _env_str("JWT_EXPIRES_IN", DEFAULT_JWT_EXPIRES_IN)
    seconds = parse_duration_s(raw)
    if seconds is None or seconds <= 0:
        logger.warning("invalid_jwt_expires_in value=%r fallback=%s", raw, DEFAULT_JWT_EXPIRES_IN)
        return parse_duration_s(DEFAULT_JWT_EXPIRES_IN) or 0
    return seconds


def bcrypt_rounds() -> int:
    return _env_int("BCRYPT_ROUNDS", 12)


def db_pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 10))
