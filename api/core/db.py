"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI opens it in the app lifespan
and closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from core import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


def _normalize_database_url(url: str) -> str:
    parts = urlsplit(url)
    # SQLAlchemy-style driver suffixes are common in shared .env files.
    scheme = parts.scheme.split("+", 1)[0]
    query = parts.query
    if query:
        params = [(k, v) for (k, v) in parse_qsl(query, keep_blank_values=True) if k != "sslmode"]
        query = urlencode(params)
    return urlunsplit((scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _normalize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=1,
        max_size=config.db_pool_max_size(),
        command_timeout=30,
    )
    logger.info("db_pool_opened max_size=%s", _pool.get_max_size())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [dict(r) for r in rows]

