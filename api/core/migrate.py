"""
Schema bootstrap.

Run once against a fresh database:

    python -m core.migrate

Statements are idempotent, so running it again is harmless.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from core import db
from core.middleware import configure_logging

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        email VARCHAR(255) NOT NULL UNIQUE,
        password VARCHAR(255) NOT NULL,
        first_name VARCHAR(100) NOT NULL,
        last_name VARCHAR(100) NOT NULL,
        is_active BOOLEAN DEFAULT true,
        created_at TIMESTAMPTZ DEFAULT now(),
        updated_at TIMESTAMPTZ DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS posts (
        id SERIAL PRIMARY KEY,
        title VARCHAR(255) NOT NULL,
        content TEXT,
        author_id INTEGER NOT NULL REFERENCES users (id),
        is_published BOOLEAN DEFAULT false,
        created_at TIMESTAMPTZ DEFAULT now(),
        updated_at TIMESTAMPTZ DEFAULT now()
    )
    """,
    "CREATE INDEX IF NOT EXISTS posts_author_id_idx ON posts (author_id)",
    "CREATE INDEX IF NOT EXISTS posts_created_at_idx ON posts (created_at DESC)",
)


async def apply_schema() -> None:
    async with db.pool().acquire() as conn:
        async with conn.transaction():
            for statement in SCHEMA_STATEMENTS:
                await conn.execute(statement)


async def _run() -> None:
    await db.init_pool()
    try:
        logger.info("migration_started statements=%s", len(SCHEMA_STATEMENTS))
        await apply_schema()
        logger.info("migration_completed")
    finally:
        await db.close_pool()


def main() -> int:
    configure_logging()
    try:
        asyncio.run(_run())
    except Exception:
        logger.exception("migration_failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
