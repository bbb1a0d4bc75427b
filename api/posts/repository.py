"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

_POST_COLUMNS = "id, title, content, author_id, is_published, created_at, updated_at"

# Columns a caller may change through update_post.
UPDATABLE_COLUMNS = ("title", "content", "is_published")

_POST_WITH_AUTHOR = """
    SELECT
      p.id,
      p.title,
      p.content,
      p.is_published,
      p.created_at,
      p.updated_at,
      u.id AS author_user_id,
      u.first_name AS author_first_name,
      u.last_name AS author_last_name,
      u.email AS author_email
    FROM posts p
    LEFT JOIN users u ON u.id = p.author_id
"""


async def list_posts(*, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        _POST_WITH_AUTHOR
        + """
        ORDER BY p.created_at DESC, p.id DESC
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_post_with_author(post_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        _POST_WITH_AUTHOR
        + """
        WHERE p.id = $1
        LIMIT 1
        """,
        post_id,
    )


async def list_posts_by_author(author_id: int, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, content, is_published, created_at, updated_at
        FROM posts
        WHERE author_id = $1
        ORDER BY created_at DESC, id DESC
        LIMIT $2
        OFFSET $3
        """,
        author_id,
        limit,
        offset,
    )


async def get_post(post_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_POST_COLUMNS}
        FROM posts
        WHERE id = $1
        """,
        post_id,
    )


async def create_post(
    *,
    author_id: int,
    title: str,
    content: str | None,
    is_published: bool,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO posts (title, content, author_id, is_published)
        VALUES ($1, $2, $3, $4)
        RETURNING {_POST_COLUMNS}
        """,
        title,
        content,
        author_id,
        is_published,
    )
    if row is None:
        raise RuntimeError("Failed to create post.")
    return row


async def update_post(post_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply `changes` (column -> value) and bump updated_at.
    Returns the updated row, or None when the post no longer exists.
    """
    unknown = set(changes) - set(UPDATABLE_COLUMNS)
    if unknown:
        raise ValueError(f"Cannot update columns: {sorted(unknown)}")

    assignments = []
    args: list[Any] = [post_id]
    for column in UPDATABLE_COLUMNS:
        if column in changes:
            args.append(changes[column])
            assignments.append(f"{column} = ${len(args)}")
    assignments.append("updated_at = now()")

    return await db.fetch_one(
        f"""
        UPDATE posts
        SET {", ".join(assignments)}
        WHERE id = $1
        RETURNING {_POST_COLUMNS}
        """,
        *args,
    )


async def delete_post(post_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM posts
        WHERE id = $1
        RETURNING id
        """,
        post_id,
    )
    return row is not None
