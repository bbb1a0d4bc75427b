"""
Post business logic.

Reads are public. Updates and deletes are owner-gated: the stored
`author_id` must equal the caller's id.

Pagination is offset based and `hasMore` is inferred from a full page
rather than a count query, so the last page can report `hasMore=true`
when the total is an exact multiple of `limit`.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Ids are int4 SERIAL columns; page is capped so the OFFSET stays far inside bigint.
MAX_ID = 2_147_483_647
MAX_PAGE = 1_000_000


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def _pagination(page: int, limit: int, returned: int) -> dict:
    return schemas.Pagination(page=page, limit=limit, has_more=returned == limit).to_json()


def _post_with_author(row: dict) -> dict:
    author = None
    if row.get("author_user_id") is not None:
        author = schemas.PostAuthor(
            id=int(row["author_user_id"]),
            first_name=str(row["author_first_name"]),
            last_name=str(row["author_last_name"]),
            email=str(row["author_email"]),
        )
    post = schemas.PostWithAuthor.model_validate({**row, "author": author})
    return post.to_json()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


async def _owned_post(post_id: int, *, user_id: int, action: str) -> dict:
    existing = await repository.get_post(post_id)
    if existing is None:
        raise _not_found()
    if int(existing["author_id"]) != user_id:
        logger.info("post_%s_forbidden post_id=%s user_id=%s", action, post_id, user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} this post",
        )
    return existing


async def list_posts(*, page: int, limit: int) -> dict:
    rows = await repository.list_posts(limit=limit, offset=page_offset(page, limit))
    return {
        "posts": [_post_with_author(row) for row in rows],
        "pagination": _pagination(page, limit, len(rows)),
    }


async def get_post(post_id: int) -> dict:
    row = await repository.get_post_with_author(post_id)
    if row is None:
        raise _not_found()
    return {"post": _post_with_author(row)}


async def list_posts_by_user(user_id: int, *, page: int, limit: int) -> dict:
    rows = await repository.list_posts_by_author(
        user_id,
        limit=limit,
        offset=page_offset(page, limit),
    )
    return {
        "posts": [schemas.PostSummary.model_validate(row).to_json() for row in rows],
        "pagination": _pagination(page, limit, len(rows)),
    }


async def create_post(payload: schemas.CreatePostRequest, *, user_id: int) -> dict:
    row = await repository.create_post(
        author_id=user_id,
        title=payload.title,
        content=payload.content,
        is_published=payload.is_published,
    )
    logger.info("post_created post_id=%s user_id=%s", row["id"], user_id)
    return {"post": schemas.PostRecord.model_validate(row).to_json()}


async def update_post(post_id: int, payload: schemas.UpdatePostRequest, *, user_id: int) -> dict:
    await _owned_post(post_id, user_id=user_id, action="update")

    changes = payload.model_dump(exclude_unset=True)
    row = await repository.update_post(post_id, changes)
    if row is None:
        # Deleted between the ownership check and the update.
        raise _not_found()
    logger.info("post_updated post_id=%s user_id=%s fields=%s", post_id, user_id, sorted(changes))
    return {"post": schemas.PostRecord.model_validate(row).to_json()}


async def delete_post(post_id: int, *, user_id: int) -> None:
    await _owned_post(post_id, user_id=user_id, action="delete")

    if not await repository.delete_post(post_id):
        raise _not_found()
    logger.info("post_deleted post_id=%s user_id=%s", post_id, user_id)
