"""
Post API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from core.schemas import CamelModel


class CreatePostRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str | None = None
    is_published: bool = False


class UpdatePostRequest(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    is_published: bool | None = None

    @field_validator("title", "is_published")
    @classmethod
    def _not_null(cls, value):
        # Omitting these is fine; sending an explicit null is not (the columns are NOT NULL).
        if value is None:
            raise ValueError("must not be null")
        return value


class PostAuthor(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class PostSummary(CamelModel):
    id: int
    title: str
    content: str | None = None
    is_published: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PostWithAuthor(PostSummary):
    author: PostAuthor | None = None


class PostRecord(PostSummary):
    author_id: int


class Pagination(CamelModel):
    page: int
    limit: int
    has_more: bool
