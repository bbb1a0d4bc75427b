"""
Post API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from core.responses import success_response

from . import schemas, service

router = APIRouter(prefix="/posts")


@router.get("")
async def list_posts(
    page: int = Query(service.DEFAULT_PAGE, ge=1, le=service.MAX_PAGE),
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
) -> JSONResponse:
    return success_response(await service.list_posts(page=page, limit=limit))


@router.get("/user/{userId}")
async def list_user_posts(
    user_id: int = Path(..., alias="userId", gt=0, le=service.MAX_ID),
    page: int = Query(service.DEFAULT_PAGE, ge=1, le=service.MAX_PAGE),
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
) -> JSONResponse:
    return success_response(await service.list_posts_by_user(user_id, page=page, limit=limit))


@router.get("/{id}")
async def get_post(post_id: int = Path(..., alias="id", gt=0, le=service.MAX_ID)) -> JSONResponse:
    return success_response(await service.get_post(post_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: schemas.CreatePostRequest,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> JSONResponse:
    data = await service.create_post(payload, user_id=int(current_user["id"]))
    return success_response(
        data,
        message="Post created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
async def update_post(
    payload: schemas.UpdatePostRequest,
    post_id: int = Path(..., alias="id", gt=0, le=service.MAX_ID),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> JSONResponse:
    data = await service.update_post(post_id, payload, user_id=int(current_user["id"]))
    return success_response(data, message="Post updated successfully")


@router.delete("/{id}")
async def delete_post(
    post_id: int = Path(..., alias="id", gt=0, le=service.MAX_ID),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> JSONResponse:
    await service.delete_post(post_id, user_id=int(current_user["id"]))
    return success_response(message="Post deleted successfully")
