"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from core.responses import success_response

from . import dependencies, schemas, service

router = APIRouter(prefix="/auth")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: schemas.RegisterRequest) -> JSONResponse:
    data = await service.register(payload)
    return success_response(
        data,
        message="User registered successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/login")
async def login(payload: schemas.LoginRequest) -> JSONResponse:
    data = await service.login(payload)
    return success_response(data, message="Login successful")


@router.get("/me")
async def me(current_user: dict = Depends(dependencies.get_current_user)) -> JSONResponse:
    return success_response(service.profile(current_user))
