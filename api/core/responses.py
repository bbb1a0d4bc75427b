"""
Success envelope shared by all endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(
    data: Any = None,
    *,
    message: str | None = None,
    status_code: int = 200,
) -> JSONResponse:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
