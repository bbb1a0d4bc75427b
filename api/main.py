from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from auth import router as auth_router
from core import config, db, errors, middleware
from core.responses import success_response
from posts import router as posts_router

API_PREFIX = "/api"
API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    middleware.configure_logging()
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="Posts API",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url=f"{API_PREFIX}/docs",
    redoc_url=None,
    openapi_url=f"{API_PREFIX}/openapi.json",
)

middleware.install(app)
errors.register_exception_handlers(app)

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(auth_router.router, tags=["auth"])
api_router.include_router(posts_router.router, tags=["posts"])


@api_router.get("/health", tags=["health"])
def health() -> JSONResponse:
    return JSONResponse(
        {
            "success": True,
            "message": "API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


app.include_router(api_router)


@app.get("/", include_in_schema=False)
def root() -> JSONResponse:
    return success_response(
        {
            "version": API_VERSION,
            "documentation": f"{API_PREFIX}/docs",
            "endpoints": {
                "health": f"{API_PREFIX}/health",
                "auth": f"{API_PREFIX}/auth",
                "posts": f"{API_PREFIX}/posts",
            },
        },
        message="Welcome to the Posts API",
    )


def run() -> None:
    middleware.configure_logging()
    uvicorn.run(app, host=config.host(), port=config.port(), log_config=None)


if __name__ == "__main__":
    run()
