"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.wm_common.errors import AppError
from src.wm_common.http_client import close_http_client, get_http_client
from src.wm_common.response import error_response
from src.wm_flips.api.router import router as flips_router
from src.wm_gateway.middleware.request_log import RequestLogMiddleware
from src.wm_items.api.router import router as items_router
from src.wm_orders.api.router import router as orders_router
from src.wm_rivens.api.router import router as rivens_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: open the upstream pool. Shutdown: close it."""
    await get_http_client()
    yield
    await close_http_client()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(orders_router, prefix="/api/v1")
app.include_router(items_router, prefix="/api/v1")
app.include_router(flips_router, prefix="/api/v1")
app.include_router(rivens_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
