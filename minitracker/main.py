"""
FastAPI application entry point.
Mounts routes and Prometheus metrics, registers the envelope error handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from minitracker.api.v1.router import api_router
from minitracker.config import get_settings
from minitracker.core.errors import AppError, InternalError
from minitracker.db.base import Base
from minitracker.db.session import engine

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(status_code: int, error: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def _validation_error_detail(exc: RequestValidationError) -> dict:
    """First offending field, by its wire (camelCase) name."""
    errors = exc.errors()
    if not errors:
        return {"message": "Invalid request", "code": "VALIDATION_ERROR"}
    first = errors[0]
    message = first.get("msg", "Invalid request")
    # Custom validators surface as "Value error, <message>"
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    error = {"message": message, "code": "VALIDATION_ERROR"}
    field = next((part for part in first.get("loc", ())[1:] if isinstance(part, str)), None)
    if field:
        error["field"] = field
    return error


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create tables when configured (handy for SQLite). Shutdown: release the pool."""
    settings = get_settings()
    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")
    yield
    await engine.dispose()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
        return error_response(exc.status_code, exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("%s %s -> invalid request: %s", request.method, request.url.path, exc.errors())
        return error_response(400, _validation_error_detail(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        return error_response(exc.status_code, {"message": str(exc.detail), "code": code})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error in %s %s", request.method, request.url.path, exc_info=exc)
        error = InternalError("Internal server error")
        return error_response(error.status_code, error.to_dict())


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="Track a miniature collection: catalog, personal lists, build and paint progress.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
