import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api import chat, code, files, health
from app.core.logging import configure_logging
from app.core.settings import get_settings

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Clients read failures from an "error" key, not FastAPI's "detail".
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": f"Internal server error: {exc}"},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(chat.router, prefix="/api/v1")
    app.include_router(files.router, prefix="/api/v1")
    app.include_router(code.router, prefix="/api/v1")

    app.include_router(health.router)

    logger.debug("Application created (environment=%s)", settings.environment)
    return app


app = create_app()
