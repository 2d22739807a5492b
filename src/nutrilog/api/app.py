"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutrilog.api.admin import router as admin_router
from nutrilog.api.calculator import router as calculator_router
from nutrilog.api.foods import router as foods_router
from nutrilog.api.logs import router as logs_router
from nutrilog.api.settings import router as settings_router
from nutrilog.api.summary import router as summary_router
from nutrilog.api.users import router as users_router
from nutrilog.app_logging import configure_logging
from nutrilog.containers import AppContainer
from nutrilog.errors import FoodInUseError, InvalidInputError, NutrilogError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting nutrilog (environment=%s)", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(NutrilogError)
    async def handle_service_error(
        request: Request, exc: NutrilogError
    ) -> JSONResponse:
        content: dict[str, object] = {"message": exc.message}
        if isinstance(exc, InvalidInputError):
            content["errors"] = exc.fields
        if isinstance(exc, FoodInUseError):
            content["count"] = exc.count
        logger.info(
            "Request rejected: %s %s -> %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=content)

    app.include_router(users_router)
    app.include_router(foods_router)
    app.include_router(logs_router)
    app.include_router(settings_router)
    app.include_router(summary_router)
    app.include_router(calculator_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
