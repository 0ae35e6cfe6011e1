"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from health_tracker.api.admin import router as admin_router
from health_tracker.api.catalog import router as catalog_router
from health_tracker.api.coach import router as coach_router
from health_tracker.api.entries import router as entries_router
from health_tracker.api.insights import router as insights_router
from health_tracker.api.medications import router as medications_router
from health_tracker.api.progress import router as progress_router
from health_tracker.api.workouts import router as workouts_router
from health_tracker.app_logging import configure_logging
from health_tracker.config import parse_allowed_origins
from health_tracker.containers import AppContainer
from health_tracker.domain.errors import NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Health Tracker", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        entries_router,
        medications_router,
        progress_router,
        insights_router,
        coach_router,
        workouts_router,
        catalog_router,
        admin_router,
    ):
        app.include_router(router)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not found"}
        )

    @app.exception_handler(ValueError)
    async def invalid_request(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RuntimeError)
    async def upstream_failure(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.exception(
            "Request failed",
            extra={"path": request.url.path, "method": request.method},
            exc_info=exc,
        )
        detail = "Upstream storage failure"
        if request.app.state.container.settings.environment == "local":
            detail = f"{detail} (debug: {type(exc).__name__}: {exc})"
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": detail}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
