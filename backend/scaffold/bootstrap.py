"""
Application Bootstrap Module

Builds the FastAPI applications: API documentation, CORS, global exception
handlers, health endpoint, and the lifecycle that initializes the database and
registers the instance with the service registry.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import Iterable

import httpx
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scaffold.common.errors import AppError, RegistryError
from scaffold.config import get_settings
from scaffold.db.session import init_db
from scaffold.registry import ServiceRegistryClient
from scaffold.scheduler import shutdown_scheduler, start_scheduler

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def build_lifespan(init_database: bool):
    """
    Build the application lifecycle

    Args:
        init_database: Create tables on startup
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        app.state.registry = None
        app.state.remote_clients = []

        # Startup
        if init_database:
            await init_db()

        registry = None
        if settings.REGISTRY_ENABLED:
            registry = ServiceRegistryClient.from_settings()
            try:
                await registry.register()
            except (httpx.HTTPError, RegistryError) as e:
                # The heartbeat re-registers once the registry answers
                logger.error("Service registration failed: %s", e)
            start_scheduler(registry)
            app.state.registry = registry

        yield

        # Shutdown
        for client in app.state.remote_clients:
            await client.close()
        if registry is not None:
            shutdown_scheduler()
            try:
                await registry.deregister()
            except (httpx.HTTPError, RegistryError) as e:
                logger.error("Service deregistration failed: %s", e)
            await registry.close()

    return lifespan


def register_exception_handlers(app: FastAPI) -> None:
    """Install the global exception handlers"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """
        Handle application custom exceptions

        In production mode, error details are hidden to prevent information leakage.
        """
        settings = get_settings()
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(include_details=settings.DEBUG),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions

        In production mode, stack traces and error details are logged but not returned to clients.
        """
        settings = get_settings()
        logger.error(
            "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
            str(exc),
            request.url.path,
            traceback.format_exc(),
        )

        if settings.DEBUG:
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "message": str(exc),
                        "type": type(exc).__name__,
                        "code": "internal_error",
                        "traceback": traceback.format_exc().split("\n"),
                    }
                },
            )

        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "message": "Internal server error",
                    "type": "internal_error",
                    "code": "internal_error",
                }
            },
        )


def _allowed_origins() -> list[str]:
    settings = get_settings()
    allowed_origins_str = settings.ALLOWED_ORIGINS.strip()
    if allowed_origins_str:
        return [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]
    # In development mode with DEBUG=True, allow localhost origins
    if settings.DEBUG:
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return []


def create_app(
    title: str,
    description: str,
    routers: Iterable[APIRouter],
    init_database: bool = True,
) -> FastAPI:
    """
    Create a FastAPI application

    Args:
        title: Application title shown in the API docs
        description: Application description shown in the API docs
        routers: Routers mounted under /api
        init_database: Create tables on startup

    Returns:
        FastAPI: Configured application
    """
    settings = get_settings()
    docs_enabled = settings.DOCS_ENABLED

    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=build_lifespan(init_database),
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health Check Endpoint, also the registry health-check URL
    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health Check

        Used for service liveness probe.
        """
        return {"status": "UP"}

    @app.get("/", tags=["Health"])
    async def root():
        """Return basic service information"""
        return {
            "name": settings.APP_NAME,
            "version": APP_VERSION,
            "description": description,
        }

    api_router = APIRouter(prefix="/api")
    for router in routers:
        api_router.include_router(router)
    app.include_router(api_router)

    return app
