"""API setup module."""

import sys
from contextlib import asynccontextmanager
from typing import Mapping, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from pydantic import ValidationError

from app.core.health.services.health_check_service import HealthCheckService
from app.core.interfaces.services.health_check import IHealthCheck
from app.entrypoints.api.endpoints.metrics import health
from app.entrypoints.api.endpoints.public import welcome
from app.logger import logger, setup_logging
from app.middleware import LoggingMiddleware
from app.settings import Settings

OPENAPI_URL = "/openapi/v1.json"


@asynccontextmanager
async def lifespan(
    app: FastAPI,
):
    """Context manager for the application's lifespan."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.application_name}")
    logger.info(f"Environment: {settings.environment}")
    yield
    logger.info(f"Shutting down {settings.application_name}")


def create_app(
    settings: Optional[Settings] = None,
    health_checks: Optional[Mapping[str, IHealthCheck]] = None,
) -> FastAPI:
    """Creates the FastAPI application."""
    if settings is None:
        settings = Settings()

    # API documentation is only published in development.
    fastapi_app = FastAPI(
        title=settings.application_name,
        description="Welcome and health endpoints of the Azure Identities service.",
        version=welcome.API_VERSION,
        openapi_url=OPENAPI_URL if settings.is_development else None,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings
    fastapi_app.state.health_checks = HealthCheckService(health_checks)

    fastapi_app.include_router(welcome.router)
    fastapi_app.include_router(health.router, prefix="/health")

    # Middleware added last runs first.
    fastapi_app.add_middleware(LoggingMiddleware)
    if settings.https_redirect:
        fastapi_app.add_middleware(HTTPSRedirectMiddleware)

    # CORS (Cross-Origin Resource Sharing)
    if settings.is_development:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    return fastapi_app


def entry() -> None:
    """Starts the identities API and blocks until it is stopped."""

    try:
        settings = Settings()
    except ValidationError as exc:
        setup_logging()
        logger.critical(f"Invalid configuration, refusing to start:\n{exc}")
        sys.exit(1)

    setup_logging(settings.log_level)
    config = uvicorn.Config(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        loop="uvloop",
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    # uvicorn logs a failed bind itself and exits with its own status code.
    try:
        server.run()
    except SystemExit:
        if server.started:
            raise

    if not server.started:
        logger.critical(
            "Failed to start the API server on "
            f"{settings.api_host}:{settings.api_port}"
        )
        sys.exit(1)


if __name__ == "__main__":
    entry()
