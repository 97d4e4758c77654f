"""FastAPI application factory and CLI entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sitewatch.config import init_settings
from sitewatch.core.database import close_db, get_session_context, init_db
from sitewatch.routers import access_points_router, search_router, sites_router, switches_router
from sitewatch.routers.sites import CREATE_SITE_SCHEMAS
from sitewatch.services import SeedService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds in front of the field path
_REQUEST_LOCATIONS = {"body", "query", "path"}


def format_validation_error(errors: list[dict]) -> str:
    """Describe the first validation error as ``field.path: reason``."""
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in _REQUEST_LOCATIONS:
        loc = loc[1:]

    message = error.get("msg", "Invalid value")
    if loc:
        return f"{'.'.join(loc)}: {message}"
    return message


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": format_validation_error(list(exc.errors()))},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": format_validation_error(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting sitewatch...")

    # Initialize database
    await init_db()
    logger.info("Database initialized")

    settings = app.state.settings
    if settings.seed.demo_data:
        async with get_session_context() as db:
            created = await SeedService(db).seed_if_empty()
        if created:
            logger.info(f"Seeded {created} demo sites")

    yield

    # Cleanup
    await close_db()
    logger.info("sitewatch shutdown complete")


def document_site_create_models(app: FastAPI) -> None:
    """Add the models behind the POST /api/sites body forms to the OpenAPI components."""
    base_openapi = app.openapi

    def openapi() -> dict:
        schema = base_openapi()
        components = schema.setdefault("components", {}).setdefault("schemas", {})
        for name, definition in CREATE_SITE_SCHEMAS.items():
            components.setdefault(name, definition)
        return schema

    app.openapi = openapi


def create_app(config_dir: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config_dir: Path to configuration directory

    Returns:
        Configured FastAPI application
    """
    # Initialize settings
    settings = init_settings(config_dir)
    logging.getLogger().setLevel(settings.log_level.upper())

    # Create app
    app = FastAPI(
        title="sitewatch",
        description="Network site and device inventory",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings in app state
    app.state.settings = settings

    register_exception_handlers(app)

    # Include routers
    app.include_router(sites_router)
    app.include_router(switches_router)
    app.include_router(access_points_router)
    app.include_router(search_router)
    document_site_create_models(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    return app


def cli():
    """CLI entry point for running the server."""
    import argparse

    import uvicorn

    parser = argparse.ArgumentParser(description="sitewatch - network site inventory")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config"),
        help="Path to configuration directory",
    )
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port to bind to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    args = parser.parse_args()

    # Create app with config
    app = create_app(args.config)
    settings = app.state.settings

    # Override settings from CLI
    if args.debug:
        settings.server.debug = True

    uvicorn.run(
        app,
        host=args.host or settings.server.host,
        port=args.port or settings.server.port,
    )


# Create default app instance for uvicorn
app = create_app()

if __name__ == "__main__":
    cli()
