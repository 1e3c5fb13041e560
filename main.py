"""
Foodbase FastAPI Application
GraphQL API over the food and nutrition database
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from strawberry.fastapi import GraphQLRouter
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import health
from api.graphql import get_graphql_context, schema
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_error_handler,
    general_exception_handler,
)
from app.config import Settings, settings as default_settings
from app.exceptions import AppError
from domain.models import Database

_logger = logging.getLogger("foodbase.main")


def configure_logging(settings: Settings) -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Creates the database handle and its tables, retrying while the
    database is not reachable yet.
    """
    settings: Settings = app.state.settings
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    database = Database(settings.database_url, echo=settings.db_echo)
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(database.create_all)
            _logger.info("Database initialization succeeded")
            break
        except Exception as exc:
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)
            else:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                database.dispose()
                raise

    app.state.database = database
    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings"""
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="GraphQL API for foods, nutrients, brands and sources",
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url=None,
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
    )
    app.include_router(graphql_app, prefix=settings.graphql_path)
    app.include_router(health.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
