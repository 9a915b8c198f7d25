"""
FoodCourt FastAPI Application
Main entry point: configuration, middleware, store initialization and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import admin, health, participants
from api import dependencies
from adapters import mongo_adapter
from app.config import settings
from repositories.factory import create_repositories
from services.admin_service import AdminService

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    domain_exception_handler,
    general_exception_handler,
)
from app.exceptions import FoodCourtError, StoreUnavailableError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("foodcourt.main")


def init_store():
    """Connect repositories and bootstrap the default admin (blocking)."""
    store, admin_repository = create_repositories(settings)
    AdminService.ensure_default_admin(
        admin_repository,
        settings.default_admin_username,
        settings.default_admin_password,
        rounds=settings.bcrypt_rounds,
    )
    dependencies.configure(store, admin_repository)
    _logger.info(f"Participant store ready with {store.count()} participants")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Connects the participant store with retries and closes it on shutdown.
    """
    _logger.info(
        f"Starting {settings.app_name} in {settings.environment.value} mode "
        f"({settings.repository_backend.value} backend)"
    )

    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(init_store)
            _logger.info("Store initialization succeeded")
            break
        except StoreUnavailableError as exc:
            _logger.warning(
                "Store init attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)
            else:
                _logger.error("Store initialization failed after %d attempts", attempt)
                raise

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        dependencies.configure(None, None)
        mongo_adapter.close()


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

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
app.add_exception_handler(FoodCourtError, domain_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(participants.router, prefix=settings.api_prefix)
app.include_router(admin.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
