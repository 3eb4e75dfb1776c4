"""Main application entry point for the Little Lemon menu service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from little_lemon_menu.handlers.api_handler import create_app
from little_lemon_menu.observability import configure_logging, setup_observability
from little_lemon_menu.repositories.database import LocalDatabase
from little_lemon_menu.repositories.menu_repository import MenuRepository
from little_lemon_menu.repositories.preferences_repository import PreferencesRepository
from little_lemon_menu.services.menu_api_client import (
    DEFAULT_IMAGE_BASE_URL,
    DEFAULT_MENU_URL,
    MenuApiClient,
)
from little_lemon_menu.services.menu_service import MenuService
from little_lemon_menu.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///little_lemon.db"


def create_menu_api_client() -> MenuApiClient:
    """Create the remote menu client from environment variables.

    Returns:
        MenuApiClient configured for the environment

    Raises:
        ValueError: If MENU_API_TIMEOUT_SECONDS is not a number
    """
    menu_url = os.getenv("MENU_API_URL", DEFAULT_MENU_URL)
    image_base_url = os.getenv("MENU_IMAGE_BASE_URL", DEFAULT_IMAGE_BASE_URL)
    timeout = float(os.getenv("MENU_API_TIMEOUT_SECONDS", "10"))

    logger.info(f"Menu API client configured - URL: {menu_url}")
    return MenuApiClient(menu_url=menu_url, image_base_url=image_base_url, timeout_seconds=timeout)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the local database handle
    3. Initializes repositories
    4. Creates services
    5. Creates FastAPI app with menu and profile endpoints
    6. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing Little Lemon menu service...")

    database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    database = LocalDatabase(database_url)

    menu_repository = MenuRepository(database=database)
    preferences_repository = PreferencesRepository(database=database)
    logger.info(f"Repositories configured - database: {database_url}")

    menu_service = MenuService(
        api_client=create_menu_api_client(),
        menu_repository=menu_repository,
    )
    profile_service = ProfileService(preferences_repository=preferences_repository)
    logger.info("Services initialized")

    app = create_app(
        menu_service=menu_service,
        profile_service=profile_service,
        database=database,
    )

    setup_observability(app)

    logger.info("Little Lemon menu service initialized successfully")
    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8001"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
