"""Main application entry point for the Delish Dine restaurant service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from delish_dine.config import create_token_service, env_flag
from delish_dine.handlers.api_handler import create_app
from delish_dine.observability import configure_logging, setup_observability
from delish_dine.repositories.restaurant_repositories import RestaurantStore

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the in-memory store with the default menu
    3. Configures the token service for the admin API
    4. Creates the FastAPI app
    5. Sets up observability when enabled

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    logger.info("Initializing Delish Dine restaurant service...")

    store = RestaurantStore()
    app = create_app(store=store, token_service=create_token_service())

    if env_flag("ENABLE_TELEMETRY", "false"):
        setup_observability(app)

    logger.info("Delish Dine restaurant service initialized successfully")
    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
