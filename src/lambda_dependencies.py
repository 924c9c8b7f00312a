"""Shared dependency factory for the Lambda handler.

Dependencies are created once and reused across invocations within the same
Lambda container. Note that the in-memory store therefore lives only as long
as the container does.
"""

import logging
import os

from fastapi import FastAPI

from delish_dine.config import create_token_service
from delish_dine.handlers.api_handler import create_app
from delish_dine.observability import configure_logging
from delish_dine.repositories.restaurant_repositories import RestaurantStore

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_store: RestaurantStore | None = None
_fastapi_app: FastAPI | None = None


def get_store() -> RestaurantStore:
    """Create or retrieve the cached restaurant store.

    Returns:
        RestaurantStore seeded with the default menu
    """
    global _store

    if _store is None:
        _store = RestaurantStore()
        logger.info("Restaurant store initialized")

    return _store


def get_fastapi_app() -> FastAPI:
    """Create or retrieve the cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    _fastapi_app = create_app(store=get_store(), token_service=create_token_service())

    logger.info("FastAPI application initialized")
    return _fastapi_app


def initialize_lambda_environment() -> None:
    """Initialize Lambda environment with logging.

    Should be called once during Lambda cold start.
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    logger.info("Lambda environment initialized")
