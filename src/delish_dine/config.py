"""Environment-driven configuration shared by the entry points."""

import logging
import os
import secrets

from delish_dine.auth.token_service import TokenService

logger = logging.getLogger(__name__)


def env_flag(name: str, default: str) -> bool:
    """Read a boolean environment variable ("true"/"false")."""
    return os.getenv(name, default).strip().lower() == "true"


def create_token_service() -> TokenService | None:
    """Create the token service for the secured admin API.

    Returns:
        TokenService, or None when ENABLE_ADMIN_API is false
    """
    if not env_flag("ENABLE_ADMIN_API", "true"):
        logger.info("Admin API disabled")
        return None

    secret = os.getenv("JWT_SECRET")
    if not secret:
        # Ephemeral secret: tokens stop verifying after a restart
        logger.warning("No JWT_SECRET configured - using a random per-process signing secret")
        secret = secrets.token_urlsafe(32)

    return TokenService(secret_key=secret)
