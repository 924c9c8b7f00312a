"""FastAPI dependencies for bearer authentication and role checks."""

import logging
from collections.abc import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from delish_dine.auth.token_service import TokenService
from delish_dine.errors import Forbidden, Unauthorized
from delish_dine.models.auth_models import TokenClaims

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def require_auth(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """FastAPI dependency that verifies the bearer token.

    The token service is read from ``app.state.token_service``. On success the
    decoded claims are stored on ``request.state.user``.

    Raises:
        Unauthorized: 401 if the token is missing or fails verification
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing token")

    token_service: TokenService = request.app.state.token_service
    claims = token_service.verify_token(credentials.credentials)
    if claims is None:
        raise Unauthorized("Invalid token")

    request.state.user = claims
    return claims


def require_role(*roles: str) -> Callable[..., TokenClaims]:
    """Build a dependency that only admits the given roles.

    Must run after ``require_auth``; it is declared as a sub-dependency so
    FastAPI resolves authentication first.

    Args:
        roles: Role names allowed through

    Returns:
        Dependency callable

    Raises:
        Forbidden: 403 (from the dependency) if the identity is absent or its role is not allowed
    """
    allowed = frozenset(roles)

    def check_role(request: Request, _claims: TokenClaims = Depends(require_auth)) -> TokenClaims:
        user: TokenClaims | None = getattr(request.state, "user", None)
        if user is None or user.role not in allowed:
            logger.warning(f"Role check failed for path {request.url.path}")
            raise Forbidden()
        return user

    return check_role
