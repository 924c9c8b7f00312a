"""JWT issuance and verification for the secured admin API.

Tokens are HS256-signed and embed the staff member's id, email and role.
Verification failures return None rather than raising; the FastAPI
dependencies turn that into a 401.
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from pydantic import ValidationError

from delish_dine.models.auth_models import StaffIdentity, TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=8)


class TokenService:
    """Signs and verifies bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        """Initialize the token service.

        Args:
            secret_key: Signing secret
            algorithm: JWT signing algorithm
            token_ttl: Lifetime of issued tokens

        Raises:
            ValueError: If secret_key is empty
        """
        if not secret_key:
            raise ValueError("A signing secret must be provided")

        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_ttl = token_ttl

    def issue_token(self, identity: StaffIdentity, now: datetime | None = None) -> str:
        """Issue a signed, time-limited token for a staff member.

        Args:
            identity: Staff member the token is for
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded JWT
        """
        issued_at = now or datetime.now(UTC)
        claims = {
            "sub": identity.id,
            "email": identity.email,
            "role": identity.role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.token_ttl).timestamp()),
        }
        token: str = jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

        logger.info(f"Issued token for {identity.id} with role {identity.role}")
        return token

    def verify_token(self, token: str) -> TokenClaims | None:
        """Decode and verify a token.

        Args:
            token: Encoded JWT

        Returns:
            TokenClaims if the token is valid, None if it is expired,
            malformed or signed with another key
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return TokenClaims.model_validate(payload)
        except JWTError as e:
            logger.warning(f"Token verification failed: {e}")
            return None
        except ValidationError as e:
            logger.warning(f"Token claims are incomplete: {e}")
            return None
