"""Unit tests for TokenService."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from delish_dine.auth.token_service import DEFAULT_TOKEN_TTL, TokenService
from delish_dine.models.auth_models import StaffIdentity


@pytest.mark.unit
class TestTokenService:
    """Test suite for TokenService."""

    @pytest.fixture
    def identity(self) -> StaffIdentity:
        return StaffIdentity(id="staff_7", email="chef@delishdine.example", role="staff")

    def test_requires_secret(self) -> None:
        """Test that an empty secret is refused."""
        with pytest.raises(ValueError, match="signing secret"):
            TokenService(secret_key="")

    def test_round_trip(self, token_service: TokenService, identity: StaffIdentity) -> None:
        """Test that an issued token verifies to the same identity."""
        claims = token_service.verify_token(token_service.issue_token(identity))

        assert claims is not None
        assert (claims.sub, claims.email, claims.role) == ("staff_7", "chef@delishdine.example", "staff")

    def test_token_expires_after_eight_hours(
        self, token_service: TokenService, identity: StaffIdentity
    ) -> None:
        """Test the token lifetime claims."""
        now = datetime.now(UTC)
        claims = token_service.verify_token(token_service.issue_token(identity, now=now))

        assert DEFAULT_TOKEN_TTL == timedelta(hours=8)
        assert claims.exp - claims.iat == 8 * 60 * 60

    def test_expired_token_rejected(self, token_service: TokenService, identity: StaffIdentity) -> None:
        """Test that a token past its expiry does not verify."""
        token = token_service.issue_token(identity, now=datetime.now(UTC) - timedelta(hours=9))

        assert token_service.verify_token(token) is None

    def test_wrong_signature_rejected(self, identity: StaffIdentity) -> None:
        """Test that a token signed with another secret does not verify."""
        token = TokenService(secret_key="other-secret").issue_token(identity)

        assert TokenService(secret_key="test-secret").verify_token(token) is None

    def test_malformed_token_rejected(self, token_service: TokenService) -> None:
        assert token_service.verify_token("not.a.jwt") is None

    def test_token_missing_claims_rejected(self, token_service: TokenService) -> None:
        """Test that a validly signed token without a role is refused."""
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"sub": "x", "iat": now, "exp": now + 60}, "test-secret", algorithm="HS256")

        assert token_service.verify_token(token) is None
