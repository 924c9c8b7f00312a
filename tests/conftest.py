"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before main / lambda_handler are imported
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from delish_dine.auth.token_service import TokenService  # noqa: E402
from delish_dine.handlers.api_handler import create_app  # noqa: E402
from delish_dine.models.auth_models import StaffIdentity  # noqa: E402
from delish_dine.repositories.restaurant_repositories import RestaurantStore  # noqa: E402


@pytest.fixture
def store() -> RestaurantStore:
    """Fixture providing a store seeded with the default menu."""
    return RestaurantStore()


@pytest.fixture
def token_service() -> TokenService:
    """Fixture providing a token service with a fixed test secret."""
    return TokenService(secret_key="test-secret")


@pytest.fixture
def client(store: RestaurantStore, token_service: TokenService) -> TestClient:
    """Fixture providing a test client with the admin API mounted."""
    return TestClient(create_app(store=store, token_service=token_service))


@pytest.fixture
def admin_headers(token_service: TokenService) -> dict[str, str]:
    """Fixture providing an Authorization header for an admin."""
    token = token_service.issue_token(
        StaffIdentity(id="staff_1", email="manager@delishdine.example", role="admin")
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def valid_reservation() -> dict:
    """Fixture providing a valid reservation payload."""
    return {
        "customer_name": "Sana",
        "phone": "+923001234567",
        "table_no": 3,
        "reserved_at": "2025-01-01T10:00",
        "notes": "Window seat",
    }
