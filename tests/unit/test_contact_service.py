"""Unit tests for ContactService."""

from datetime import UTC, datetime

import pytest

from delish_dine.errors import ValidationFailed
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.services.contact_service import ContactService


@pytest.mark.unit
class TestContactService:
    """Test suite for ContactService."""

    @pytest.fixture
    def contact_service(self, store: RestaurantStore) -> ContactService:
        return ContactService(store=store)

    @pytest.mark.asyncio
    async def test_submit_valid_message(
        self, contact_service: ContactService, store: RestaurantStore
    ) -> None:
        """Test that a valid message is stored with a timestamp."""
        before = datetime.now(UTC)
        message = await contact_service.submit(
            {"name": "Ali", "email": "ali@example.com", "message": "Hello there"}
        )

        assert message.id == 1
        assert message.email == "ali@example.com"
        assert message.created_at >= before
        assert store.contacts.get(1) == message

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("payload", "error"),
        [
            ({"email": "ali@example.com", "message": "Hello there"}, "name is required"),
            ({"name": "A", "email": "ali@example.com", "message": "Hello there"}, "name must have at least 2 characters"),
            ({"name": "Ali", "email": "not-an-email", "message": "Hello there"}, "email format is invalid"),
            ({"name": "Ali", "email": "ali@example.com", "message": "Hi"}, "message must have at least 5 characters"),
            ({"name": "Ali", "email": ["ali@example.com"], "message": "Hello there"}, "email must be string"),
        ],
    )
    async def test_submit_invalid_message(
        self,
        contact_service: ContactService,
        store: RestaurantStore,
        payload: dict,
        error: str,
    ) -> None:
        """Test that the first violation is raised and nothing is stored."""
        with pytest.raises(ValidationFailed) as exc_info:
            await contact_service.submit(payload)

        assert exc_info.value.message == error
        assert exc_info.value.status_code == 400
        assert len(store.contacts) == 0
