"""Contact service for storing messages from the contact form."""

import logging
from datetime import UTC, datetime
from typing import Any

from delish_dine.errors import ValidationFailed
from delish_dine.models.restaurant_models import ContactMessage
from delish_dine.observability import traced
from delish_dine.observability.metrics import record_created, record_validation_failure
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.validation.rules import CONTACT_RULES, validate

logger = logging.getLogger(__name__)


class ContactService:
    """Service for the write-only contact message sink."""

    def __init__(self, store: RestaurantStore) -> None:
        self.store = store

    @traced("submit_contact_message")
    async def submit(self, payload: dict[str, Any]) -> ContactMessage:
        """Validate and store a contact message.

        Args:
            payload: Decoded request body with name, email and message

        Returns:
            The stored message

        Raises:
            ValidationFailed: With the first violated rule's message
        """
        result = validate(payload, CONTACT_RULES)
        if not result.ok:
            record_validation_failure("contact", result.first.field)
            raise ValidationFailed(result.first_message)

        message = self.store.contacts.create(
            lambda message_id: ContactMessage(
                id=message_id,
                name=payload["name"],
                email=payload["email"],
                message=payload["message"],
                created_at=datetime.now(UTC),
            )
        )
        record_created("contacts")
        logger.info(f"Stored contact message {message.id}")
        return message
