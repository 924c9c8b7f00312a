"""Reservation service for booking tables."""

import logging
from datetime import UTC, datetime
from typing import Any

from delish_dine.errors import Conflict, ValidationFailed
from delish_dine.models.restaurant_models import Reservation
from delish_dine.observability import traced
from delish_dine.observability.metrics import record_created, record_validation_failure
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.validation.rules import RESERVATION_RULES, validate

logger = logging.getLogger(__name__)


def parse_reserved_at(value: str) -> datetime | None:
    """Parse a reservation time as ISO-8601.

    Aware values are converted to naive UTC so they compare with naive ones.

    Returns:
        The parsed datetime, or None if the value is not ISO-8601
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(UTC).replace(tzinfo=None)
        except OverflowError:
            # The UTC equivalent falls outside the datetime range
            return None
    return parsed


def _reserved_at_sort_key(reservation: Reservation) -> tuple[bool, datetime, int]:
    parsed = parse_reserved_at(reservation.reserved_at)
    # Unparseable times sort after every real time in descending order
    return (parsed is not None, parsed or datetime.min, reservation.id)


class ReservationService:
    """Service for the reservation collection."""

    def __init__(self, store: RestaurantStore) -> None:
        """Initialize the ReservationService.

        Args:
            store: Store holding the reservations collection
        """
        self.store = store

    def _find_booking(self, table_no: int, reserved_at: str) -> Reservation | None:
        wanted = parse_reserved_at(reserved_at)
        for existing in self.store.reservations.list(lambda r: r.table_no == table_no):
            existing_at = parse_reserved_at(existing.reserved_at)
            if wanted is not None and existing_at is not None:
                if existing_at == wanted:
                    return existing
            elif existing.reserved_at == reserved_at:
                return existing
        return None

    @traced("create_reservation")
    async def create_reservation(self, payload: dict[str, Any]) -> Reservation:
        """Validate and store a table reservation.

        Args:
            payload: Decoded request body

        Returns:
            The stored reservation

        Raises:
            ValidationFailed: With the first violated rule's message
            Conflict: If the table is already booked for the same time
        """
        result = validate(payload, RESERVATION_RULES)
        if not result.ok:
            record_validation_failure("reservations", result.first.field)
            raise ValidationFailed(result.first_message)

        table_no = int(payload["table_no"])
        reserved_at = payload["reserved_at"]

        # No await between the check and the insert
        if self._find_booking(table_no, reserved_at) is not None:
            logger.warning(f"Rejected double booking for table {table_no} at {reserved_at}")
            raise Conflict(f"Table {table_no} is already reserved at {reserved_at}")

        reservation = self.store.reservations.create(
            lambda reservation_id: Reservation(
                id=reservation_id,
                customer_name=payload["customer_name"],
                phone=payload.get("phone") or None,
                table_no=table_no,
                reserved_at=reserved_at,
                notes=payload.get("notes") or None,
            )
        )
        record_created("reservations")
        logger.info(f"Created reservation {reservation.id} for table {table_no}")
        return reservation

    @traced("list_reservations")
    async def list_reservations(self) -> list[Reservation]:
        """List all reservations, latest reserved_at first."""
        return self.store.reservations.list(sort_key=_reserved_at_sort_key, reverse=True)
