"""Unit tests for restaurant models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from delish_dine.models.restaurant_models import (
    MenuItem,
    MenuItemType,
    Order,
    OrderItem,
    OrderStatus,
)


def _order(status: OrderStatus) -> Order:
    return Order(
        id=1,
        status=status,
        created_at=datetime.now(UTC),
        items=[OrderItem(menu_item_id=1, quantity=2)],
    )


@pytest.mark.unit
class TestMenuItem:
    """Test suite for MenuItem."""

    def test_defaults_to_active(self) -> None:
        item = MenuItem(id=1, name="Grilled Fish", type=MenuItemType.MAIN, price=950)
        assert item.is_active is True

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError):
            MenuItem(id=1, name="Grilled Fish", type=MenuItemType.MAIN, price=-1)

    def test_serializes_type_as_label(self) -> None:
        item = MenuItem(id=1, name="Tea", type=MenuItemType.DRINK, price=100)
        assert item.model_dump(mode="json")["type"] == "Drink"


@pytest.mark.unit
class TestOrder:
    """Test suite for Order and its status transitions."""

    def test_new_order_is_pending(self) -> None:
        order = Order(id=1, created_at=datetime.now(UTC), items=[OrderItem(menu_item_id=1, quantity=1)])
        assert order.status == OrderStatus.PENDING
        assert order.customer_name is None

    def test_requires_items(self) -> None:
        with pytest.raises(ValidationError):
            Order(id=1, created_at=datetime.now(UTC), items=[])

    def test_quantity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            OrderItem(menu_item_id=1, quantity=0)

    @pytest.mark.parametrize(
        ("current", "target", "allowed"),
        [
            (OrderStatus.PENDING, OrderStatus.CONFIRMED, True),
            (OrderStatus.PENDING, OrderStatus.CANCELLED, True),
            (OrderStatus.PENDING, OrderStatus.SERVED, False),
            (OrderStatus.CONFIRMED, OrderStatus.SERVED, True),
            (OrderStatus.CONFIRMED, OrderStatus.CANCELLED, True),
            (OrderStatus.CONFIRMED, OrderStatus.PENDING, False),
            (OrderStatus.SERVED, OrderStatus.CANCELLED, False),
            (OrderStatus.CANCELLED, OrderStatus.CONFIRMED, False),
        ],
    )
    def test_can_transition_to(
        self, current: OrderStatus, target: OrderStatus, allowed: bool
    ) -> None:
        """Test the order status state machine."""
        assert _order(current).can_transition_to(target) is allowed
