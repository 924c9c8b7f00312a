"""Order service for placing and tracking customer orders."""

import logging
from datetime import UTC, datetime
from typing import Any

from delish_dine.errors import Conflict, NotFound, ValidationFailed
from delish_dine.models.restaurant_models import Order, OrderItem, OrderStatus
from delish_dine.observability import traced
from delish_dine.observability.metrics import (
    record_created,
    record_order_size,
    record_validation_failure,
)
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.services.menu_service import MenuService
from delish_dine.validation.rules import ORDER_RULES, is_integral, validate

logger = logging.getLogger(__name__)

EMPTY_ITEMS_MESSAGE = "items is required (non-empty array)"
INVALID_ITEMS_MESSAGE = "Invalid order items"


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class OrderService:
    """Service for the order collection.

    Orders are all-or-nothing: every line item is checked against the active
    menu before anything is stored.
    """

    def __init__(self, store: RestaurantStore, menu_service: MenuService) -> None:
        """Initialize the OrderService.

        Args:
            store: Store holding the orders collection
            menu_service: Service used to resolve active menu items
        """
        self.store = store
        self.menu_service = menu_service

    async def _validate_items(self, raw_items: Any) -> list[OrderItem]:
        """Check raw line items and resolve them against the active menu.

        Raises:
            ValidationFailed: On the first item that is malformed or unavailable
        """
        if not isinstance(raw_items, list) or not raw_items:
            record_validation_failure("orders", "items")
            raise ValidationFailed(EMPTY_ITEMS_MESSAGE)

        items: list[OrderItem] = []
        for raw in raw_items:
            if (
                not isinstance(raw, dict)
                or not _is_number(raw.get("menu_item_id"))
                or not _is_number(raw.get("quantity"))
                or raw["quantity"] <= 0
                or not is_integral(raw["quantity"])
            ):
                record_validation_failure("orders", "items")
                raise ValidationFailed(INVALID_ITEMS_MESSAGE)

            menu_item = await self.menu_service.get_active_item(raw["menu_item_id"])
            if menu_item is None:
                record_validation_failure("orders", "menu_item_id")
                raise ValidationFailed(
                    f"Menu item not found or inactive: {raw['menu_item_id']}"
                )

            items.append(OrderItem(menu_item_id=menu_item.id, quantity=int(raw["quantity"])))

        return items

    @traced("create_order")
    async def create_order(self, payload: dict[str, Any]) -> Order:
        """Validate and store a new order in Pending status.

        Args:
            payload: Decoded request body with items and optional customer_name

        Returns:
            The stored order

        Raises:
            ValidationFailed: If the items or customer name are invalid
        """
        items = await self._validate_items(payload.get("items"))

        result = validate(payload, ORDER_RULES)
        if not result.ok:
            record_validation_failure("orders", result.first.field)
            raise ValidationFailed(result.first_message)

        customer_name = payload.get("customer_name") or None
        order = self.store.orders.create(
            lambda order_id: Order(
                id=order_id,
                customer_name=customer_name,
                status=OrderStatus.PENDING,
                created_at=datetime.now(UTC),
                items=items,
            )
        )
        record_created("orders")
        record_order_size(len(items))
        logger.info(f"Created order {order.id} with {len(items)} items")
        return order

    @traced("list_orders")
    async def list_orders(self) -> list[Order]:
        """List all orders, newest first (ties broken by higher id first)."""
        return self.store.orders.list(
            sort_key=lambda order: (order.created_at, order.id), reverse=True
        )

    @traced("update_order_status")
    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        """Move an order to a new status.

        Pending orders may be confirmed or cancelled; confirmed orders may be
        served or cancelled. Served and cancelled orders are final.

        Args:
            order_id: Order identifier
            status: Requested status

        Returns:
            The updated order

        Raises:
            NotFound: If no such order exists
            Conflict: If the transition is not allowed
        """
        order = self.store.orders.get(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} not found")

        if not order.can_transition_to(status):
            raise Conflict(
                f"Cannot change order {order_id} from {order.status.value} to {status.value}"
            )

        updated = order.model_copy(update={"status": status})
        self.store.orders.replace(order_id, updated)
        logger.info(f"Order {order_id} moved from {order.status.value} to {status.value}")
        return updated
