"""Unit tests for OrderService."""

import pytest

from delish_dine.errors import Conflict, NotFound, ValidationFailed
from delish_dine.models.restaurant_models import OrderStatus
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.services.menu_service import MenuService
from delish_dine.services.order_service import (
    EMPTY_ITEMS_MESSAGE,
    INVALID_ITEMS_MESSAGE,
    OrderService,
)


@pytest.mark.unit
class TestOrderService:
    """Test suite for OrderService."""

    @pytest.fixture
    def menu_service(self, store: RestaurantStore) -> MenuService:
        return MenuService(store=store)

    @pytest.fixture
    def order_service(self, store: RestaurantStore, menu_service: MenuService) -> OrderService:
        """Create an OrderService over the seeded store."""
        return OrderService(store=store, menu_service=menu_service)

    @pytest.mark.asyncio
    async def test_create_order(self, order_service: OrderService) -> None:
        """Test creating a valid order."""
        order = await order_service.create_order(
            {"customer_name": "Ali Khan", "items": [{"menu_item_id": 1, "quantity": 2}]}
        )

        assert order.id == 1
        assert order.customer_name == "Ali Khan"
        assert order.status == OrderStatus.PENDING
        assert [(i.menu_item_id, i.quantity) for i in order.items] == [(1, 2)]

    @pytest.mark.asyncio
    async def test_ids_strictly_increase(self, order_service: OrderService) -> None:
        """Test that successive orders get increasing ids."""
        ids = [
            (await order_service.create_order({"items": [{"menu_item_id": 3, "quantity": 1}]})).id
            for _ in range(3)
        ]

        assert ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_customer_name_empty_is_walk_in(self, order_service: OrderService) -> None:
        """Test that an empty customer name is stored as None."""
        order = await order_service.create_order(
            {"customer_name": "", "items": [{"menu_item_id": 1, "quantity": 1}]}
        )

        assert order.customer_name is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("items", [None, [], "1,2", {"menu_item_id": 1}])
    async def test_missing_or_empty_items(self, order_service: OrderService, items: object) -> None:
        """Test that items must be a non-empty list."""
        with pytest.raises(ValidationFailed) as exc_info:
            await order_service.create_order({"items": items})

        assert exc_info.value.message == EMPTY_ITEMS_MESSAGE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "item",
        [
            None,
            "1",
            {"menu_item_id": "1", "quantity": 1},
            {"menu_item_id": 1},
            {"menu_item_id": 1, "quantity": 0},
            {"menu_item_id": 1, "quantity": -2},
            {"menu_item_id": 1, "quantity": 1.5},
            {"menu_item_id": 1, "quantity": True},
        ],
    )
    async def test_malformed_items(self, order_service: OrderService, item: object) -> None:
        """Test that malformed line items are rejected."""
        with pytest.raises(ValidationFailed) as exc_info:
            await order_service.create_order({"items": [item]})

        assert exc_info.value.message == INVALID_ITEMS_MESSAGE

    @pytest.mark.asyncio
    async def test_unknown_item_rejects_whole_order(
        self, order_service: OrderService, store: RestaurantStore
    ) -> None:
        """Test that one unknown item rejects the order and stores nothing."""
        with pytest.raises(ValidationFailed) as exc_info:
            await order_service.create_order(
                {"items": [{"menu_item_id": 1, "quantity": 1}, {"menu_item_id": 42, "quantity": 1}]}
            )

        assert exc_info.value.message == "Menu item not found or inactive: 42"
        assert len(store.orders) == 0

    @pytest.mark.asyncio
    async def test_inactive_item_rejected(
        self, order_service: OrderService, menu_service: MenuService
    ) -> None:
        """Test that an inactive menu item cannot be ordered."""
        await menu_service.deactivate_item(4)

        with pytest.raises(ValidationFailed, match="Menu item not found or inactive: 4"):
            await order_service.create_order({"items": [{"menu_item_id": 4, "quantity": 1}]})

    @pytest.mark.asyncio
    async def test_order_survives_later_deactivation(
        self, order_service: OrderService, menu_service: MenuService
    ) -> None:
        """Test that existing orders keep items deactivated afterwards."""
        await order_service.create_order({"items": [{"menu_item_id": 5, "quantity": 3}]})
        await menu_service.deactivate_item(5)

        orders = await order_service.list_orders()
        assert orders[0].items[0].menu_item_id == 5

    @pytest.mark.asyncio
    async def test_customer_name_must_be_string(self, order_service: OrderService) -> None:
        """Test that a non-string customer name is rejected."""
        with pytest.raises(ValidationFailed, match="customer_name must be string"):
            await order_service.create_order(
                {"customer_name": 7, "items": [{"menu_item_id": 1, "quantity": 1}]}
            )

    @pytest.mark.asyncio
    async def test_list_orders_newest_first(self, order_service: OrderService) -> None:
        """Test that orders are listed newest first, ties broken by id."""
        for _ in range(4):
            await order_service.create_order({"items": [{"menu_item_id": 2, "quantity": 1}]})

        orders = await order_service.list_orders()

        assert [o.id for o in orders] == [4, 3, 2, 1]
        assert orders == await order_service.list_orders()

    @pytest.mark.asyncio
    async def test_update_status(self, order_service: OrderService) -> None:
        """Test moving an order through its lifecycle."""
        order = await order_service.create_order({"items": [{"menu_item_id": 1, "quantity": 1}]})

        confirmed = await order_service.update_status(order.id, OrderStatus.CONFIRMED)
        served = await order_service.update_status(order.id, OrderStatus.SERVED)

        assert confirmed.status == OrderStatus.CONFIRMED
        assert served.status == OrderStatus.SERVED
        assert (await order_service.list_orders())[0].status == OrderStatus.SERVED

    @pytest.mark.asyncio
    async def test_update_status_illegal_transition(self, order_service: OrderService) -> None:
        """Test that a pending order cannot be served directly."""
        order = await order_service.create_order({"items": [{"menu_item_id": 1, "quantity": 1}]})

        with pytest.raises(Conflict, match="from Pending to Served"):
            await order_service.update_status(order.id, OrderStatus.SERVED)

    @pytest.mark.asyncio
    async def test_update_status_unknown_order(self, order_service: OrderService) -> None:
        with pytest.raises(NotFound):
            await order_service.update_status(7, OrderStatus.CONFIRMED)
