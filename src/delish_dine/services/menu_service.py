"""Menu service for listing and administering menu items."""

import logging

from delish_dine.errors import NotFound
from delish_dine.models.restaurant_models import MenuItem
from delish_dine.observability import traced
from delish_dine.observability.metrics import record_created
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.validation.schemas import MenuItemCreate

logger = logging.getLogger(__name__)


class MenuService:
    """Service for reading and changing the menu collection."""

    def __init__(self, store: RestaurantStore) -> None:
        """Initialize the MenuService.

        Args:
            store: Store holding the menu collection
        """
        self.store = store

    @traced("list_active_menu")
    async def list_active_items(self) -> list[MenuItem]:
        """List items that can currently be ordered, in menu order."""
        return self.store.menu.list(predicate=lambda item: item.is_active)

    async def get_active_item(self, menu_item_id: int) -> MenuItem | None:
        """Get a menu item only if it exists and is active.

        Args:
            menu_item_id: Menu item identifier

        Returns:
            The item, or None if it is unknown or inactive
        """
        item = self.store.menu.get(menu_item_id)
        if item is None or not item.is_active:
            return None
        return item

    @traced("create_menu_item")
    async def create_item(self, request: MenuItemCreate) -> MenuItem:
        """Add a dish to the menu.

        Args:
            request: Validated menu item payload

        Returns:
            The stored menu item
        """
        item = self.store.menu.create(
            lambda item_id: MenuItem(
                id=item_id,
                name=request.name,
                type=request.type,
                price=request.price,
                is_active=request.is_active,
            )
        )
        record_created("menu")
        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("deactivate_menu_item")
    async def deactivate_item(self, menu_item_id: int) -> MenuItem:
        """Take a dish off the menu.

        Deactivating an already inactive item is a no-op. Existing orders keep
        their line items since they only hold the id.

        Args:
            menu_item_id: Menu item identifier

        Returns:
            The updated menu item

        Raises:
            NotFound: If no such menu item exists
        """
        item = self.store.menu.get(menu_item_id)
        if item is None:
            raise NotFound(f"Menu item {menu_item_id} not found")

        if item.is_active:
            item = item.model_copy(update={"is_active": False})
            self.store.menu.replace(menu_item_id, item)
            logger.info(f"Deactivated menu item {menu_item_id}")

        return item
