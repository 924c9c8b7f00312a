"""Restaurant data models.

These models represent the records held in the in-memory collections:
menu items, contact messages, orders and table reservations.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MenuItemType(str, Enum):
    """Enumeration of menu sections."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"
    DRINK = "Drink"


class OrderStatus(str, Enum):
    """Enumeration of order status values."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SERVED = "Served"
    CANCELLED = "Cancelled"


# Legal order status transitions; statuses missing from the map are terminal.
ORDER_STATUS_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SERVED, OrderStatus.CANCELLED}),
}


class MenuItem(BaseModel):
    """Menu item model."""

    id: int = Field(..., description="Sequential identifier", ge=1)
    name: str = Field(..., description="Dish name")
    type: MenuItemType = Field(..., description="Menu section")
    price: int = Field(..., description="Price in minor currency units", ge=0)
    is_active: bool = Field(default=True, description="Whether the dish can be ordered")


class ContactMessage(BaseModel):
    """Message left through the contact form."""

    id: int = Field(..., ge=1)
    name: str
    email: str
    message: str
    created_at: datetime = Field(..., description="Submission timestamp (UTC)")


class OrderItem(BaseModel):
    """Single order line, a snapshot of the menu item id at order time."""

    menu_item_id: int = Field(..., description="Referenced menu item id")
    quantity: int = Field(..., description="Number of portions", gt=0)


class Order(BaseModel):
    """Customer order."""

    id: int = Field(..., ge=1)
    customer_name: str | None = Field(None, description="Customer name, null for walk-ins")
    status: OrderStatus = Field(default=OrderStatus.PENDING)
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    items: list[OrderItem] = Field(..., min_length=1)

    def can_transition_to(self, status: OrderStatus) -> bool:
        """Check whether the order may move to the given status."""
        return status in ORDER_STATUS_TRANSITIONS.get(self.status, frozenset())


class Reservation(BaseModel):
    """Table reservation."""

    id: int = Field(..., ge=1)
    customer_name: str
    phone: str | None = None
    table_no: int = Field(..., ge=1)
    reserved_at: str = Field(..., description="Requested time, ISO-8601 expected")
    notes: str | None = None
