"""In-memory collections backing the restaurant API.

Each collection owns an identifier counter and a lock, so identifier
assignment and append happen as one step even when handlers run in a
worker thread pool. Lookups of missing records return None rather than
raising; services decide how to report them.
"""

import itertools
import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from delish_dine.models.restaurant_models import (
    ContactMessage,
    MenuItem,
    MenuItemType,
    Order,
    Reservation,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class InMemoryCollection(Generic[RecordT]):
    """Ordered collection of records with sequential integer identifiers."""

    def __init__(self, name: str) -> None:
        """Initialize an empty collection.

        Args:
            name: Collection name used in log messages
        """
        self.name = name
        self._records: list[RecordT] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def create(self, factory: Callable[[int], RecordT]) -> RecordT:
        """Build and append a record under a freshly assigned identifier.

        Args:
            factory: Callable receiving the new identifier and returning the record

        Returns:
            The stored record
        """
        with self._lock:
            record = factory(next(self._ids))
            self._records.append(record)

        logger.debug(f"Created record in {self.name} collection")
        return record

    def get(self, record_id: int) -> RecordT | None:
        """Retrieve a record by identifier.

        Args:
            record_id: Record identifier

        Returns:
            The record if found, None otherwise
        """
        with self._lock:
            for record in self._records:
                if getattr(record, "id", None) == record_id:
                    return record
        return None

    def list(
        self,
        predicate: Callable[[RecordT], bool] | None = None,
        sort_key: Callable[[RecordT], Any] | None = None,
        reverse: bool = False,
    ) -> list[RecordT]:
        """List records, optionally filtered and sorted.

        Sorting happens on a copy at read time; stored order is insertion order.

        Args:
            predicate: Optional filter
            sort_key: Optional sort key
            reverse: Sort descending when True

        Returns:
            list: New list of matching records
        """
        with self._lock:
            records = list(self._records)

        if predicate is not None:
            records = [r for r in records if predicate(r)]
        if sort_key is not None:
            records.sort(key=sort_key, reverse=reverse)
        return records

    def replace(self, record_id: int, record: RecordT) -> bool:
        """Replace a stored record, keeping its position.

        Args:
            record_id: Identifier of the record to replace
            record: New record value

        Returns:
            bool: True if the record existed and was replaced, False otherwise
        """
        with self._lock:
            for index, existing in enumerate(self._records):
                if getattr(existing, "id", None) == record_id:
                    self._records[index] = record
                    return True
        return False

    def seed(self, factories: Iterable[Callable[[int], RecordT]]) -> None:
        """Create records in bulk, e.g. startup data."""
        for factory in factories:
            self.create(factory)


# Dishes available at startup: (name, type, price)
DEFAULT_MENU: list[tuple[str, MenuItemType, int]] = [
    ("Chicken Alfredo Pasta", MenuItemType.MAIN, 850),
    ("Caesar Salad", MenuItemType.STARTER, 450),
    ("Grilled Fish", MenuItemType.MAIN, 950),
    ("Chocolate Lava Cake", MenuItemType.DESSERT, 550),
    ("French Fries", MenuItemType.STARTER, 300),
]


class RestaurantStore:
    """Owner of the four restaurant collections.

    One store lives for the lifetime of an application instance and is handed
    to the services that read and mutate it.
    """

    def __init__(self, seed_menu: bool = True) -> None:
        """Initialize the store.

        Args:
            seed_menu: Load the default menu when True
        """
        self.menu: InMemoryCollection[MenuItem] = InMemoryCollection("menu")
        self.contacts: InMemoryCollection[ContactMessage] = InMemoryCollection("contacts")
        self.orders: InMemoryCollection[Order] = InMemoryCollection("orders")
        self.reservations: InMemoryCollection[Reservation] = InMemoryCollection("reservations")

        if seed_menu:
            self.menu.seed(
                _menu_item_factory(name, item_type, price) for name, item_type, price in DEFAULT_MENU
            )
            logger.info(f"Seeded menu with {len(self.menu)} items")


def _menu_item_factory(
    name: str, item_type: MenuItemType, price: int
) -> Callable[[int], MenuItem]:
    return lambda item_id: MenuItem(id=item_id, name=name, type=item_type, price=price)
