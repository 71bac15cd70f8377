"""
repositories/repository.py
--------------------------
Generic in-memory repository keyed by entity identifier.
Every demo keeps its records in one of these; identifiers are unique
within a repository and duplicates are rejected.
"""

import dataclasses
from operator import attrgetter
from typing import Callable, Generic, Optional, Protocol, TypeVar

from models.result import ErrorKind, Result
from utils.logger import get_logger

logger = get_logger(__name__)


class Identifiable(Protocol):
    """Anything exposing an integer `id`."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Identifiable)


class Repository(Generic[T]):
    """
    Uniquely keyed collection of one entity type.

    Args:
        name: Label used in log lines (e.g. "electronics").
        key: Identifier accessor; defaults to the entity's `id` attribute.
    """

    def __init__(self, name: str = "repository", key: Callable[[T], int] = attrgetter("id")):
        self.name = name
        self._key = key
        self._items: dict[int, T] = {}

    # ── CREATE ────────────────────────────────────────────

    def add(self, item: T) -> Result[None]:
        """
        Insert a new entity.

        Returns:
            Success, or DUPLICATE_KEY if the identifier is already stored.
        """
        item_id = self._key(item)
        if item_id in self._items:
            return Result.failure(
                ErrorKind.DUPLICATE_KEY, f"Item with Id {item_id} already exists."
            )
        self._items[item_id] = item
        logger.info(f"Added #{item_id} to {self.name}")
        return Result.success()

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, item_id: int) -> Result[T]:
        """
        Fetch one entity by identifier.

        Returns:
            Success with the stored entity, or NOT_FOUND.
        """
        item = self._items.get(item_id)
        if item is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"Item with Id {item_id} not found.")
        return Result.success(item)

    def get_all(self) -> tuple[T, ...]:
        """Snapshot of all entities in insertion order."""
        return tuple(self._items.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching `predicate`, or None."""
        return next((item for item in self._items.values() if predicate(item)), None)

    # ── UPDATE ────────────────────────────────────────────

    def update_quantity(self, item_id: int, new_quantity: int) -> Result[T]:
        """
        Replace the stored entity with a copy carrying `new_quantity`.

        Returns:
            Success with the updated entity, INVALID_QUANTITY when
            `new_quantity` is negative, or NOT_FOUND.

        Raises:
            TypeError: If the entity type has no `quantity` field.
        """
        if new_quantity < 0:
            return Result.failure(ErrorKind.INVALID_QUANTITY, "Quantity cannot be negative.")

        found = self.get_by_id(item_id)
        if not found.ok:
            return found

        updated = dataclasses.replace(found.value, quantity=new_quantity)
        self._items[item_id] = updated
        logger.info(f"Updated quantity of #{item_id} in {self.name} to {new_quantity}")
        return Result.success(updated)

    # ── DELETE ────────────────────────────────────────────

    def remove(self, item_id: int) -> Result[None]:
        """
        Delete an entity by identifier.

        Returns:
            Success, or NOT_FOUND if nothing was stored under `item_id`.
        """
        if self._items.pop(item_id, None) is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"Item with Id {item_id} not found.")
        logger.info(f"Removed #{item_id} from {self.name}")
        return Result.success()

    def clear(self) -> None:
        self._items.clear()

    # ── HELPERS ───────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
