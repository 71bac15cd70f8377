"""
models/inventory.py
-------------------
Domain model for items tracked by the inventory logger.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class InventoryItem:
    """
    A logged inventory entry.

    Attributes:
        id: Unique item number.
        name: Item name.
        quantity: Units in stock.
        date_added: Date the item was logged.
    """
    id: int
    name: str
    quantity: int
    date_added: date = field(default_factory=date.today)

    def __str__(self) -> str:
        return f"InventoryItem {{ Id={self.id}, Name={self.name}, Qty={self.quantity}, Added={self.date_added} }}"
