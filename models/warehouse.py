"""
models/warehouse.py
-------------------
Domain models for warehouse stock. Items come in a closed set of kinds;
each record carries its `kind` and display formatting is looked up by it.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Union


class ItemKind(str, Enum):
    ELECTRONIC = "electronic"
    GROCERY = "grocery"


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int
    kind: ItemKind = ItemKind.ELECTRONIC

    def __str__(self) -> str:
        return format_item(self)


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date
    kind: ItemKind = ItemKind.GROCERY

    def __str__(self) -> str:
        return format_item(self)


WarehouseItem = Union[ElectronicItem, GroceryItem]


def _format_electronic(item: ElectronicItem) -> str:
    return (
        f"ElectronicItem {{ Id={item.id}, Name={item.name}, Brand={item.brand}, "
        f"Warranty={item.warranty_months}m, Qty={item.quantity} }}"
    )


def _format_grocery(item: GroceryItem) -> str:
    return (
        f"GroceryItem {{ Id={item.id}, Name={item.name}, "
        f"Expiry={item.expiry_date}, Qty={item.quantity} }}"
    )


_FORMATTERS: dict[ItemKind, Callable] = {
    ItemKind.ELECTRONIC: _format_electronic,
    ItemKind.GROCERY: _format_grocery,
}


def format_item(item: WarehouseItem) -> str:
    """Render a warehouse item according to its `kind`."""
    return _FORMATTERS[item.kind](item)
