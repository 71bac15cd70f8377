"""
services/warehouse_service.py
-----------------------------
Business logic for warehouse stock held in two repositories, one for
electronics and one for groceries.
"""

from models.result import Result
from models.warehouse import ElectronicItem, GroceryItem, WarehouseItem
from repositories.repository import Repository
from utils.logger import get_logger

logger = get_logger(__name__)


class WarehouseService:
    """Manages electronics and grocery stock."""

    def __init__(self):
        self.electronics: Repository[ElectronicItem] = Repository(name="electronics")
        self.groceries: Repository[GroceryItem] = Repository(name="groceries")

    def increase_stock(self, repo: Repository, item_id: int, amount: int) -> Result[WarehouseItem]:
        """
        Add `amount` units to an item's stock.

        Returns:
            Success with the updated item, NOT_FOUND, or INVALID_QUANTITY
            when the resulting quantity would be negative.
        """
        found = repo.get_by_id(item_id)
        if not found.ok:
            return found
        return repo.update_quantity(item_id, found.value.quantity + amount)

    def remove_item(self, repo: Repository, item_id: int) -> Result[None]:
        return repo.remove(item_id)

    @staticmethod
    def format_items(title: str, repo: Repository) -> str:
        lines = [f"=== {title} ==="]
        lines.extend(str(item) for item in repo.get_all())
        return "\n".join(lines)

    def total_units(self) -> int:
        """Units in stock across both repositories."""
        return sum(i.quantity for i in self.electronics.get_all()) + sum(
            i.quantity for i in self.groceries.get_all()
        )
