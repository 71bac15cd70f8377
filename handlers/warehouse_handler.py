"""
handlers/warehouse_handler.py
-----------------------------
Warehouse demo: seed electronics and groceries, print them, then walk
through the error scenarios (duplicate id, missing id, negative quantity).
Delegates all logic to WarehouseService.
"""

import calendar
from datetime import date, timedelta

from handlers.common import check
from models.warehouse import ElectronicItem, GroceryItem
from services.warehouse_service import WarehouseService
from utils.logger import get_logger

logger = get_logger(__name__)


def _add_months(d: date, months: int) -> date:
    month_index = d.month - 1 + months
    year, month = d.year + month_index // 12, month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def seed_warehouse(service: WarehouseService) -> None:
    today = date.today()
    electronics = [
        ElectronicItem(1, "Laptop", 10, "Apple", 24),
        ElectronicItem(2, "Smartphone", 25, "Samsung", 12),
        ElectronicItem(3, "Headphones", 40, "JBL", 6),
    ]
    groceries = [
        GroceryItem(1, "Rice 5kg", 50, _add_months(today, 12)),
        GroceryItem(2, "Milk", 80, today + timedelta(days=14)),
        GroceryItem(3, "Eggs (Dozen)", 30, today + timedelta(days=10)),
    ]
    for item in electronics:
        check(service.electronics.add(item), logger, f"Seed electronic #{item.id}")
    for item in groceries:
        check(service.groceries.add(item), logger, f"Seed grocery #{item.id}")


def run_warehouse() -> WarehouseService:
    """Run the warehouse demo and return the service."""
    service = WarehouseService()
    seed_warehouse(service)

    print(service.format_items("Grocery Items", service.groceries))
    print()
    print(service.format_items("Electronic Items", service.electronics))

    restocked = service.increase_stock(service.electronics, 3, 10)
    if check(restocked, logger, "IncreaseStock"):
        print(f"Stock increased for Id=3. New Qty={restocked.value.quantity}")

    print("\n=== Exception Scenarios ===")
    check(
        service.electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12)),
        logger,
        "AddItem",
    )
    if check(service.remove_item(service.groceries, 999), logger, "RemoveItem"):
        print("Removed item with Id=999.")
    check(service.groceries.update_quantity(1, -5), logger, "UpdateQuantity")

    print(f"\nTotal units in stock: {service.total_units()}")
    return service
