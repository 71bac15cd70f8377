"""
handlers/inventory_handler.py
-----------------------------
Inventory demo: seed items and save them, then start a fresh logger on
the same file, load it back, print it, and export it as CSV.
"""

from datetime import date, timedelta

from config import EXPORT_DIR, INVENTORY_LOG_PATH
from handlers.common import check, write_buffer
from models.inventory import InventoryItem
from repositories.inventory_logger import InventoryLogger
from services.export_service import ExportService
from utils.logger import get_logger

logger = get_logger(__name__)


def seed_inventory(inventory: InventoryLogger) -> None:
    today = date.today()
    items = [
        InventoryItem(1, "Monitor", 50, today),
        InventoryItem(2, "Notebook", 150, today - timedelta(days=3)),
        InventoryItem(3, "Office Chair", 25, today - timedelta(days=10)),
        InventoryItem(4, "Table", 30, today),
        InventoryItem(5, "Printer", 5, today - timedelta(days=1)),
    ]
    for item in items:
        check(inventory.add(item), logger, f"Seed item #{item.id}")


def run_inventory(path: str = INVENTORY_LOG_PATH, export_dir: str = EXPORT_DIR) -> InventoryLogger:
    """Run the inventory demo and return the logger restored from disk."""
    first = InventoryLogger(path)
    seed_inventory(first)
    if check(first.save(), logger, "SaveToFile"):
        print("Data saved.")

    # New session: nothing in memory until loaded
    second = InventoryLogger(path)
    check(second.load(), logger, "LoadFromFile")

    print("=== Inventory Items ===")
    for item in second.get_all():
        print(item)

    if second.get_all():
        buffer = ExportService().inventory_to_csv(list(second.get_all()))
        write_buffer(buffer, export_dir, "inventory.csv", logger)
    return second
