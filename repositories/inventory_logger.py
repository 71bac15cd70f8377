"""
repositories/inventory_logger.py
--------------------------------
Inventory log backed by a generic `Repository` and persisted as a single
JSON file. `save()` writes the whole collection; `load()` replaces the
in-memory collection with the file's contents.
"""

import json
from datetime import date

from models.inventory import InventoryItem
from models.result import ErrorKind, Result
from repositories.repository import Repository
from utils.logger import get_logger

logger = get_logger(__name__)


class InventoryLogger:
    """Keeps inventory items in memory and round-trips them through a JSON file."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        self._repo: Repository[InventoryItem] = Repository(name="inventory")

    def add(self, item: InventoryItem) -> Result[None]:
        return self._repo.add(item)

    def get_all(self) -> tuple[InventoryItem, ...]:
        return self._repo.get_all()

    # ── SAVE ──────────────────────────────────────────────

    def save(self) -> Result[int]:
        """
        Write every item to `file_path` as an indented JSON array.
        The file is overwritten in place; a failed write may leave it truncated.

        Returns:
            Success with the number of items written, or IO_FAILURE.
        """
        records = [self._item_to_record(item) for item in self._repo.get_all()]
        try:
            with open(self.file_path, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save inventory to {self.file_path}: {e}")
            return Result.failure(ErrorKind.IO_FAILURE, f"Could not write {self.file_path}: {e}")
        logger.info(f"Saved {len(records)} items to {self.file_path}")
        return Result.success(len(records))

    # ── LOAD ──────────────────────────────────────────────

    def load(self) -> Result[int]:
        """
        Replace the in-memory items with the contents of `file_path`.
        On any failure the collection is left empty.

        Returns:
            Success with the number of items loaded, FILE_ABSENT when the
            file does not exist, or FILE_UNREADABLE when it cannot be read
            or its contents are malformed.
        """
        self._repo.clear()
        try:
            with open(self.file_path, "r", encoding="utf-8") as fh:
                records = json.load(fh)
        except FileNotFoundError:
            logger.warning(f"Inventory file not found: {self.file_path}")
            return Result.failure(ErrorKind.FILE_ABSENT, f"File not found: {self.file_path}")
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.error(f"Failed to read inventory from {self.file_path}: {e}")
            return Result.failure(ErrorKind.FILE_UNREADABLE, f"Could not read {self.file_path}: {e}")

        if not isinstance(records, list):
            return self._reject("top-level JSON value is not a list")

        for index, record in enumerate(records):
            try:
                item = self._record_to_item(record)
            except (KeyError, TypeError, ValueError) as e:
                return self._reject(f"record {index} is malformed ({e!r})")
            added = self._repo.add(item)
            if not added.ok:
                return self._reject(f"record {index}: {added.error.message}")

        logger.info(f"Loaded {len(self._repo)} items from {self.file_path}")
        return Result.success(len(self._repo))

    # ── HELPERS ───────────────────────────────────────────

    def _reject(self, reason: str) -> Result[int]:
        self._repo.clear()
        logger.error(f"Malformed inventory file {self.file_path}: {reason}")
        return Result.failure(ErrorKind.FILE_UNREADABLE, f"Malformed {self.file_path}: {reason}")

    @staticmethod
    def _item_to_record(item: InventoryItem) -> dict:
        """Convert an InventoryItem to a JSON-ready dict."""
        return {
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
            "date_added": item.date_added.isoformat(),
        }

    @staticmethod
    def _record_to_item(record: dict) -> InventoryItem:
        """Convert a decoded JSON object back to an InventoryItem."""
        if not isinstance(record, dict):
            raise TypeError(f"expected an object, got {type(record).__name__}")
        item_id, name, quantity = record["id"], record["name"], record["quantity"]
        # bool is an int subclass; JSON true/false is not a valid id or quantity
        if type(item_id) is not int or type(quantity) is not int:
            raise TypeError("id and quantity must be integers")
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        return InventoryItem(
            id=item_id,
            name=name,
            quantity=quantity,
            date_added=date.fromisoformat(record["date_added"]),
        )
