"""
Tests for InventoryLogger JSON save/load.
"""

import json

import pytest

from models.inventory import InventoryItem
from models.result import ErrorKind
from repositories.inventory_logger import InventoryLogger


def _saved_logger(path, items):
    inventory = InventoryLogger(str(path))
    for item in items:
        assert inventory.add(item).ok
    assert inventory.save().ok
    return inventory


class TestSaveLoad:
    def test_round_trip(self, tmp_path, inventory_items):
        path = tmp_path / "inventory_log.json"
        saved = _saved_logger(path, inventory_items)

        restored = InventoryLogger(str(path))
        result = restored.load()

        assert result.ok
        assert result.value == 3
        assert restored.get_all() == saved.get_all()

    def test_file_format(self, tmp_path, inventory_items):
        path = tmp_path / "inventory_log.json"
        _saved_logger(path, inventory_items[:1])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [
            {"id": 1, "name": "Monitor", "quantity": 50, "date_added": "2026-10-19"}
        ]

    def test_load_replaces_existing_items(self, tmp_path, inventory_items):
        path = tmp_path / "inventory_log.json"
        _saved_logger(path, inventory_items[:2])

        inventory = InventoryLogger(str(path))
        inventory.add(InventoryItem(99, "Stapler", 4))
        assert inventory.load().ok
        assert [i.id for i in inventory.get_all()] == [1, 2]

    def test_duplicate_add_rejected(self, tmp_path, inventory_items):
        inventory = InventoryLogger(str(tmp_path / "x.json"))
        inventory.add(inventory_items[0])
        result = inventory.add(InventoryItem(1, "Other", 1))
        assert result.error.kind is ErrorKind.DUPLICATE_KEY

    def test_save_empty_collection(self, tmp_path):
        path = tmp_path / "empty.json"
        assert InventoryLogger(str(path)).save().value == 0
        assert json.loads(path.read_text()) == []


class TestLoadFailures:
    def test_missing_file(self, tmp_path):
        inventory = InventoryLogger(str(tmp_path / "nope.json"))
        inventory.add(InventoryItem(7, "Leftover", 1))

        result = inventory.load()

        assert result.error.kind is ErrorKind.FILE_ABSENT
        assert inventory.get_all() == ()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{not json", encoding="utf-8")

        inventory = InventoryLogger(str(path))
        result = inventory.load()

        assert result.error.kind is ErrorKind.FILE_UNREADABLE
        assert inventory.get_all() == ()

    def test_top_level_not_a_list(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        assert InventoryLogger(str(path)).load().error.kind is ErrorKind.FILE_UNREADABLE

    def test_record_missing_field(self, tmp_path):
        path = tmp_path / "missing.json"
        path.write_text(
            json.dumps([
                {"id": 1, "name": "Monitor", "quantity": 50, "date_added": "2026-10-19"},
                {"id": 2, "name": "Notebook", "date_added": "2026-10-19"},
            ]),
            encoding="utf-8",
        )
        inventory = InventoryLogger(str(path))
        result = inventory.load()

        assert result.error.kind is ErrorKind.FILE_UNREADABLE
        # Partially loaded items are discarded
        assert inventory.get_all() == ()

    def test_bad_date(self, tmp_path):
        path = tmp_path / "date.json"
        path.write_text(
            json.dumps([{"id": 1, "name": "Monitor", "quantity": 5, "date_added": "yesterday"}]),
            encoding="utf-8",
        )
        assert InventoryLogger(str(path)).load().error.kind is ErrorKind.FILE_UNREADABLE

    def test_duplicate_ids_in_file(self, tmp_path):
        record = {"id": 1, "name": "Monitor", "quantity": 5, "date_added": "2026-10-19"}
        path = tmp_path / "dupes.json"
        path.write_text(json.dumps([record, record]), encoding="utf-8")

        inventory = InventoryLogger(str(path))
        assert inventory.load().error.kind is ErrorKind.FILE_UNREADABLE
        assert inventory.get_all() == ()

    @pytest.mark.parametrize(
        "field, value",
        [
            ("id", True),
            ("id", "1"),
            ("quantity", False),
            ("quantity", 5.0),
            ("name", None),
            ("name", 42),
        ],
    )
    def test_wrongly_typed_field(self, tmp_path, field, value):
        record = {"id": 1, "name": "Monitor", "quantity": 5, "date_added": "2026-10-19"}
        record[field] = value
        path = tmp_path / "typed.json"
        path.write_text(json.dumps([record]), encoding="utf-8")

        inventory = InventoryLogger(str(path))
        result = inventory.load()

        assert result.error.kind is ErrorKind.FILE_UNREADABLE
        assert inventory.get_all() == ()

    def test_path_is_directory(self, tmp_path):
        inventory = InventoryLogger(str(tmp_path))
        assert inventory.load().error.kind is ErrorKind.FILE_UNREADABLE


class TestSaveFailures:
    def test_save_into_missing_directory(self, tmp_path, inventory_items):
        inventory = InventoryLogger(str(tmp_path / "no" / "such" / "dir.json"))
        inventory.add(inventory_items[0])
        assert inventory.save().error.kind is ErrorKind.IO_FAILURE
