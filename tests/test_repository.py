"""
Tests for the generic in-memory Repository.
"""

import pytest

from models.patient import Patient
from models.result import ErrorKind
from models.warehouse import ElectronicItem
from repositories.repository import Repository


class TestAddAndGet:
    """Insertion and lookup by identifier."""

    def test_get_returns_inserted_entities(self):
        repo: Repository[Patient] = Repository(name="patients")
        patients = [Patient(i, f"Patient {i}", 20 + i, "Female") for i in range(1, 6)]
        for p in patients:
            assert repo.add(p).ok

        for p in patients:
            found = repo.get_by_id(p.id)
            assert found.ok
            assert found.value is p

    def test_duplicate_insert_is_rejected(self, electronics):
        result = electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12))

        assert not result.ok
        assert result.error.kind is ErrorKind.DUPLICATE_KEY
        assert "1" in result.error.message
        # First entity still stored
        assert electronics.get_by_id(1).value.name == "Laptop"
        assert len(electronics) == 2

    def test_get_missing_is_not_found(self, electronics):
        result = electronics.get_by_id(42)

        assert not result.ok
        assert result.value is None
        assert result.error.kind is ErrorKind.NOT_FOUND

    def test_custom_key_accessor(self):
        repo = Repository(name="by-age", key=lambda p: p.age)
        assert repo.add(Patient(1, "A", 30, "Male")).ok
        assert not repo.add(Patient(2, "B", 30, "Female")).ok
        assert 30 in repo


class TestSnapshot:
    """get_all() returns a decoupled, ordered snapshot."""

    def test_insertion_order(self, electronics):
        assert [i.id for i in electronics.get_all()] == [1, 2]

    def test_snapshot_not_affected_by_later_mutation(self, electronics):
        snapshot = electronics.get_all()
        electronics.remove(1)
        electronics.add(ElectronicItem(9, "Speaker", 3, "JBL", 6))

        assert [i.id for i in snapshot] == [1, 2]
        assert isinstance(snapshot, tuple)

    def test_find_by_predicate(self, electronics):
        assert electronics.find(lambda i: i.brand == "Samsung").id == 2
        assert electronics.find(lambda i: i.brand == "Sony") is None


class TestRemove:
    def test_remove_existing(self, electronics):
        assert electronics.remove(1).ok
        assert 1 not in electronics
        assert len(electronics) == 1

    def test_remove_missing_leaves_collection_unchanged(self, electronics):
        before = electronics.get_all()
        result = electronics.remove(999)

        assert result.error.kind is ErrorKind.NOT_FOUND
        assert electronics.get_all() == before


class TestUpdateQuantity:
    def test_update_replaces_stored_quantity(self, electronics):
        result = electronics.update_quantity(1, 3)

        assert result.ok
        assert result.value.quantity == 3
        assert electronics.get_by_id(1).value.quantity == 3
        # Other fields untouched
        assert electronics.get_by_id(1).value.brand == "Apple"

    def test_negative_quantity_rejected(self, electronics):
        result = electronics.update_quantity(1, -1)

        assert result.error.kind is ErrorKind.INVALID_QUANTITY
        assert electronics.get_by_id(1).value.quantity == 10

    def test_negative_quantity_checked_before_lookup(self, electronics):
        result = electronics.update_quantity(999, -1)
        assert result.error.kind is ErrorKind.INVALID_QUANTITY

    def test_update_missing_is_not_found(self, electronics):
        result = electronics.update_quantity(999, 5)
        assert result.error.kind is ErrorKind.NOT_FOUND

    def test_zero_is_a_valid_quantity(self, electronics):
        assert electronics.update_quantity(2, 0).value.quantity == 0

    def test_entity_without_quantity_raises(self):
        repo: Repository[Patient] = Repository(name="patients")
        repo.add(Patient(1, "A", 30, "Male"))
        with pytest.raises(TypeError):
            repo.update_quantity(1, 5)


class TestClear:
    def test_clear_empties_repository(self, electronics):
        electronics.clear()
        assert len(electronics) == 0
        assert electronics.get_all() == ()
