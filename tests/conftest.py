"""Shared fixtures for the record-keeping tests."""

from datetime import date

import pytest

from models.inventory import InventoryItem
from models.student import Student
from models.warehouse import ElectronicItem, GroceryItem
from repositories.repository import Repository


@pytest.fixture
def electronics():
    """A repository seeded with two electronic items."""
    repo: Repository[ElectronicItem] = Repository(name="electronics")
    repo.add(ElectronicItem(1, "Laptop", 10, "Apple", 24))
    repo.add(ElectronicItem(2, "Smartphone", 25, "Samsung", 12))
    return repo


@pytest.fixture
def grocery():
    return GroceryItem(1, "Milk", 80, date(2026, 11, 2))


@pytest.fixture
def inventory_items():
    return [
        InventoryItem(1, "Monitor", 50, date(2026, 10, 19)),
        InventoryItem(2, "Notebook", 150, date(2026, 10, 16)),
        InventoryItem(3, "Office Chair", 25, date(2026, 10, 9)),
    ]


@pytest.fixture
def students():
    return [
        Student(101, "Alice Smith", 84),
        Student(102, "Bernard Mensah", 73),
        Student(103, "Cynthia Ofori", 65),
        Student(104, "David Owusu", 49),
    ]
