# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student
from gradebook.storage import InMemoryStorage
from gradebook.store import RosterStore

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("Ana", [8, 9, 7, 10, 6], 90),
        Student("Bea", [4, 5, 6, 5, 4], 60),
    ]

@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()

@pytest.fixture
def store(memory_storage) -> RosterStore:
    return RosterStore(memory_storage)
