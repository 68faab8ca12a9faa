"""
Shared pytest fixtures for maxweight tests.
"""
from pathlib import Path
from typing import Callable, List

import pytest

from maxweight.business_objects.items import FoodItem

# Test data
PICNIC = [
    ("bread", 100.0, 4.0),
    ("wine", 150.0, 5.0),
    ("cheese", 60.0, 3.0),
]

PANTRY = [
    ("oats", 150.0, 2.0),
    ("rice", 200.0, 7.0),
    ("beans", 120.0, 6.0),
    ("jam", 250.0, 3.5),
    ("nuts", 90.0, 1.5),
    ("melon", 40.0, 9.0),
    ("butter", 300.0, 4.0),
]


def make_foods(rows) -> List[FoodItem]:
    return [FoodItem(name=n, calories=c, weight=w) for n, c, w in rows]


@pytest.fixture
def picnic() -> List[FoodItem]:
    """bread / wine / cheese catalog."""
    return make_foods(PICNIC)


@pytest.fixture
def pantry() -> List[FoodItem]:
    """Seven-food catalog with whole-number calories."""
    return make_foods(PANTRY)


@pytest.fixture
def foods_from() -> Callable[..., List[FoodItem]]:
    """Factory building a catalog from (name, calories, weight) rows."""
    return make_foods


@pytest.fixture
def write_db(tmp_path: Path) -> Callable[[str], str]:
    """Write a food database file and return its path."""

    def _write(content: str, name: str = "food.csv") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
