"""Shared pytest fixtures and configuration for all tests."""

import os
from decimal import Decimal

import pytest

# Keep src/main.py from building the real application at import time
os.environ.setdefault("ENVIRONMENT", "test")

from little_lemon_menu.models.menu_models import MenuItem  # noqa: E402


@pytest.fixture
def mock_menu_payload() -> dict:
    """Fixture providing a remote menu payload in the upstream format."""
    return {
        "menu": [
            {
                "name": "Greek Salad",
                "price": 12.99,
                "description": "Our delicious salad is served with Feta cheese and peeled cucumber.",
                "image": "greekSalad.jpg",
                "category": "starters",
            },
            {
                "name": "Bruschetta",
                "price": 7.99,
                "description": "Delicious grilled bread rubbed with garlic and topped with olive oil.",
                "image": "bruschetta.jpg",
                "category": "starters",
            },
            {
                "name": "Grilled Fish",
                "price": 20.0,
                "description": "Fish marinated in fresh orange and lemon juice.",
                "image": "grilledFish.jpg",
            },
            {
                "name": "Lemon Dessert",
                "price": 4.99,
                "description": "Light and fluffy traditional homemade Italian Lemon and ricotta cake.",
                "image": "lemonDessert.jpg",
                "category": "desserts",
            },
        ]
    }


@pytest.fixture
def sample_items() -> list[MenuItem]:
    """Fixture providing a small normalized menu list."""
    return [
        MenuItem(
            name="Greek Salad",
            price=Decimal("12.00"),
            description="Feta and cucumber",
            image="greekSalad.jpg",
            category="starters",
        ),
        MenuItem(
            name="Bruschetta",
            price=Decimal("7.00"),
            description="Grilled bread with garlic",
            image="bruschetta.jpg",
            category="starters",
        ),
        MenuItem(
            name="Lemon Dessert",
            price=Decimal("5.00"),
            description="Italian ricotta cake",
            image="lemonDessert.jpg",
            category="desserts",
        ),
    ]


@pytest.fixture
def database_url(tmp_path) -> str:
    """Fixture providing a URL for a fresh SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'little_lemon.db'}"
