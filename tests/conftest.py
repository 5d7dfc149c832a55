"""Shared test fixtures and configuration."""
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.dependencies import get_restaurant_store
from app.services.restaurant.models import MenuItemCreate
from app.services.restaurant.notifications import InMemoryNotificationSink
from app.services.restaurant.seed import load_seed
from app.services.restaurant.store import RestaurantStore
from tests.helpers import SUCCESS_DRAW, FakeClock, FixedDraw, RecordingSleep


@pytest.fixture
def test_seed_path():
    """Return path to test seed YAML file."""
    return Path(__file__).parent / "fixtures" / "test_seed.yaml"


@pytest.fixture
def test_seed(test_seed_path):
    """Seed data loaded from the test fixture."""
    return load_seed(str(test_seed_path))


@pytest.fixture
def clock():
    """Deterministic clock starting after all seed timestamps."""
    return FakeClock(datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def draw():
    """Random source fixed to the success branch unless a test resets it."""
    return FixedDraw(SUCCESS_DRAW)


@pytest.fixture
def sleep():
    """Recording async delay."""
    return RecordingSleep()


@pytest.fixture
def notifier():
    """Notification sink that keeps history."""
    return InMemoryNotificationSink()


@pytest.fixture
def store(test_seed, notifier, clock, draw, sleep):
    """Restaurant store with injected collaborators."""
    return RestaurantStore(
        test_seed.menu_items,
        test_seed.orders,
        notifier=notifier,
        clock=clock,
        rng=draw,
        sleep=sleep,
    )


@pytest.fixture
def new_item_fields():
    """Fields for a menu item that is not in the seed."""
    return MenuItemCreate(
        name="Caesar Salad",
        description="Romaine, croutons and parmesan",
        category="Appetizer",
        price="9.25",
        ingredients=["romaine", "croutons", "parmesan"],
        is_available=True,
        preparation_time=8,
        image_url="https://images.example.com/salad.jpg",
    )


@pytest.fixture
def test_client(store):
    """Create FastAPI test client backed by the test store."""
    app.dependency_overrides[get_restaurant_store] = lambda: store

    with TestClient(app) as client:
        yield client

    # Clear overrides
    app.dependency_overrides.clear()
