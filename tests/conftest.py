from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from app.api.deps import build_services
from app.domain.enums import ProductCategory
from app.domain.schemas import NutritionalInfo, Product
from app.main import create_app
from app.tasks.expire import SessionExpiryScheduler

START = datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class ManualExpiryScheduler(SessionExpiryScheduler):
    """Records scheduled callbacks instead of starting timer threads."""

    def __init__(self):
        super().__init__()
        self.callbacks: Dict[str, Callable[[str], None]] = {}
        self.delays: Dict[str, float] = {}

    def schedule(self, key, delay_seconds, callback):
        self.callbacks[key] = callback
        self.delays[key] = delay_seconds

    def cancel(self, key):
        self.delays.pop(key, None)
        return self.callbacks.pop(key, None) is not None

    def pending(self):
        return list(self.callbacks)

    def shutdown(self):
        self.callbacks.clear()
        self.delays.clear()

    def fire(self, key):
        """Simulate the timer elapsing, even when the timer was cancelled."""
        callback = self.callbacks.pop(key, None)
        self.delays.pop(key, None)
        return callback(key) if callback else None


def make_product(pid, price, stock, category=ProductCategory.SMOOTHIE_BOWL, **overrides):
    data = dict(
        id=pid,
        name=f"Product {pid}",
        description=f"Description of {pid}",
        category=category,
        price=Decimal(price),
        currency="USD",
        image_url=f"/images/products/{pid}.jpg",
        in_stock=stock > 0,
        stock_quantity=stock,
        ingredients=[],
        allergens=[],
        tags=[],
        nutritional_info=NutritionalInfo(
            serving_size="1 bowl",
            calories=300,
            protein=10,
            carbohydrates=40,
            fat=8,
            fiber=5,
            sugar=12,
        ),
        created_at=START,
        updated_at=START,
    )
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualExpiryScheduler()


@pytest.fixture
def services(clock, scheduler):
    services = build_services(clock=clock, scheduler=scheduler, seed=False, forward_url=None)
    store = services.catalog.repo.store
    for product in (
        make_product(
            "P1", "10.00", 5,
            name="Acai Bowl",
            description="Berry blend with granola",
            tags=["gluten-free", "bestseller"],
            ingredients=["acai", "banana"],
        ),
        make_product(
            "P2", "4.50", 10,
            category=ProductCategory.BEVERAGES,
            name="Matcha Latte",
            description="Whisked matcha with oat milk",
            tags=["drink", "caffeine"],
            ingredients=["matcha", "oat milk"],
        ),
        make_product(
            "P3", "8.49", 0,
            category=ProductCategory.GRANOLA_MUESLI,
            name="Nut Granola",
            tags=["crunchy"],
        ),
    ):
        store.put(product.id, product)
    return services


@pytest.fixture
def events(services):
    received = []
    services.webhooks.subscribe(received.append)
    return received


@pytest.fixture
def client(services):
    return TestClient(create_app(services))
