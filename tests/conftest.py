"""
Pytest configuration and shared fixtures
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Dict, List, Optional, Sequence

import pytest

from catalog_match.config import reset_settings
from catalog_match.matching import (
    CandidateFilter,
    CandidateRetriever,
    FinalRanker,
    ProductSelector,
)
from catalog_match.models import ContentContext, ProductRecord

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@dataclass
class StoreCall:
    filters: Optional[CandidateFilter]
    order_by: Sequence[str]
    limit: int


class InMemoryProductStore:
    """Product store over a fixed list, mirroring the SQL store's ordering."""

    def __init__(self, products: List[ProductRecord]):
        self.products = list(products)
        self.calls: List[StoreCall] = []

    async def query_active(self, filters, order_by=("admin_priority", "popularity_score"), limit=100):
        self.calls.append(StoreCall(filters, tuple(order_by), limit))

        rows = [p for p in self.products if p.is_active]
        if filters is not None:
            rows = [p for p in rows if filters.matches(p)]

        rows.sort(key=lambda p: p.id)
        rows.sort(
            key=lambda p: tuple(
                float("-inf") if getattr(p, col) is None else getattr(p, col) for col in order_by
            ),
            reverse=True,
        )
        return rows[:limit]


class FailingProductStore:
    """Product store whose reads always fail."""

    def __init__(self, error: Exception):
        self.error = error

    async def query_active(self, filters, order_by=(), limit=100):
        raise self.error


class InMemoryContentStore:
    def __init__(self, contents: Dict[str, ContentContext]):
        self.contents = contents

    async def get_by_slug(self, slug):
        return self.contents.get(slug)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_clock():
    return lambda: NOW


@pytest.fixture
def make_product():
    """Factory for product records with sensible defaults."""
    ids = count(1)

    def _make(**overrides) -> ProductRecord:
        data = {
            "id": next(ids),
            "name": "Generic Item",
            "category": None,
            "description": None,
            "tags": None,
            "admin_priority": 50,
            "popularity_score": 50,
            "last_synced_at": NOW - timedelta(days=1),
            "sync_status": "active",
        }
        data.update(overrides)
        return ProductRecord(**data)

    return _make


@pytest.fixture
def product_store():
    return InMemoryProductStore


@pytest.fixture
def failing_store():
    return FailingProductStore


@pytest.fixture
def make_selector(fixed_clock):
    """Build a selector over in-memory stores with a fixed clock."""

    def _make(
        products: List[ProductRecord],
        contents: Optional[Dict[str, ContentContext]] = None,
        candidate_limit: int = 100,
    ) -> ProductSelector:
        retriever = CandidateRetriever(InMemoryProductStore(products), candidate_limit=candidate_limit)
        return ProductSelector(
            retriever,
            content_store=InMemoryContentStore(contents or {}),
            ranker=FinalRanker(clock=fixed_clock),
        )

    return _make


@pytest.fixture
def electronics_catalog(make_product):
    """A small catalog spanning a few categories."""
    return [
        make_product(
            name="Gaming Laptop Pro",
            category="Electronics",
            description="<p>Powerful gaming laptop with RGB keyboard</p>",
            tags='["gaming", "laptops"]',
            admin_priority=80,
            popularity_score=70,
        ),
        make_product(
            name="Office Laptop Slim",
            category="Electronics",
            description="Lightweight laptop for work",
            admin_priority=60,
            popularity_score=40,
        ),
        make_product(
            name="Wireless Mouse",
            category="Accessories",
            description="Ergonomic mouse for gaming sessions",
            tags="not-json",
            admin_priority=40,
            popularity_score=90,
        ),
        make_product(
            name="Chef Knife",
            category="Kitchen",
            description="Stainless steel knife",
            admin_priority=95,
            popularity_score=20,
        ),
        make_product(
            name="Retired Laptop",
            category="Electronics",
            admin_priority=100,
            sync_status="deleted",
        ),
    ]


@pytest.fixture
def now():
    return NOW
