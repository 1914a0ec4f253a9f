"""
Integration test fixtures
SQLite-backed async database seeded with a small catalog and blog.
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from catalog_match.db.models import Base, Blog, BlogCategory, Category, ProductIndex

SYNCED_AT = datetime(2026, 1, 14, 12, 0)


def _catalog_rows():
    return [
        ProductIndex(
            id=1,
            name="Gaming Laptop Pro",
            category="Electronics",
            description="<p>Powerful gaming laptop with RGB keyboard</p>",
            tags='["gaming", "laptops"]',
            price=Decimal("1299.00"),
            admin_priority=80,
            popularity_score=70,
            last_synced_at=SYNCED_AT,
        ),
        ProductIndex(
            id=2,
            name="Office Laptop Slim",
            category="Electronics",
            description="Lightweight laptop for work",
            admin_priority=60,
            popularity_score=40,
            last_synced_at=SYNCED_AT,
        ),
        ProductIndex(
            id=3,
            name="Wireless Mouse",
            category="Accessories",
            description="Ergonomic mouse for gaming sessions",
            tags="not-json",
            admin_priority=40,
            popularity_score=90,
            last_synced_at=SYNCED_AT,
        ),
        ProductIndex(
            id=4,
            name="Chef Knife",
            category="Kitchen",
            description="Stainless steel knife",
            admin_priority=95,
            popularity_score=20,
            last_synced_at=SYNCED_AT - timedelta(days=30),
        ),
        ProductIndex(
            id=5,
            name="Retired Laptop",
            category="Electronics",
            admin_priority=100,
            sync_status="deleted",
        ),
    ]


def _content_rows():
    electronics = Category(id=1, name="Electronics", slug="electronics")
    reviews = Category(id=2, name="Reviews", slug="reviews")
    return [
        electronics,
        reviews,
        Blog(
            id=1,
            title="Best gaming laptops",
            slug="best-laptops",
            content="<p>Our favourite gaming laptop picks</p>",
            status=True,
        ),
        Blog(id=2, title="Draft post", slug="draft-post", content="Unfinished", status=False),
        BlogCategory(id=1, blog_id=1, category_id=2),
        BlogCategory(id=2, blog_id=1, category_id=1),
        BlogCategory(id=3, blog_id=2, category_id=1),
    ]


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create a file-backed SQLite engine with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Session factory over the seeded database."""
    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        session.add_all(_catalog_rows())
        await session.flush()
        session.add_all(_content_rows())
        await session.commit()

    return factory


@pytest_asyncio.fixture
async def empty_session_factory(tmp_path):
    """Session factory over a database with no tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}", echo=False)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()
