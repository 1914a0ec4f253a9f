"""
Product and Content Stores
Read-only collaborators the matching engine fetches from.
"""

import logging
from typing import List, Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..db.models import Blog, BlogCategory, Category, ProductIndex
from ..errors import StoreUnavailableError
from ..models import ACTIVE_STATUS, ContentContext, ProductRecord
from .filters import PRIORITY_ORDER, CandidateFilter

logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    """Source of active products."""

    async def query_active(
        self,
        filters: Optional[CandidateFilter],
        order_by: Sequence[str] = PRIORITY_ORDER,
        limit: int = 100,
    ) -> List[ProductRecord]:
        """Return up to ``limit`` active products passing ``filters``, sorted descending by ``order_by``."""
        ...


class ContentStore(Protocol):
    """Source of published content."""

    async def get_by_slug(self, slug: str) -> Optional[ContentContext]:
        """Return the published item for ``slug`` with its category labels, or None."""
        ...


class SqlProductStore:
    """
    Product store backed by the ``product_index`` table.

    Opens one session per query from the given factory.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def query_active(
        self,
        filters: Optional[CandidateFilter],
        order_by: Sequence[str] = PRIORITY_ORDER,
        limit: int = 100,
    ) -> List[ProductRecord]:
        stmt = select(ProductIndex).where(ProductIndex.sync_status == ACTIVE_STATUS)
        if filters is not None and not filters.is_empty:
            stmt = stmt.where(filters.to_clause())

        ordering = [getattr(ProductIndex, column).desc() for column in order_by]
        stmt = stmt.order_by(*ordering, ProductIndex.id).limit(limit)

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to query product index: {e}", exc_info=True)
            raise StoreUnavailableError("ProductStore", str(e)) from e

        return [ProductRecord.model_validate(row) for row in rows]


class SqlContentStore:
    """
    Content store backed by the ``blogs`` table.

    Only published articles resolve; category names are aggregated
    distinct, in first-seen order.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def get_by_slug(self, slug: str) -> Optional[ContentContext]:
        blog_stmt = select(Blog).where(Blog.slug == slug, Blog.status.is_(True))
        categories_stmt = (
            select(Category.name)
            .join(BlogCategory, BlogCategory.category_id == Category.id)
            .join(Blog, Blog.id == BlogCategory.blog_id)
            .where(Blog.slug == slug)
            .order_by(BlogCategory.id)
        )

        try:
            async with self.session_factory() as session:
                blog = (await session.execute(blog_stmt)).scalar_one_or_none()
                if blog is None:
                    return None
                category_names = (await session.execute(categories_stmt)).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load content '{slug}': {e}", exc_info=True)
            raise StoreUnavailableError("ContentStore", str(e), {"slug": slug}) from e

        return ContentContext(
            title=blog.title,
            body=blog.content or "",
            categories=category_names,
        )
