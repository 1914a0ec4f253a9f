"""
Candidate Retrieval
Fetches a bounded candidate pool for a piece of content, with a popularity fallback.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..models import ContentContext, ProductRecord
from .filters import PRIORITY_ORDER, CandidateFilter
from .stores import ProductStore

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_LIMIT = 100


@dataclass
class CandidatePool:
    """Products fetched for scoring, and whether they came from the fallback path."""

    products: List[ProductRecord] = field(default_factory=list)
    is_fallback: bool = False

    def __len__(self) -> int:
        return len(self.products)


class CandidateRetriever:
    """
    Builds the candidate filter from content signals and queries the product store.

    Only the single most frequent keyword is used for pre-filtering;
    full relevance scoring later uses the whole keyword list.
    """

    def __init__(self, store: ProductStore, candidate_limit: int = DEFAULT_CANDIDATE_LIMIT):
        """
        Initialize candidate retriever.

        Args:
            store: Product store to query
            candidate_limit: Hard cap on the candidate pool size
        """
        self.store = store
        self.candidate_limit = candidate_limit

    def build_filter(self, context: ContentContext, keywords: Sequence[str]) -> CandidateFilter:
        return CandidateFilter(
            categories=list(context.categories),
            keyword=keywords[0] if keywords else None,
        )

    async def retrieve(
        self,
        context: ContentContext,
        keywords: Sequence[str],
        limit: Optional[int] = None,
    ) -> List[ProductRecord]:
        """
        Fetch filtered candidates for content.

        Args:
            context: Content being matched
            keywords: Content keywords, most frequent first
            limit: Pool size (capped at ``candidate_limit``)

        Returns:
            Active products ordered by admin priority then popularity
        """
        limit = min(limit or self.candidate_limit, self.candidate_limit)
        filters = self.build_filter(context, keywords)

        candidates = await self.store.query_active(filters, PRIORITY_ORDER, limit)

        logger.debug(f"Retrieved {len(candidates)} candidates (filter: {filters.describe()})")

        return candidates[:limit]

    async def retrieve_fallback(self, limit: int) -> List[ProductRecord]:
        """Fetch the top active products by admin priority and popularity, unfiltered."""
        products = await self.store.query_active(None, PRIORITY_ORDER, limit)
        return products[:limit]

    async def retrieve_pool(
        self,
        context: ContentContext,
        keywords: Sequence[str],
        fallback_limit: int,
    ) -> CandidatePool:
        """
        Fetch candidates, falling back to popular products when none match.

        Args:
            context: Content being matched
            keywords: Content keywords, most frequent first
            fallback_limit: Number of popular products to fetch on fallback

        Returns:
            CandidatePool flagged with ``is_fallback`` when the fallback path was used
        """
        candidates = await self.retrieve(context, keywords)
        if candidates:
            return CandidatePool(products=candidates)

        logger.warning(
            f"No candidates matched content '{context.title[:50]}', "
            f"falling back to top {fallback_limit} popular products"
        )
        return CandidatePool(products=await self.retrieve_fallback(fallback_limit), is_fallback=True)

    async def retrieve_category(self, category_name: str, limit: int) -> List[ProductRecord]:
        """Fetch active products whose category equals ``category_name`` exactly."""
        filters = CandidateFilter(exact_category=category_name)
        products = await self.store.query_active(filters, PRIORITY_ORDER, limit)
        return products[:limit]
