"""
Product Selector
Public entry points for matching products to content.

Workflow:
1. Extract keywords from the content (unless supplied)
2. Retrieve a candidate pool (or the popular-products fallback)
3. Score relevance per candidate
4. Blend relevance with business signals into a final score
5. Filter by minimum relevance, sort, truncate
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..config import get_settings
from ..db.session import get_session_factory
from ..errors import InvalidOptionsError
from ..models import ContentContext, ProductMatch, ProductRecord, SelectionOptions
from .config import CATEGORY_BROWSE_RELEVANCE, FALLBACK_REASON, FALLBACK_RELEVANCE
from .ranking import FinalRanker
from .relevance import RelevanceScorer
from .retrieval import CandidateRetriever
from .stores import ContentStore, SqlContentStore, SqlProductStore

logger = logging.getLogger(__name__)

OptionsLike = Union[SelectionOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> SelectionOptions:
    """Validate caller options, filling defaults from settings."""
    if options is None:
        return SelectionOptions()
    if isinstance(options, SelectionOptions):
        return options
    try:
        return SelectionOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidOptionsError(
            "Invalid selection options", details={"errors": e.errors(include_url=False)}
        ) from e


def sort_matches(matches: List[ProductMatch]) -> List[ProductMatch]:
    """Sort by final score descending (stable for ties)."""
    return sorted(matches, key=lambda m: m.final_score, reverse=True)


class ProductSelector:
    """
    Selects and ranks products for contextual display.

    Stateless between calls: every selection reads a fresh snapshot from
    the stores and nothing is cached.
    """

    def __init__(
        self,
        retriever: CandidateRetriever,
        content_store: Optional[ContentStore] = None,
        scorer: Optional[RelevanceScorer] = None,
        ranker: Optional[FinalRanker] = None,
    ):
        """
        Initialize product selector.

        Args:
            retriever: Candidate retriever over the product store
            content_store: Content store for slug lookups
            scorer: Relevance scorer
            ranker: Final ranker
        """
        self.retriever = retriever
        self.content_store = content_store
        self.scorer = scorer or RelevanceScorer()
        self.ranker = ranker or FinalRanker(self.scorer.config)

    def _fixed_match(self, product: ProductRecord, relevance: float, reason: str) -> ProductMatch:
        return ProductMatch(
            product=product,
            relevance_score=relevance,
            final_score=self.ranker.final_score(product, relevance),
            match_reasons=(reason,),
        )

    async def select_for_content(
        self, context: ContentContext, options: OptionsLike = None
    ) -> List[ProductMatch]:
        """
        Select products relevant to a piece of content.

        Args:
            context: Content to match against
            options: Selection options (max_products, min_relevance_score, placement)

        Returns:
            Matches sorted by final score, at most ``max_products`` long
        """
        opts = resolve_options(options)
        keywords = self.scorer.keywords_for(context)

        pool = await self.retriever.retrieve_pool(context, keywords, opts.max_products)

        if pool.is_fallback:
            # Fallback matches skip scoring and the relevance threshold
            matches = [
                self._fixed_match(p, FALLBACK_RELEVANCE, FALLBACK_REASON) for p in pool.products
            ]
        else:
            matches = []
            for product in pool.products:
                relevance = self.scorer.score(context, product, keywords)
                if relevance.score < opts.min_relevance_score:
                    continue
                matches.append(
                    ProductMatch(
                        product=product,
                        relevance_score=relevance.score,
                        final_score=self.ranker.final_score(product, relevance.score),
                        match_reasons=tuple(relevance.reasons),
                    )
                )

        selected = sort_matches(matches)[: opts.max_products]

        logger.info(
            f"Selected {len(selected)} products for '{context.title[:50]}' "
            f"(candidates={len(pool)}, fallback={pool.is_fallback}, placement={opts.placement})"
        )

        return selected

    async def select_for_content_by_slug(
        self, slug: str, options: OptionsLike = None
    ) -> List[ProductMatch]:
        """
        Select products for published content identified by slug.

        Returns an empty list when the slug does not resolve.
        """
        if self.content_store is None:
            raise RuntimeError("ProductSelector was created without a content store")

        opts = resolve_options(options)
        context = await self.content_store.get_by_slug(slug)
        if context is None:
            logger.info(f"No published content for slug '{slug}'")
            return []

        return await self.select_for_content(context, opts)

    async def select_for_category(
        self, category_name: str, options: OptionsLike = None
    ) -> List[ProductMatch]:
        """
        Select products from a single category, without relevance scoring.

        Every product gets a fixed relevance of 50; ``min_relevance_score`` is ignored.
        """
        opts = resolve_options(options)
        products = await self.retriever.retrieve_category(category_name, opts.max_products * 2)

        matches = [
            self._fixed_match(p, CATEGORY_BROWSE_RELEVANCE, f"Category match: {category_name}")
            for p in products
        ]
        selected = sort_matches(matches)[: opts.max_products]

        logger.info(
            f"Selected {len(selected)} products for category '{category_name}' "
            f"(candidates={len(products)}, placement={opts.placement})"
        )

        return selected


def create_product_selector(session_factory: Optional[async_sessionmaker] = None) -> ProductSelector:
    """
    Create a selector over the SQL product and content stores.

    Args:
        session_factory: Async session factory (defaults to the one built from settings)

    Returns:
        ProductSelector wired to ``SqlProductStore`` and ``SqlContentStore``
    """
    settings = get_settings()
    session_factory = session_factory or get_session_factory()

    retriever = CandidateRetriever(
        SqlProductStore(session_factory), candidate_limit=settings.candidate_pool_limit
    )
    return ProductSelector(retriever, content_store=SqlContentStore(session_factory))
