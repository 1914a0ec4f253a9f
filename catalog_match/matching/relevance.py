"""
Relevance Scoring
Scores a single product against the signals extracted from a piece of content.

Signals are evaluated in a fixed order and each is capped independently:
- Category: +40 when a content category and the product category contain one another
- Name: 10 points per keyword found in the product name (max 30)
- Description: 5 points per keyword found in the description (max 20)
- Tags: 3 points per keyword found in the tags (max 10)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..models import ContentContext, ProductRecord
from .config import DEFAULT_CONFIG, MAX_SCORE, MatchingConfig
from .keywords import KeywordExtractor
from .text import decode_html_entities, significant_words, strip_html

logger = logging.getLogger(__name__)


@dataclass
class RelevanceResult:
    """Relevance score with the reasons that contributed to it."""

    score: float = 0.0
    reasons: List[str] = field(default_factory=list)


def _contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


def count_keyword_matches(keywords: Iterable[str], words: Sequence[str]) -> int:
    """Count keywords that are a substring of, or contain, any of ``words``."""
    if not words:
        return 0
    return sum(1 for kw in keywords if any(_contains_either_way(kw, w) for w in words))


class RelevanceScorer:
    """
    Calculates 0-100 relevance between content and a product.

    A product with no matching signal scores 0 with no reasons.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        extractor: Optional[KeywordExtractor] = None,
    ):
        """
        Initialize relevance scorer.

        Args:
            config: Matching configuration
            extractor: Keyword extractor used when the context has no keywords
        """
        self.config = config or DEFAULT_CONFIG
        self.extractor = extractor or KeywordExtractor(self.config)

    def keywords_for(self, context: ContentContext) -> List[str]:
        """Return supplied keywords, or extract them from the content."""
        if context.keywords is not None:
            return list(context.keywords)
        return self.extractor.extract(context.body, context.title)

    def score(
        self,
        context: ContentContext,
        product: ProductRecord,
        keywords: Optional[Sequence[str]] = None,
    ) -> RelevanceResult:
        """
        Score a product against content.

        Args:
            context: Content being matched
            product: Candidate product
            keywords: Precomputed content keywords (avoids re-extraction per product)

        Returns:
            RelevanceResult with score clamped to [0, 100]
        """
        if keywords is None:
            keywords = self.keywords_for(context)

        cfg = self.config
        result = RelevanceResult()

        # 1. Category
        category = decode_html_entities(product.category or "").lower()
        if category and any(
            _contains_either_way(label.lower(), category) for label in context.categories
        ):
            result.score += cfg.category_points
            result.reasons.append(f"Category match: {product.category}")

        # 2. Product name
        name_words = significant_words(decode_html_entities(product.name), cfg.min_token_length)
        name_matches = count_keyword_matches(keywords, name_words)
        if name_matches > 0:
            result.score += min(cfg.name_cap, name_matches * cfg.name_points)
            result.reasons.append(f"{name_matches} keyword(s) matched in product name")

        # 3. Description
        desc_words = significant_words(strip_html(product.description or ""), cfg.min_token_length)
        desc_matches = count_keyword_matches(keywords, desc_words)
        if desc_matches > 0:
            result.score += min(cfg.description_cap, desc_matches * cfg.description_points)
            result.reasons.append(f"{desc_matches} keyword(s) matched in description")

        # 4. Tags
        tags = [tag.lower() for tag in product.tags]
        tag_matches = count_keyword_matches(keywords, tags)
        if tag_matches > 0:
            result.score += min(cfg.tag_cap, tag_matches * cfg.tag_points)
            result.reasons.append(f"{tag_matches} tag(s) matched")

        result.score = min(MAX_SCORE, result.score)

        return result
