"""
Final Ranking
Blends content relevance with business signals into one ordering value.

Ranking Formula:
score = 0.50 × relevance + 0.25 × admin_priority + 0.15 × popularity + 0.10 × recency
"""

import logging
import math
from datetime import datetime, timezone
from typing import Callable, Optional

from ..models import ProductRecord
from .config import (
    DEFAULT_ADMIN_PRIORITY,
    DEFAULT_CONFIG,
    DEFAULT_POPULARITY,
    DEFAULT_RECENCY,
    MAX_SCORE,
    MatchingConfig,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def clamp(value: float, low: float = 0, high: float = MAX_SCORE) -> float:
    return max(low, min(high, value))


def round_score(value: float) -> float:
    """Round half-up to 2 decimal places."""
    return math.floor(value * 100 + 0.5) / 100


class FinalRanker:
    """
    Combines relevance, admin priority, popularity and recency.

    Every input signal is clamped into [0, 100] before blending, so the
    final score stays in [0, 100].
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize final ranker.

        Args:
            config: Matching configuration
            clock: Returns the current time (injectable for tests)
        """
        self.config = config or DEFAULT_CONFIG
        self.clock = clock or utc_now

    def recency_score(self, last_synced_at: Optional[datetime]) -> float:
        """
        Linear decay from 100, losing ``recency_decay_per_day`` points per day since sync.

        Products that were never synced get a neutral 50. Naive timestamps are read as UTC.
        """
        if last_synced_at is None:
            return DEFAULT_RECENCY

        if last_synced_at.tzinfo is None:
            last_synced_at = last_synced_at.replace(tzinfo=timezone.utc)

        days_since = (self.clock() - last_synced_at).total_seconds() / SECONDS_PER_DAY
        return clamp(MAX_SCORE - days_since * self.config.recency_decay_per_day)

    def final_score(self, product: ProductRecord, relevance_score: float) -> float:
        """
        Calculate the final ranking score for a product.

        Args:
            product: Product being ranked
            relevance_score: Relevance from RelevanceScorer (or a fixed fallback value)

        Returns:
            Weighted score rounded to 2 decimal places
        """
        admin_priority = clamp(
            DEFAULT_ADMIN_PRIORITY if product.admin_priority is None else product.admin_priority
        )
        popularity = clamp(
            DEFAULT_POPULARITY if product.popularity_score is None else product.popularity_score
        )
        recency = self.recency_score(product.last_synced_at)

        score = (
            self.config.relevance_weight * clamp(relevance_score)
            + self.config.admin_priority_weight * admin_priority
            + self.config.popularity_weight * popularity
            + self.config.recency_weight * recency
        )

        return round_score(score)
