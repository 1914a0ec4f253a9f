"""
Matching Configuration
Scoring constants for content-to-product matching.

Final score formula:
final = 0.50 × relevance + 0.25 × admin_priority + 0.15 × popularity + 0.10 × recency

Relevance is the sum of four capped signals:
category (40) + name keywords (30) + description keywords (20) + tags (10), clamped to 100.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

# Final score blend weights (must sum to 1.0)
RELEVANCE_WEIGHT = 0.50
ADMIN_PRIORITY_WEIGHT = 0.25
POPULARITY_WEIGHT = 0.15
RECENCY_WEIGHT = 0.10

# Relevance signal caps and points per matched keyword
CATEGORY_MATCH_POINTS = 40
NAME_MATCH_CAP = 30
NAME_MATCH_POINTS = 10
DESCRIPTION_MATCH_CAP = 20
DESCRIPTION_MATCH_POINTS = 5
TAG_MATCH_CAP = 10
TAG_MATCH_POINTS = 3
MAX_SCORE = 100

# Defaults for missing business signals
DEFAULT_ADMIN_PRIORITY = 50
DEFAULT_POPULARITY = 0
DEFAULT_RECENCY = 50
RECENCY_DECAY_PER_DAY = 2

# Fixed relevance for paths that skip keyword scoring
FALLBACK_RELEVANCE = 30
FALLBACK_REASON = "Popular product"
CATEGORY_BROWSE_RELEVANCE = 50

# Keyword extraction
MAX_KEYWORDS = 20
MIN_TOKEN_LENGTH = 3  # tokens must be strictly longer than this

STOP_WORDS: FrozenSet[str] = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by',
    'from', 'as', 'is', 'was', 'are', 'were', 'be', 'been', 'being', 'have', 'has', 'had',
    'do', 'does', 'did', 'will', 'would', 'should', 'could', 'may', 'might', 'must', 'can',
    'this', 'that', 'these', 'those', 'it', 'its', 'they', 'them', 'their', 'what', 'which',
    'who', 'whom', 'whose', 'where', 'when', 'why', 'how', 'all', 'each', 'every', 'both',
    'few', 'more', 'most', 'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same',
    'so', 'than', 'too', 'very', 'just', 'now',
})


@dataclass(frozen=True)
class MatchingConfig:
    """Configuration for relevance scoring and final ranking."""

    # Signal weights (must sum to 1.0)
    relevance_weight: float = RELEVANCE_WEIGHT
    admin_priority_weight: float = ADMIN_PRIORITY_WEIGHT
    popularity_weight: float = POPULARITY_WEIGHT
    recency_weight: float = RECENCY_WEIGHT

    # Relevance signals
    category_points: int = CATEGORY_MATCH_POINTS
    name_cap: int = NAME_MATCH_CAP
    name_points: int = NAME_MATCH_POINTS
    description_cap: int = DESCRIPTION_MATCH_CAP
    description_points: int = DESCRIPTION_MATCH_POINTS
    tag_cap: int = TAG_MATCH_CAP
    tag_points: int = TAG_MATCH_POINTS

    # Recency decay (points lost per day since last sync)
    recency_decay_per_day: float = RECENCY_DECAY_PER_DAY

    # Keyword extraction
    max_keywords: int = MAX_KEYWORDS
    min_token_length: int = MIN_TOKEN_LENGTH
    stop_words: FrozenSet[str] = field(default=STOP_WORDS)

    def __post_init__(self):
        """Validate configuration."""
        total = (
            self.relevance_weight
            + self.admin_priority_weight
            + self.popularity_weight
            + self.recency_weight
        )
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Ranking weights must sum to 1.0, got {total}")


DEFAULT_CONFIG = MatchingConfig()
