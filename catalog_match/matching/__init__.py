"""
Matching Module
Content-to-product relevance matching: keyword extraction, scoring, ranking and selection.
"""

from .config import MatchingConfig, DEFAULT_CONFIG
from .keywords import KeywordExtractor
from .relevance import RelevanceScorer, RelevanceResult
from .ranking import FinalRanker
from .filters import CandidateFilter, PRIORITY_ORDER
from .stores import ProductStore, ContentStore, SqlProductStore, SqlContentStore
from .retrieval import CandidateRetriever, CandidatePool
from .selector import ProductSelector, create_product_selector, resolve_options

__all__ = [
    "MatchingConfig",
    "DEFAULT_CONFIG",
    "KeywordExtractor",
    "RelevanceScorer",
    "RelevanceResult",
    "FinalRanker",
    "CandidateFilter",
    "PRIORITY_ORDER",
    "ProductStore",
    "ContentStore",
    "SqlProductStore",
    "SqlContentStore",
    "CandidateRetriever",
    "CandidatePool",
    "ProductSelector",
    "create_product_selector",
    "resolve_options",
]
