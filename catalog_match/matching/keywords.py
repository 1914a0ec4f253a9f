"""
Keyword Extraction
Turns article text into a frequency-ranked list of significant terms.
"""

import logging
import re
from collections import Counter
from typing import List, Optional

from .config import DEFAULT_CONFIG, MatchingConfig
from .text import strip_html

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


class KeywordExtractor:
    """
    Extracts the most frequent significant terms from content.

    Tokens are lowercased, stripped of non-alphanumeric characters and
    dropped when short or a stop word. Terms with equal frequency keep the
    order in which they were first seen.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def tokenize(self, text: str) -> List[str]:
        """Split stripped, lowercased text into significant tokens."""
        words = strip_html(text).lower().split()
        tokens = []
        for word in words:
            token = _NON_ALNUM_RE.sub("", word)
            if len(token) > self.config.min_token_length and token not in self.config.stop_words:
                tokens.append(token)
        return tokens

    def extract(self, body: str, title: str) -> List[str]:
        """
        Extract ranked keywords from an article.

        Args:
            body: Article body (may contain markup)
            title: Article title

        Returns:
            Up to ``max_keywords`` terms, most frequent first
        """
        counts = Counter(self.tokenize(f"{body or ''} {title or ''}"))

        # most_common keeps first-seen order for equal counts
        keywords = [term for term, _ in counts.most_common(self.config.max_keywords)]

        logger.debug(f"Extracted {len(keywords)} keywords from {sum(counts.values())} tokens")

        return keywords
