"""
Candidate Filtering
Filter conditions for the candidate pool, as SQL clauses or in-process predicates.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from ..db.models import ProductIndex
from ..models import ProductRecord

logger = logging.getLogger(__name__)

# Candidate ordering: admin priority, then popularity, both descending
PRIORITY_ORDER: Tuple[str, ...] = ("admin_priority", "popularity_score")


@dataclass
class CandidateFilter:
    """
    Filter for the candidate pool.

    A product passes when its category is one of ``categories`` OR its
    name/description/category contains ``keyword`` (case-insensitive).
    ``exact_category`` is AND-ed on top. An empty filter matches every
    product; the store always adds the active-status restriction itself.

    Example:
        CandidateFilter(categories=["Electronics"], keyword="laptop")
        CandidateFilter(exact_category="Electronics")
    """

    categories: List[str] = field(default_factory=list)
    keyword: Optional[str] = None
    exact_category: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.categories and not self.keyword and self.exact_category is None

    def to_clause(self) -> ColumnElement:
        """
        Build the SQLAlchemy WHERE expression for ``product_index``.

        Returns:
            Boolean clause (``true()`` for an empty filter)
        """
        any_of = []
        if self.categories:
            any_of.append(ProductIndex.category.in_(self.categories))
        if self.keyword:
            # LIKE wildcards in the keyword are matched literally
            any_of.append(
                or_(
                    ProductIndex.name.icontains(self.keyword, autoescape=True),
                    ProductIndex.description.icontains(self.keyword, autoescape=True),
                    ProductIndex.category.icontains(self.keyword, autoescape=True),
                )
            )

        conditions = []
        if any_of:
            conditions.append(or_(*any_of))
        if self.exact_category is not None:
            conditions.append(ProductIndex.category == self.exact_category)

        if not conditions:
            return true()
        return and_(*conditions)

    def matches(self, product: ProductRecord) -> bool:
        """Evaluate the same predicate in Python against a product record."""
        if self.exact_category is not None and product.category != self.exact_category:
            return False

        if not self.categories and not self.keyword:
            return True

        if self.categories and product.category in self.categories:
            return True

        if self.keyword:
            needle = self.keyword.lower()
            haystacks = (product.name, product.description, product.category)
            return any(needle in (text or "").lower() for text in haystacks)

        return False

    def describe(self) -> str:
        """Short summary for logging."""
        parts = []
        if self.categories:
            parts.append(f"categories={self.categories}")
        if self.keyword:
            parts.append(f"keyword='{self.keyword}'")
        if self.exact_category is not None:
            parts.append(f"category='{self.exact_category}'")
        return ", ".join(parts) or "none"
