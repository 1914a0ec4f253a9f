"""
Data Models Package
Typed inputs and outputs of the matching engine.
"""

from .content import ContentContext
from .match import ProductMatch, SelectionOptions
from .product import ACTIVE_STATUS, ProductRecord, parse_tags

__all__ = [
    "ACTIVE_STATUS",
    "ContentContext",
    "ProductMatch",
    "ProductRecord",
    "SelectionOptions",
    "parse_tags",
]
