"""
Catalog Match
Selects and ranks affiliate products for blog articles and category pages.
"""

from .errors import CatalogMatchError, InvalidOptionsError, StoreUnavailableError
from .matching import ProductSelector, create_product_selector
from .models import ContentContext, ProductMatch, ProductRecord, SelectionOptions

__version__ = "0.1.0"

__all__ = [
    "CatalogMatchError",
    "InvalidOptionsError",
    "StoreUnavailableError",
    "ProductSelector",
    "create_product_selector",
    "ContentContext",
    "ProductMatch",
    "ProductRecord",
    "SelectionOptions",
]
