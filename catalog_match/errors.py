"""
Error Types
Exceptions raised by the catalog matching engine.
"""

from typing import Optional


class CatalogMatchError(Exception):
    """Base exception for matching errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreUnavailableError(CatalogMatchError):
    """Exception raised when a product or content store read fails."""

    def __init__(self, store: str, message: str, details: Optional[dict] = None):
        super().__init__(
            message=f"{store} read failed: {message}",
            details={"store": store, **(details or {})},
        )
        self.store = store


class InvalidOptionsError(CatalogMatchError):
    """Exception raised for selection options that fail validation."""
