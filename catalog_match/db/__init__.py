"""
Database ORM Models
SQLAlchemy ORM models and async session helpers.
"""

from .models import Base, Blog, BlogCategory, Category, ProductIndex
from .session import close_engine, get_engine, get_session_factory

__all__ = [
    "Base",
    "Blog",
    "BlogCategory",
    "Category",
    "ProductIndex",
    "close_engine",
    "get_engine",
    "get_session_factory",
]
