"""
SQLAlchemy ORM Models
Tables read by the matching engine: the synced product index and published blog content.
"""

from sqlalchemy import (
    Column, String, Integer, Float, Boolean, DateTime,
    ForeignKey, Numeric, Text, Index
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ProductIndex(Base):
    """
    Product index model.

    Local copy of the affiliate shop catalog, refreshed by the product sync job.
    """
    __tablename__ = 'product_index'

    id = Column(Integer, primary_key=True, autoincrement=True)
    shop_product_id = Column(Integer, nullable=True, unique=True,
                             comment='Product ID in the upstream shop')

    # Core product info
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=True)
    image = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    sale_price = Column(Numeric(10, 2), nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String(255), nullable=True, index=True)
    tags = Column(Text, nullable=True, comment='JSON encoded list of tag strings')
    url = Column(Text, nullable=True, comment='Affiliate deep link')

    # Ranking signals
    admin_priority = Column(Integer, nullable=True, server_default='50',
                            comment='Business boost, intended range 0-100')
    popularity_score = Column(Float, nullable=True, server_default='0',
                              comment='Engagement score computed at sync time')

    # Sync state
    last_synced_at = Column(DateTime, nullable=True)
    sync_status = Column(String(20), nullable=False, server_default='active', index=True,
                         comment='Status: active, deleted, error')

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_product_index_ranking', 'sync_status', 'admin_priority', 'popularity_score'),
    )

    def __repr__(self):
        return f"<ProductIndex(id={self.id}, name={self.name[:30]})>"


class Category(Base):
    """Blog category."""
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=True, unique=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"


class Blog(Base):
    """
    Blog article model.

    Only published articles (status = true) are visible to the matching engine.
    """
    __tablename__ = 'blogs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    content = Column(Text, nullable=True, comment='HTML body')
    status = Column(Boolean, nullable=False, server_default='1',
                    comment='Whether the article is published')

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Blog(id={self.id}, slug={self.slug})>"


class BlogCategory(Base):
    """Association between blogs and categories."""
    __tablename__ = 'blog_categories'

    id = Column(Integer, primary_key=True, autoincrement=True)
    blog_id = Column(Integer, ForeignKey('blogs.id', ondelete='CASCADE'), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey('categories.id', ondelete='CASCADE'),
                         nullable=False, index=True)
