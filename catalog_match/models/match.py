"""
Selection options and match results.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import get_settings
from .product import ProductRecord

AD_DESCRIPTION_LIMIT = 150


class SelectionOptions(BaseModel):
    """
    Options recognised by the selection entry points.

    ``placement`` is accepted for caller context only and never affects scoring.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    max_products: int = Field(
        default_factory=lambda: get_settings().default_max_products,
        ge=0,
        alias="maxProducts",
        description="Maximum number of matches returned",
    )
    min_relevance_score: float = Field(
        default_factory=lambda: get_settings().default_min_relevance_score,
        ge=0,
        le=100,
        alias="minRelevanceScore",
        description="Relevance threshold for content matches",
    )
    placement: str = Field(
        default_factory=lambda: get_settings().default_placement,
        description="Widget placement the matches are rendered in",
    )


class ProductMatch(BaseModel):
    """
    A product judged relevant to a piece of content.

    Read-only projection: the wrapped ``ProductRecord`` is never modified.
    """

    model_config = ConfigDict(frozen=True)

    product: ProductRecord
    relevance_score: float
    final_score: float
    match_reasons: Tuple[str, ...] = ()

    @field_validator("relevance_score")
    @classmethod
    def clamp_relevance(cls, v: float) -> float:
        return max(0.0, min(100.0, v))

    def to_ad_item(self) -> Dict[str, Any]:
        """Convert to the ad item shape rendered by the recommendation widget."""
        product = self.product
        description: Optional[str] = product.description
        if description and len(description) > AD_DESCRIPTION_LIMIT:
            description = description[:AD_DESCRIPTION_LIMIT] + "..."

        return {
            "id": product.id,
            "product_url": product.url,
            "product_name": product.name,
            "product_image": product.image,
            "product_price": product.price,
            "product_sale_price": product.sale_price,
            "title": product.name,
            "description": description,
            "cta_text": "Shop Now",
            "campaign_id": 0,
            "campaign_name": "Intelligent Match",
            "relevance_score": self.relevance_score,
            "final_score": self.final_score,
            "match_reasons": list(self.match_reasons),
        }
