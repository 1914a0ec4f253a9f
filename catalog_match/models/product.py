"""
Product record model.
Typed read-only view of a product index row, with tag parsing at the store boundary.
"""

import json
import logging
from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "active"


def parse_tags(value: Any) -> Tuple[str, ...]:
    """
    Parse a stored tag field into a tuple of strings.

    The product index keeps tags as JSON text. Absent, unparsable or
    non-list values yield an empty tuple instead of an error; blank or non-string
    items inside a list are dropped.
    """
    if value is None or value == "":
        return ()

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed tags field: {value[:50]!r}")
            return ()

    if not isinstance(value, (list, tuple)):
        logger.warning(f"Ignoring tags field of type {type(value).__name__}")
        return ()

    return tuple(tag for tag in value if isinstance(tag, str) and tag.strip())


class ProductRecord(BaseModel):
    """
    Product eligible for contextual display.

    Built from ``product_index`` rows (``from_attributes``) or plain dicts.
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
    )

    id: int
    name: str = ""
    slug: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
    sale_price: Optional[float] = None
    url: Optional[str] = None

    category: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()

    admin_priority: Optional[float] = None
    popularity_score: Optional[float] = None
    last_synced_at: Optional[datetime] = None
    sync_status: str = ACTIVE_STATUS

    @field_validator("tags", mode="before")
    @classmethod
    def parse_stored_tags(cls, v: Any) -> Tuple[str, ...]:
        """Parse JSON text tags, degrading to no tags."""
        return parse_tags(v)

    @field_validator("name", mode="before")
    @classmethod
    def none_name_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_active(self) -> bool:
        return self.sync_status == ACTIVE_STATUS
