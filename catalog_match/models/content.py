"""
Content context model.
The article (or category page) that products are matched against.
"""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class ContentContext(BaseModel):
    """
    Immutable matching input built per call.

    ``keywords`` may be supplied precomputed; otherwise they are extracted
    from ``body`` and ``title``.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    body: str = ""
    categories: Tuple[str, ...] = ()
    keywords: Optional[Tuple[str, ...]] = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("categories", mode="before")
    @classmethod
    def clean_categories(cls, v: Any) -> Tuple[str, ...]:
        """Drop blank labels and duplicates, keeping first-seen order."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        cleaned = []
        for label in v:
            label = str(label).strip()
            if label and label not in cleaned:
                cleaned.append(label)
        return tuple(cleaned)

    @field_validator("keywords", mode="before")
    @classmethod
    def normalize_keywords(cls, v: Any) -> Optional[Tuple[str, ...]]:
        """Lowercase supplied keywords and drop blanks."""
        if v is None:
            return None
        return tuple(kw.strip().lower() for kw in v if kw and kw.strip())
