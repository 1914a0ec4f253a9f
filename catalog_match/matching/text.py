"""
Text Helpers
Markup stripping and entity decoding for article and product text.
"""

import re

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_ENTITY_RE = re.compile(r"&[#\w]+;")

HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&copy;": "©",
    "&reg;": "®",
    "&trade;": "™",
}


def strip_html(text: str) -> str:
    """Replace markup tags with spaces and collapse whitespace."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub(" ", text)).strip()


def decode_html_entities(text: str) -> str:
    """
    Decode the common named and numeric entities found in shop feeds.

    Unknown entities are left as-is.
    """
    if not text:
        return ""
    return _ENTITY_RE.sub(lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)), text)


def significant_words(text: str, min_length: int) -> list:
    """Split lowercased text on whitespace, keeping words longer than ``min_length``."""
    return [word for word in text.lower().split() if len(word) > min_length]
