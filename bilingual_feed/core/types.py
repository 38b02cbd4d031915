"""
Core data types for the bilingual feed.

This module defines the records the resolver works on:
- Translations: cross-language link carried by an article
- Article: one localized article as supplied by the content loader
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ENGLISH = "en"
SOMALI = "so"
SUPPORTED_LANGUAGES = (ENGLISH, SOMALI)


def normalize_language(language: str | None) -> str:
    """Map any UI locale onto one of the two supported languages.

    Only the exact value "so" selects Somali; everything else is English.
    """
    return SOMALI if language == SOMALI else ENGLISH


@dataclass(frozen=True)
class Translations:
    """Base identifiers shared by the language variants of one article.

    Attributes:
        en: Base identifier recorded under the English locale
        so: Base identifier recorded under the Somali locale
    """
    en: str | None = None
    so: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> Translations | None:
        if not raw:
            return None
        en = raw.get(ENGLISH) or None
        so = raw.get(SOMALI) or None
        if en is None and so is None:
            return None
        return cls(en=en, so=so)


@dataclass(frozen=True)
class Article:
    """Represents a localized article record.

    Attributes:
        slug: Identifier unique within one language's content set
        language: Locale of this variant ("en" or "so")
        category: Free-text category name, possibly localized
        title: The article headline
        excerpt: Short teaser text
        image: Image URL or asset path
        date: ISO 8601 timestamp string
        author: Optional author name
        read_time: Optional reading-time label
        tags: Optional tags
        translations: Optional cross-language link
        extra: Source fields the resolver does not interpret
    """
    slug: str
    language: str
    category: str = ""
    title: str = ""
    excerpt: str = ""
    image: str = ""
    date: str = ""
    author: str | None = None
    read_time: str | None = None
    tags: tuple[str, ...] = ()
    translations: Translations | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
