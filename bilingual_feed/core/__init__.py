"""
Core domain models and resolution logic.

This package contains the article types and the pure functions that turn
a list of localized articles into a feed. Nothing here performs I/O.
"""

from .types import Article, Translations, normalize_language
from .grouping import base_key, strip_translated_suffix
from .dedup import parse_article_date, prefer_language_and_dedup, sort_by_date
from .categories import category_from_path, category_info, normalize_category
from .resolver import ContentResolver, resolve_category, resolve_feed

__all__ = [
    "Article",
    "Translations",
    "normalize_language",
    "base_key",
    "strip_translated_suffix",
    "parse_article_date",
    "prefer_language_and_dedup",
    "sort_by_date",
    "normalize_category",
    "category_from_path",
    "category_info",
    "ContentResolver",
    "resolve_feed",
    "resolve_category",
]
