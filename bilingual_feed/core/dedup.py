"""
Language-aware deduplication of localized articles.

Articles are grouped by base key so the English and Somali variants of one
story collapse together, one variant per group is chosen for the active
locale, and the survivors are ordered newest first.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from .grouping import DEFAULT_TRANSLATED_SUFFIX, base_key
from .types import Article, normalize_language

logger = logging.getLogger(__name__)


def parse_article_date(value: str | None) -> datetime | None:
    """Parse an article timestamp into a timezone-aware datetime.

    Accepts what `datetime.fromisoformat` reads on Python 3.11+: bare dates,
    fractional seconds, "Z", and basic or extended offsets ("+0300",
    "+03:00"). Naive timestamps and bare dates are read as UTC.

    Returns:
        The parsed datetime, or None when the value is empty or malformed
    """
    if not value or not value.strip():
        return None
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def group_by_base_key(
    articles: Iterable[Article],
    *,
    suffix: str = DEFAULT_TRANSLATED_SUFFIX,
    slug_fallback: bool = True,
) -> dict[str, list[Article]]:
    """Partition articles by base key, keeping first-appearance order."""
    groups: dict[str, list[Article]] = {}
    for article in articles:
        key = base_key(article, suffix=suffix, slug_fallback=slug_fallback)
        groups.setdefault(key, []).append(article)
    return groups


def select_representative(group: list[Article], preferred_language: str) -> Article:
    """Pick the first member in the preferred language, else the first member."""
    for article in group:
        if article.language == preferred_language:
            return article
    return group[0]


def sort_by_date(articles: list[Article]) -> list[Article]:
    """Sort articles newest first.

    The sort is stable: equal timestamps keep their incoming order. Articles
    whose date cannot be parsed go after every dated article, in incoming
    order.
    """
    def sort_key(article: Article) -> tuple[bool, datetime]:
        parsed = parse_article_date(article.date)
        if parsed is None:
            logger.debug("Unparseable article date", extra={"slug": article.slug, "date": article.date})
            return (False, datetime.min.replace(tzinfo=timezone.utc))
        return (True, parsed)

    return sorted(articles, key=sort_key, reverse=True)


def prefer_language_and_dedup(
    articles: Iterable[Article],
    preferred_language: str | None,
    *,
    suffix: str = DEFAULT_TRANSLATED_SUFFIX,
    slug_fallback: bool = True,
) -> list[Article]:
    """Collapse translated variants and order the result newest first.

    Args:
        articles: Articles to resolve, in loader order
        preferred_language: Active UI locale; anything but "so" means English
        suffix: Translated-slug suffix used by the slug fallback
        slug_fallback: Whether unlinked articles are grouped by stripped slug

    Returns:
        One article per base key, sorted by date descending
    """
    language = normalize_language(preferred_language)
    groups = group_by_base_key(articles, suffix=suffix, slug_fallback=slug_fallback)
    selected = [select_representative(group, language) for group in groups.values()]
    return sort_by_date(selected)
