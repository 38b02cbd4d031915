"""
Feed resolution entry points.

Both resolvers run the same dedup core; the category resolver filters by
normalized category slug first and degrades to the global feed when the
category has no articles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Mapping

from .categories import category_from_path, normalize_category
from .dedup import prefer_language_and_dedup
from .grouping import DEFAULT_TRANSLATED_SUFFIX
from .types import Article

if TYPE_CHECKING:
    from ..config import AppConfig

logger = logging.getLogger(__name__)


def resolve_feed(
    articles: Iterable[Article],
    preferred_language: str | None,
    *,
    suffix: str = DEFAULT_TRANSLATED_SUFFIX,
    slug_fallback: bool = True,
) -> list[Article]:
    """Resolve the global feed: one variant per story, newest first."""
    return prefer_language_and_dedup(
        articles, preferred_language, suffix=suffix, slug_fallback=slug_fallback
    )


def filter_by_category(
    articles: Iterable[Article],
    target_slug: str,
    aliases: Mapping[str, str] | None = None,
) -> list[Article]:
    """Keep the articles whose normalized category equals the target slug."""
    return [
        article
        for article in articles
        if normalize_category(article.category, aliases) == target_slug
    ]


def resolve_category(
    articles: Iterable[Article],
    target_slug: str,
    preferred_language: str | None,
    *,
    aliases: Mapping[str, str] | None = None,
    suffix: str = DEFAULT_TRANSLATED_SUFFIX,
    slug_fallback: bool = True,
) -> list[Article]:
    """Resolve a category feed.

    Articles are filtered to the target category before deduplication. When
    nothing in the category survives, the whole input is resolved instead,
    so callers may receive articles from other categories.

    Args:
        articles: All articles for the current language
        target_slug: Category route slug, e.g. "baby-names"
        preferred_language: Active UI locale
        aliases: Extra category names mapped to slugs
        suffix: Translated-slug suffix used by the slug fallback
        slug_fallback: Whether unlinked articles are grouped by stripped slug

    Returns:
        Resolved articles of the category, or the global feed as fallback
    """
    articles = list(articles)
    filtered = filter_by_category(articles, target_slug, aliases)
    selected = prefer_language_and_dedup(
        filtered, preferred_language, suffix=suffix, slug_fallback=slug_fallback
    )
    if selected:
        return selected

    logger.info(
        "No articles in category, falling back to the full feed",
        extra={"event": "category_fallback", "category": target_slug, "total": len(articles)},
    )
    return prefer_language_and_dedup(
        articles, preferred_language, suffix=suffix, slug_fallback=slug_fallback
    )


class ContentResolver:
    """Resolver bound to an application config.

    Carries the grouping and category settings so callers only pass the
    article snapshot, the locale and the route.
    """

    def __init__(self, cfg: AppConfig):
        self._cfg = cfg

    def feed(self, articles: Iterable[Article], preferred_language: str | None) -> list[Article]:
        grouping = self._cfg.grouping
        return resolve_feed(
            articles,
            preferred_language,
            suffix=grouping.translated_suffix,
            slug_fallback=grouping.slug_fallback,
        )

    def category_slug(self, path: str | None) -> str:
        categories = self._cfg.categories
        return category_from_path(path, default=categories.default, aliases=categories.aliases)

    def category(
        self,
        articles: Iterable[Article],
        target_slug: str,
        preferred_language: str | None,
    ) -> list[Article]:
        grouping = self._cfg.grouping
        return resolve_category(
            articles,
            target_slug,
            preferred_language,
            aliases=self._cfg.categories.aliases,
            suffix=grouping.translated_suffix,
            slug_fallback=grouping.slug_fallback,
        )

    def category_for_path(
        self,
        articles: Iterable[Article],
        path: str | None,
        preferred_language: str | None,
    ) -> list[Article]:
        return self.category(articles, self.category_slug(path), preferred_language)
