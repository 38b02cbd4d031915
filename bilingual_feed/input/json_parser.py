"""JSON parser for exported blog posts.

This module turns a JSON export of the site's blog posts into Article
records. Two payload shapes are accepted:
- A bare list of post objects
- An object with a "posts" (or "articles") list

Post keys follow the site's camelCase names (readTime) but snake_case
spellings are accepted as well.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..core.types import Article, Translations, normalize_language

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {
    "slug",
    "language",
    "category",
    "title",
    "excerpt",
    "image",
    "date",
    "author",
    "readTime",
    "read_time",
    "tags",
    "translations",
}


def parse_articles(data: Any, language: str | None = None) -> list[Article]:
    """Parse a JSON export into a list of Article objects.

    Args:
        data: The decoded JSON payload
        language: If given, keep only posts in this language. Posts without
            a language are assigned it.

    Returns:
        Articles in payload order. Posts without a slug are skipped with
        a warning.

    Raises:
        ValueError: If the payload holds no list of posts
    """
    items = _post_items(data)
    wanted = normalize_language(language) if language is not None else None

    articles: list[Article] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning(f"Skipping post #{index}: not an object")
            continue
        slug = item.get("slug")
        if not isinstance(slug, str) or not slug.strip():
            logger.warning(f"Skipping post #{index}: missing slug")
            continue

        post_language = item.get("language") or wanted or "en"
        if wanted is not None and post_language != wanted:
            continue

        articles.append(
            Article(
                slug=slug.strip(),
                language=post_language,
                category=item.get("category") or "",
                title=item.get("title") or "",
                excerpt=item.get("excerpt") or "",
                image=item.get("image") or "",
                date=str(item.get("date") or ""),
                author=item.get("author"),
                read_time=item.get("readTime", item.get("read_time")),
                tags=tuple(item.get("tags") or ()),
                translations=_parse_translations(item.get("translations")),
                extra={key: value for key, value in item.items() if key not in _KNOWN_KEYS},
            )
        )

    return articles


def load_articles(path: Path, language: str | None = None) -> list[Article]:
    """Read and parse a JSON export file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    articles = parse_articles(data, language=language)
    logger.debug(f"Loaded {len(articles)} articles from {path}")
    return articles


def _post_items(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("posts", "articles"):
            items = data.get(key)
            if isinstance(items, list):
                return items
    raise ValueError("Invalid JSON format: expected a list of posts or a 'posts' list")


def _parse_translations(raw: Any) -> Translations | None:
    if not isinstance(raw, dict):
        return None
    return Translations.from_dict(raw)
