"""Grouping key shared by the language variants of one article."""

from __future__ import annotations

import re

from .types import Article

DEFAULT_TRANSLATED_SUFFIX = "-so"


def strip_translated_suffix(slug: str, suffix: str = DEFAULT_TRANSLATED_SUFFIX) -> str:
    """Remove a trailing translated-slug suffix, ignoring case.

    Args:
        slug: The article slug
        suffix: Suffix appended to the English slug by translated variants

    Returns:
        The slug without the suffix, or the slug unchanged
    """
    if not suffix:
        return slug
    return re.sub(re.escape(suffix) + r"$", "", slug, flags=re.IGNORECASE)


def base_key(
    article: Article,
    *,
    suffix: str = DEFAULT_TRANSLATED_SUFFIX,
    slug_fallback: bool = True,
) -> str:
    """Return the key grouping an article with its translations.

    The explicit translation link wins: the English base identifier first,
    then the Somali one. Articles without a link fall back to their slug with
    the translated suffix stripped, so "eat-well-so" groups with "eat-well".
    Two unrelated slugs that collide after stripping are merged.

    Args:
        article: The article to key
        suffix: Translated-slug suffix stripped by the fallback
        slug_fallback: If False, unlinked articles are keyed by their raw slug

    Returns:
        The base key string
    """
    translations = article.translations
    if translations is not None:
        if translations.en:
            return translations.en
        if translations.so:
            return translations.so
    if not slug_fallback:
        return article.slug
    return strip_translated_suffix(article.slug, suffix)
