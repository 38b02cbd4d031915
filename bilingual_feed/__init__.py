"""
Bilingual Feed - content resolution for an English/Somali article site.

This package turns the localized blog posts of the site into the feed shown
for a UI language: translated variants are collapsed to one article, the
variant in the active language is preferred, and the result is ordered
newest first, optionally restricted to one category.

Main entry point is the CLI via `bilingual-feed feed` and
`bilingual-feed category`.

Example:
    $ bilingual-feed category -i posts.json --path /parenting --lang so
"""

__all__ = [
    "__version__",
    "Article",
    "Translations",
    "ContentResolver",
    "base_key",
    "normalize_category",
    "resolve_feed",
    "resolve_category",
]
__version__ = "0.1.0"

from .core.categories import normalize_category
from .core.grouping import base_key
from .core.resolver import ContentResolver, resolve_category, resolve_feed
from .core.types import Article, Translations
