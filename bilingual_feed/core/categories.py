"""
Category names and route slugs.

Articles carry a display category that may be English ("Health") or Somali
("Caafimaad"). Category pages are addressed by a language-independent route
slug, so both spellings are normalized to the same slug before comparing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

DEFAULT_CATEGORY = "health"

CATEGORY_SLUGS: dict[str, str] = {
    "health": "health",
    "caafimaad": "health",
    "parenting": "parenting",
    "barbaarinta carruurta": "parenting",
    "education": "education",
    "waxbarasho": "education",
    "quran": "quran",
    "quraanka": "quran",
    "baby names": "baby-names",
    "magacyada carruurta": "baby-names",
}

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CategoryInfo:
    """Header metadata for a category page.

    Attributes:
        slug: Route slug of the category
        title_key: Translation key of the page title
        description_key: Translation key of the page description
        image: Hero image asset name
    """
    slug: str
    title_key: str
    description_key: str
    image: str


def _info(slug: str) -> CategoryInfo:
    return CategoryInfo(
        slug=slug,
        title_key=f"category.{slug}.title",
        description_key=f"category.{slug}.description",
        image=f"hero-{slug}.jpg",
    )


CATEGORY_INFO: dict[str, CategoryInfo] = {
    "health": CategoryInfo(
        slug="health",
        title_key="category.health.title",
        description_key="category.health.description",
        image="hero-health-nutrition.jpg",
    ),
    "parenting": _info("parenting"),
    "education": _info("education"),
    "quran": _info("quran"),
    "baby-names": _info("baby-names"),
}


def slugify_category(name: str) -> str:
    """Lowercase a category name and hyphenate its whitespace runs."""
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def normalize_category(name: str | None, aliases: Mapping[str, str] | None = None) -> str:
    """Map an English or Somali category name to its route slug.

    Args:
        name: Category name as stored on the article
        aliases: Extra name-to-slug entries checked after the built-in table

    Returns:
        The canonical slug, or the slugified name when no entry matches
    """
    key = (name or "").strip().lower()
    slug = CATEGORY_SLUGS.get(key)
    if slug is not None:
        return slug
    if aliases:
        for alias, target in aliases.items():
            if alias.strip().lower() == key:
                return target
    return slugify_category(key)


def known_category_slugs(aliases: Mapping[str, str] | None = None) -> set[str]:
    slugs = set(CATEGORY_SLUGS.values())
    if aliases:
        slugs.update(aliases.values())
    return slugs


def category_from_path(
    path: str | None,
    default: str = DEFAULT_CATEGORY,
    aliases: Mapping[str, str] | None = None,
) -> str:
    """Derive the category route slug from a URL path.

    The last non-empty path segment is used ("/parenting" and
    "/category/parenting" both give "parenting"). An absent or unrecognized
    segment gives the default.
    """
    segments = [segment for segment in (path or "").split("/") if segment]
    if not segments:
        return default
    candidate = segments[-1].strip().lower()
    if candidate in known_category_slugs(aliases):
        return candidate
    return default


def category_info(slug: str) -> CategoryInfo:
    """Return page metadata for a slug, using the health page for unknown ones."""
    return CATEGORY_INFO.get(slug, CATEGORY_INFO[DEFAULT_CATEGORY])
