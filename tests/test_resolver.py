"""Tests for the global and category feed resolvers."""

import logging

from bilingual_feed.config import AppConfig
from bilingual_feed.core.categories import normalize_category
from bilingual_feed.core.resolver import ContentResolver, resolve_category, resolve_feed
from bilingual_feed.core.types import Article, Translations


def _article(
    slug: str,
    language: str,
    date: str,
    category: str,
    translations: Translations | None = None,
) -> Article:
    return Article(slug=slug, language=language, date=date, category=category, translations=translations)


def _site_articles() -> list[Article]:
    return [
        _article("healthy-eating", "en", "2024-01-10", "Health"),
        _article("cunto-caafimaad-so", "so", "2024-01-11", "Caafimaad", Translations(en="healthy-eating")),
        _article("bedtime-routines", "en", "2024-02-01", "Parenting"),
        _article("bedtime-routines-so", "so", "2024-02-02", "Barbaarinta Carruurta"),
        _article("learning-letters", "en", "2024-03-05", "Education"),
        _article("hydration", "en", "2023-11-20", "Health"),
        _article("biyo-so", "so", "2023-11-21", "Caafimaad", Translations(so="hydration")),
    ]


def test_category_filter_matches_localized_names():
    resolved = resolve_category(_site_articles(), "health", "so")

    assert [a.slug for a in resolved] == ["cunto-caafimaad-so", "biyo-so"]
    assert all(normalize_category(a.category) == "health" for a in resolved)


def test_category_filter_prefers_english_for_english_locale():
    resolved = resolve_category(_site_articles(), "parenting", "en")
    assert [a.slug for a in resolved] == ["bedtime-routines"]


def test_empty_category_falls_back_to_global_feed(caplog, monkeypatch):
    articles = _site_articles()
    monkeypatch.setattr(logging.getLogger("bilingual_feed"), "propagate", True)

    with caplog.at_level(logging.INFO, logger="bilingual_feed"):
        resolved = resolve_category(articles, "quran", "so")

    assert resolved == resolve_feed(articles, "so")
    assert any(getattr(record, "event", None) == "category_fallback" for record in caplog.records)


def test_unknown_category_slug_falls_back_too():
    articles = _site_articles()
    assert resolve_category(articles, "no-such-category", "en") == resolve_feed(articles, "en")


def test_empty_input_resolves_to_empty_feed():
    assert resolve_feed([], "en") == []
    assert resolve_category([], "health", "so") == []


def test_global_feed_one_variant_per_story_newest_first():
    resolved = resolve_feed(_site_articles(), "so")
    assert [a.slug for a in resolved] == [
        "learning-letters",
        "bedtime-routines-so",
        "cunto-caafimaad-so",
        "biyo-so",
    ]


def test_resolver_accepts_generators():
    resolved = resolve_category((a for a in _site_articles()), "quran", "en")
    assert len(resolved) == 4


def test_content_resolver_uses_config():
    cfg = AppConfig()
    cfg.grouping.slug_fallback = False
    cfg.categories.aliases = {"Ciyaaraha": "play"}
    cfg.categories.default = "education"
    resolver = ContentResolver(cfg)
    articles = _site_articles() + [_article("ball-games", "en", "2024-04-01", "Ciyaaraha")]

    feed = resolver.feed(articles, "so")
    slugs = [a.slug for a in feed]
    assert "bedtime-routines" in slugs
    assert "bedtime-routines-so" in slugs

    assert resolver.category_slug("/play") == "play"
    assert resolver.category_slug("/missing") == "education"
    assert [a.slug for a in resolver.category(articles, "play", "en")] == ["ball-games"]
    assert [a.slug for a in resolver.category_for_path(articles, "/somewhere", "en")] == ["learning-letters"]
