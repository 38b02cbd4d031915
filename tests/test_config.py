"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from bilingual_feed.config import AppConfig, LocaleConfig, get_default_language, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)
    assert cfg == AppConfig()
    assert cfg.grouping.translated_suffix == "-so"
    assert cfg.categories.default == "health"


def test_load_config_merges_sections(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grouping:\n"
        "  slug_fallback: false\n"
        "categories:\n"
        "  aliases:\n"
        "    Nafaqada: health\n"
        "output:\n"
        "  format: json\n"
        "unknown_section:\n"
        "  value: 1\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.grouping.slug_fallback is False
    assert cfg.grouping.translated_suffix == "-so"
    assert cfg.categories.aliases == {"Nafaqada": "health"}
    assert cfg.output.format == "json"
    assert cfg.logging.level == "WARNING"


def test_load_config_does_not_leak_between_calls(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("categories:\n  aliases:\n    Ciyaaraha: play\n", encoding="utf-8")

    load_config(str(path))

    assert load_config(None).categories.aliases == {}


def test_invalid_output_format_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("output:\n  format: pdf\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_default_language_from_environment(monkeypatch):
    cfg = LocaleConfig()
    monkeypatch.delenv(cfg.language_env, raising=False)
    assert get_default_language(cfg) == "en"

    monkeypatch.setenv(cfg.language_env, "so")
    assert get_default_language(cfg) == "so"

    monkeypatch.setenv(cfg.language_env, "fr")
    assert get_default_language(cfg) == "en"


def test_section_that_is_not_a_mapping_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grouping: true\n", encoding="utf-8")

    with pytest.raises(ValueError, match="grouping"):
        load_config(str(path))


def test_unknown_key_in_section_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grouping:\n  suffix: '-so'\n", encoding="utf-8")

    with pytest.raises(ValueError, match="suffix"):
        load_config(str(path))


def test_empty_section_keeps_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("output:\n", encoding="utf-8")

    assert load_config(str(path)).output.format == "table"
