"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- LocaleConfig: Default UI language
- GroupingConfig: How translated variants are linked
- CategoryConfig: Default category and extra category aliases
- OutputConfig: CLI output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml

from .core.types import normalize_language

OUTPUT_FORMATS = ("table", "json", "markdown", "html")


@dataclass
class LocaleConfig:
    """Configuration for the active locale.

    Attributes:
        default_language: Language used when none is given ("en" or "so")
        language_env: Environment variable that overrides the default language
    """

    default_language: str = "en"
    language_env: str = "BILINGUAL_FEED_LANG"


@dataclass
class GroupingConfig:
    """Configuration for grouping translated variants.

    Attributes:
        translated_suffix: Slug suffix carried by Somali variants
        slug_fallback: Group unlinked articles by their stripped slug
    """

    translated_suffix: str = "-so"
    slug_fallback: bool = True


@dataclass
class CategoryConfig:
    """Configuration for category pages.

    Attributes:
        default: Route slug used when the path names no known category
        aliases: Extra category names mapped to route slugs
    """

    default: str = "health"
    aliases: dict[str, str] = field(default_factory=dict)


@dataclass
class OutputConfig:
    """Configuration for CLI output.

    Attributes:
        format: "table", "json", "markdown" or "html"
        limit: Maximum number of articles printed, or None for all
    """

    format: str = "table"
    limit: int | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "bilingual_feed.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    locale: LocaleConfig = field(default_factory=LocaleConfig)
    grouping: GroupingConfig = field(default_factory=GroupingConfig)
    categories: CategoryConfig = field(default_factory=CategoryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if value is None:
            continue
        if not isinstance(value, dict):
            raise ValueError(f"Config section {key!r} must be a mapping")
        unknown = sorted(set(value) - set(data[key]))
        if unknown:
            raise ValueError(f"Unknown keys in config section {key!r}: {', '.join(map(str, unknown))}")
        data[key].update(value)
    cfg = _fromdict(data)
    _validate(cfg)
    return cfg


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "locale": {
            "default_language": cfg.locale.default_language,
            "language_env": cfg.locale.language_env,
        },
        "grouping": {
            "translated_suffix": cfg.grouping.translated_suffix,
            "slug_fallback": cfg.grouping.slug_fallback,
        },
        "categories": {
            "default": cfg.categories.default,
            "aliases": dict(cfg.categories.aliases),
        },
        "output": {
            "format": cfg.output.format,
            "limit": cfg.output.limit,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        locale=LocaleConfig(**data["locale"]),
        grouping=GroupingConfig(**data["grouping"]),
        categories=CategoryConfig(**data["categories"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def _validate(cfg: AppConfig) -> None:
    if not isinstance(cfg.categories.aliases, dict):
        raise ValueError("categories.aliases must be a mapping of name to slug")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format {cfg.output.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    if cfg.output.limit is not None and cfg.output.limit < 0:
        raise ValueError("output.limit must not be negative")


def get_default_language(cfg: LocaleConfig) -> str:
    """Get the default language from the environment or config."""
    return normalize_language(os.getenv(cfg.language_env) or cfg.default_language)
