"""
Command-line interface for the bilingual feed.

Uses Typer to resolve an exported list of blog posts into the feed the
site would show for a language, either globally or for one category.
Supports loading .env files for the default language.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import AppConfig, OUTPUT_FORMATS, get_default_language, load_config
from .core.categories import normalize_category
from .core.resolver import ContentResolver
from .core.types import Article, normalize_language
from .input.json_parser import load_articles
from .output.renderer import render_html, render_json, render_markdown, to_card
from .utils.logging import log_event, setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(
    config: Path | None,
    output_format: str | None,
    limit: int | None,
    log_level: str | None,
) -> AppConfig:
    """Load configuration and apply CLI overrides."""
    load_dotenv()
    try:
        cfg = load_config(str(config) if config else None)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    if output_format:
        if output_format not in OUTPUT_FORMATS:
            raise typer.BadParameter(
                f"expected one of {', '.join(OUTPUT_FORMATS)}", param_hint="--format"
            )
        cfg.output.format = output_format
    if limit is not None:
        cfg.output.limit = limit
    if log_level:
        cfg.logging.level = log_level
    return cfg


def _load(input: Path, language: str, all_languages: bool) -> list[Article]:
    try:
        return load_articles(input, language=None if all_languages else language)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input") from exc


def _emit(
    articles: list[Article],
    cfg: AppConfig,
    title: str,
    output: Path | None,
) -> None:
    if cfg.output.limit is not None:
        articles = articles[: cfg.output.limit]

    fmt = cfg.output.format
    if fmt == "table":
        table = Table(title=title)
        table.add_column("Date")
        table.add_column("Lang")
        table.add_column("Category")
        table.add_column("Title")
        table.add_column("Link")
        for article in articles:
            card = to_card(article)
            table.add_row(card.display_date, card.language, card.category, card.title, card.href)
        console.print(table)
        return

    if fmt == "json":
        text = render_json(articles)
    elif fmt == "markdown":
        text = render_markdown(articles, title)
    else:
        text = render_html(articles, title)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        console.print(f"Feed written: {output}")
    else:
        typer.echo(text)


@app.command()
def feed(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    lang: str | None = typer.Option(None, "--lang", "-l", help="UI language: en or so."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: table, json, markdown or html."
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write output to a file."),
    limit: int | None = typer.Option(None, "--limit", "-n", min=0, help="Maximum articles shown."),
    all_languages: bool = typer.Option(
        False, "--all-languages", help="Load posts of every language, not only --lang."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Show the global feed: one variant per article, newest first.

    Args:
        input: Path to the JSON export of blog posts
        lang: UI language; defaults to BILINGUAL_FEED_LANG or the config
        config: Optional path to YAML config file
        output_format: Output format override
        output: Optional file to write instead of stdout
        limit: Maximum number of articles shown
        all_languages: Resolve across both languages of the export
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = _prepare(config, output_format, limit, log_level)
    logger = setup_logging(cfg.logging)
    language = normalize_language(lang) if lang else get_default_language(cfg.locale)

    articles = _load(input, language, all_languages)
    resolved = ContentResolver(cfg).feed(articles, language)
    log_event(logger, "Resolved feed", language=language, loaded=len(articles), resolved=len(resolved))

    _emit(resolved, cfg, "Articles", output)


@app.command()
def category(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    path: str | None = typer.Option(None, "--path", "-p", help="Route path, e.g. /parenting."),
    slug: str | None = typer.Option(None, "--category", help="Category route slug."),
    lang: str | None = typer.Option(None, "--lang", "-l", help="UI language: en or so."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: table, json, markdown or html."
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write output to a file."),
    limit: int | None = typer.Option(None, "--limit", "-n", min=0, help="Maximum articles shown."),
    all_languages: bool = typer.Option(
        False, "--all-languages", help="Load posts of every language, not only --lang."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Show a category feed, falling back to the global feed when empty.

    The category comes from --category (a route slug or a display name
    such as "Caafimaad"), else from the last segment of --path, else the
    configured default.
    """
    cfg = _prepare(config, output_format, limit, log_level)
    logger = setup_logging(cfg.logging)
    language = normalize_language(lang) if lang else get_default_language(cfg.locale)

    resolver = ContentResolver(cfg)
    if slug:
        target = normalize_category(slug, cfg.categories.aliases)
    else:
        target = resolver.category_slug(path)

    articles = _load(input, language, all_languages)
    resolved = resolver.category(articles, target, language)
    log_event(
        logger,
        "Resolved category feed",
        language=language,
        category=target,
        loaded=len(articles),
        resolved=len(resolved),
    )

    title = target.replace("-", " ").title()
    _emit(resolved, cfg, title, output)


if __name__ == "__main__":
    app()
