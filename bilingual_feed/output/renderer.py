"""
Feed rendering for cards, JSON, Markdown and HTML output.

The resolver returns Article records in display order; this module only
projects them, it never reorders or drops articles.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.dedup import parse_article_date
from ..core.types import Article


@dataclass(frozen=True)
class ArticleCard:
    """Display fields of one article card.

    Attributes:
        slug: Article slug
        language: Locale of the shown variant
        title: The article headline
        excerpt: Short teaser text
        image: Image URL or asset path
        category: Category name as stored on the article
        date: Raw article timestamp
        display_date: Short date label such as "Jan 2"
        href: Link to the article page
    """
    slug: str
    language: str
    title: str
    excerpt: str
    image: str
    category: str
    date: str
    display_date: str
    href: str


def format_card_date(value: str) -> str:
    """Format a timestamp as a short month/day label, e.g. "Jan 2".

    Unparseable values are returned unchanged.
    """
    parsed = parse_article_date(value)
    if parsed is None:
        return value
    return f"{parsed:%b} {parsed.day}"


def article_href(article: Article) -> str:
    return f"/articles/{article.slug}"


def to_card(article: Article) -> ArticleCard:
    return ArticleCard(
        slug=article.slug,
        language=article.language,
        title=article.title,
        excerpt=article.excerpt,
        image=article.image,
        category=article.category,
        date=article.date,
        display_date=format_card_date(article.date),
        href=article_href(article),
    )


def render_json(articles: list[Article]) -> str:
    return json.dumps([asdict(to_card(article)) for article in articles], ensure_ascii=False, indent=2)


def render_markdown(articles: list[Article], title: str) -> str:
    """Render a feed as Markdown.

    Args:
        articles: Resolved articles in display order
        title: Heading of the document

    Returns:
        The Markdown text
    """
    lines = [f"# {title}", "", f"Total: {len(articles)}", ""]
    for article in articles:
        card = to_card(article)
        lines.append(f"## [{card.title or card.slug}]({card.href})")
        lines.append(f"- Category: {card.category}")
        lines.append(f"- Date: {card.display_date}")
        lines.append(f"- Language: {card.language}")
        if card.excerpt:
            lines.append("")
            lines.append(card.excerpt)
        lines.append("")
    return "\n".join(lines)


def render_html(articles: list[Article], title: str, description: str = "") -> str:
    """Render a feed as an HTML article grid using the Jinja2 template."""
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("feed.html")
    return template.render(
        title=title,
        description=description,
        cards=[to_card(article) for article in articles],
        total=len(articles),
    )
