"""Output rendering for resolved feeds."""

from .renderer import ArticleCard, render_html, render_json, render_markdown, to_card

__all__ = ["ArticleCard", "render_html", "render_json", "render_markdown", "to_card"]
