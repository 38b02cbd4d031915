"""Input adapters that turn exported posts into Article records."""

from .json_parser import load_articles, parse_articles

__all__ = ["load_articles", "parse_articles"]
