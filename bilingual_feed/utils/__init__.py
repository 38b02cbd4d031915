"""
Shared utility functions.

This package contains utility code used by the CLI and the resolver.
"""

from .logging import JsonlFormatter, log_event, setup_logging

__all__ = [
    "setup_logging",
    "log_event",
    "JsonlFormatter",
]
