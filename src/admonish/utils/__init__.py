"""Utility modules for admonish.

Provides:
- text: slugify, strip_tags, escape_html, longest_run
- logger: get_logger for logging
"""

from admonish.utils.logger import get_logger
from admonish.utils.text import escape_html, longest_run, slugify, strip_tags

__all__ = [
    "escape_html",
    "get_logger",
    "longest_run",
    "slugify",
    "strip_tags",
]
