"""Utility modules for Lilac.

Provides:
- text: escape_html, join_lines for sample text handling
- logger: get_logger for logging
"""

from lilac.utils.logger import get_logger
from lilac.utils.text import escape_html, join_lines

__all__ = [
    "escape_html",
    "get_logger",
    "join_lines",
]
