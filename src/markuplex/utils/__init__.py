"""Utility modules for markuplex.

Provides:
- text: escape_html, decode_entity, unescape_entities
- logger: get_logger for logging
"""

from markuplex.utils.logger import get_logger
from markuplex.utils.text import decode_entity, escape_html, unescape_entities

__all__ = [
    "decode_entity",
    "escape_html",
    "get_logger",
    "unescape_entities",
]
