"""Text helpers built on the lexer's entity and escaping tables.

Example:
    >>> from markuplex.utils.text import escape_html, unescape_entities
    >>> escape_html("<a href='x'>")
    '&lt;a href=&#39;x&#39;&gt;'
    >>> unescape_entities("Tom &amp; Jerry")
    'Tom & Jerry'
"""

from __future__ import annotations

import re

from markuplex.constants import NAMED_ENTITIES, SPECIAL_CHARS

_ESCAPE_TABLE = str.maketrans(dict(SPECIAL_CHARS))
_ENTITY_PATTERN = re.compile(r"&[A-Za-z]+;")


def escape_html(text: str) -> str:
    """Escape the characters in SPECIAL_CHARS for re-serialization.

    Examples:
        >>> escape_html('"quoted" & <tagged>')
        '&quot;quoted&quot; &amp; &lt;tagged&gt;'
    """
    if not text:
        return ""
    return text.translate(_ESCAPE_TABLE)


def decode_entity(raw: str) -> str | None:
    """Decode one ENTITY token value (``&amp;``), or None if unknown."""
    return NAMED_ENTITIES.get(raw)


def unescape_entities(text: str) -> str:
    """Replace known named entities in ``text``; unknown ones are left alone.

    Numeric character references are not decoded.
    """
    if "&" not in text:
        return text
    return _ENTITY_PATTERN.sub(lambda m: NAMED_ENTITIES.get(m.group(0), m.group(0)), text)
