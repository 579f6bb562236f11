"""Static classification tables shared by the lexer and its consumers.

Downstream tree builders rely on the same classification the lexer uses,
so these are part of the public API. All tables are immutable and safe to
share across threads.
"""

from __future__ import annotations

from types import MappingProxyType

# Elements that never have children or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is not tokenized as markup
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# Attributes that are meaningful without a value
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "hidden",
        "ismap",
        "loop",
        "multiple",
        "muted",
        "novalidate",
        "open",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

# Escaping map for re-serialization
SPECIAL_CHARS = MappingProxyType(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# Recognized named entities, keyed by their full source text
NAMED_ENTITIES = MappingProxyType(
    {
        "&lt;": "<",
        "&gt;": ">",
        "&amp;": "&",
        "&quot;": '"',
        "&apos;": "'",
        "&nbsp;": " ",
        "&copy;": "©",
        "&reg;": "®",
        "&trade;": "™",
        "&mdash;": "—",
        "&ndash;": "–",
        "&euro;": "€",
        "&pound;": "£",
        "&cent;": "¢",
    }
)

__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "NAMED_ENTITIES",
    "RAW_TEXT_ELEMENTS",
    "SPECIAL_CHARS",
    "VOID_ELEMENTS",
]
