"""Handler mixins for the markuplex lexer.

Each handler is a mixin that tokenizes one family of constructs. The
Lexer class composes them and supplies the shared emit/error helpers.
"""

from __future__ import annotations

from markuplex.lexer.handlers.content import ContentHandlerMixin
from markuplex.lexer.handlers.declarations import DeclarationHandlerMixin
from markuplex.lexer.handlers.tags import TagHandlerMixin
from markuplex.lexer.handlers.text import TextHandlerMixin

__all__ = [
    "ContentHandlerMixin",
    "DeclarationHandlerMixin",
    "TagHandlerMixin",
    "TextHandlerMixin",
]
