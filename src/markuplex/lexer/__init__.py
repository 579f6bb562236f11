"""State-machine lexer for markuplex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState, ContentMode
├── core.py              # Lexer class (mixin composition, dispatch, recovery)
├── modes.py             # ContentMode enum, delimiters
├── state.py             # LexerState (tag stack + active mode)
└── handlers/            # Construct-specific handler mixins
    ├── tags.py          # Opening/closing tags and attributes
    ├── declarations.py  # Comments, doctype, CDATA entry, PI target
    ├── content.py       # Script/style/CDATA/PI content modes
    └── text.py          # Text and named entities

Usage:
    >>> from markuplex.lexer import Lexer
    >>> tokens, errors = Lexer("<p>Hello</p>").tokenize()
    >>> [t.type.name for t in tokens]
    ['HTML_TAG_OPEN', 'TEXT', 'HTML_TAG_CLOSE', 'EOF']

"""

from markuplex.lexer.core import Lexer
from markuplex.lexer.modes import ContentMode
from markuplex.lexer.state import LexerState

__all__ = ["ContentMode", "Lexer", "LexerState"]
