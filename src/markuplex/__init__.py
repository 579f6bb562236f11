"""
markuplex: single-pass, error-tolerant tokenizer for HTML-like markup.

Turns a source string into a flat list of typed tokens (tags, text,
comments, entities, raw-text blocks, processing instructions) plus a list
of diagnostics. Malformed input never raises; it is reported.

Quick Start:
    >>> from markuplex import tokenize
    >>> tokens, errors = tokenize("<div>Hi</div>")
    >>> [t.type.name for t in tokens]
    ['HTML_TAG_OPEN', 'TEXT', 'HTML_TAG_CLOSE', 'EOF']
    >>> errors
    []

    >>> tokens, errors = tokenize("<p>")
    >>> [e.type.name for e in errors]
    ['UNCLOSED_TAG']

Installation:
    pip install markuplex            # Zero runtime dependencies
    pip install markuplex[test]      # + pytest, hypothesis
"""

from markuplex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from markuplex.constants import (
    BOOLEAN_ATTRIBUTES,
    NAMED_ENTITIES,
    RAW_TEXT_ELEMENTS,
    SPECIAL_CHARS,
    VOID_ELEMENTS,
)
from markuplex.diagnostics import Diagnostic, LexerErrorType, TokenizeResult
from markuplex.errors import (
    EndOfInputError,
    LexError,
    MarkuplexError,
    ScannerError,
)
from markuplex.lexer import ContentMode, Lexer, LexerState
from markuplex.location import Position
from markuplex.scanner import Scanner
from markuplex.serialization import from_json, to_dict, to_json
from markuplex.tokens import Attribute, TagMetadata, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexerConfig | None = None,
) -> TokenizeResult:
    """Tokenize markup source.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        config: Lexer configuration (defaults to the active context config)

    Returns:
        TokenizeResult of (tokens, errors)

    Example:
        >>> result = tokenize("<br>")
        >>> result.tokens[0].metadata.is_void
        True

    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


__all__ = [
    # Entry points
    "tokenize",
    "Lexer",
    "LexerState",
    "ContentMode",
    "Scanner",
    # Tokens
    "Token",
    "TokenType",
    "Attribute",
    "TagMetadata",
    "Position",
    # Diagnostics
    "Diagnostic",
    "LexerErrorType",
    "TokenizeResult",
    # Errors
    "MarkuplexError",
    "ScannerError",
    "EndOfInputError",
    "LexError",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Tables
    "VOID_ELEMENTS",
    "RAW_TEXT_ELEMENTS",
    "BOOLEAN_ATTRIBUTES",
    "SPECIAL_CHARS",
    "NAMED_ENTITIES",
    # Serialization
    "to_dict",
    "to_json",
    "from_json",
]
