"""Character data and entity handler mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markuplex.constants import NAMED_ENTITIES
from markuplex.diagnostics import Diagnostic, LexerErrorType
from markuplex.tokens import Token, TokenType

if TYPE_CHECKING:
    from markuplex.config import LexerConfig
    from markuplex.scanner import Scanner


class TextHandlerMixin:
    """Mixin providing TEXT and ENTITY tokenization.

    Entities are recognized speculatively: the scanner is marked at the
    character after ``&``, and rewound if the candidate is not a known
    named entity so the literal text is tokenized again as TEXT.

    """

    # These will be set by the Lexer class
    _scanner: Scanner
    _config: LexerConfig
    _start: int

    def _emit(
        self, token_type: TokenType, value: str, start: int, end: int | None = None, **kwargs
    ) -> Token:
        """Append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _error(
        self,
        error_type: LexerErrorType,
        message: str,
        start: int,
        end: int | None = None,
        *,
        radius: int | None = None,
    ) -> Diagnostic:
        """Record a diagnostic. Implemented by Lexer."""
        raise NotImplementedError

    def _handle_text(self, first: str) -> None:
        """Accumulate text until the next ``<``, ``&`` or end of input.

        ``first`` has already been consumed. Whitespace-only runs are
        dropped unless ``collect_whitespace_text`` is set.
        """
        scanner = self._scanner
        start = scanner.get_cursor() - len(first)
        chars = [first]
        while scanner.has_next():
            char = scanner.peek()
            if char == "<" or char == "&":
                break
            chars.append(scanner.next())

        text = "".join(chars)
        if text.strip() or self._config.collect_whitespace_text:
            self._emit(TokenType.TEXT, text, start)

    def _handle_entity(self) -> None:
        """Tokenize a named entity starting at the consumed ``&``."""
        scanner = self._scanner
        start = self._start
        scanner.mark()

        chars = ["&"]
        terminated = False
        while scanner.has_next():
            char = scanner.peek()
            if char.isspace() or char == "<":
                break
            chars.append(scanner.next())
            if char == ";":
                terminated = True
                break

        entity = "".join(chars)
        if terminated and entity in NAMED_ENTITIES:
            scanner.release()
            self._emit(TokenType.ENTITY, entity, start)
            return

        scanner.reset()
        self._error(
            LexerErrorType.INVALID_CHARACTER_REFERENCE,
            f"Invalid HTML entity: {entity}",
            start,
            start + len(entity),
        )
        self._handle_text("&")
