"""Markup declaration and processing instruction handler mixin.

Handles everything introduced by ``<!`` (comments, doctype, CDATA
sections) and the target of ``<?`` processing instructions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markuplex.diagnostics import Diagnostic, LexerErrorType
from markuplex.lexer.modes import CDATA_START, COMMENT_END, COMMENT_START, ContentMode
from markuplex.tokens import Token, TokenType

if TYPE_CHECKING:
    from markuplex.scanner import Scanner


class DeclarationHandlerMixin:
    """Mixin providing comment, doctype, CDATA-entry and PI-target handling."""

    # These will be set by the Lexer class
    _scanner: Scanner
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

    def _enter_mode(self, mode: ContentMode) -> None:
        """Switch content mode. Implemented by Lexer."""
        raise NotImplementedError

    def _handle_markup_declaration(self) -> None:
        """Dispatch on what follows ``<!``.

        - ``<!--``: comment
        - ``<![CDATA[``: enter CDATA mode
        - ``<!D`` / ``<!d``: doctype
        - anything else: skipped through ``>`` with a MALFORMED_TAG diagnostic
        """
        scanner = self._scanner
        scanner.next()  # !

        if scanner.starts_with(COMMENT_START):
            self._handle_comment()
        elif scanner.starts_with(CDATA_START):
            for _ in CDATA_START:
                scanner.next()
            self._enter_mode(ContentMode.CDATA)
        elif scanner.has_next() and scanner.peek() in "Dd":
            self._handle_doctype()
        else:
            self._skip_bogus_declaration()

    def _handle_comment(self) -> None:
        scanner = self._scanner
        start = self._start
        scanner.next()  # -
        scanner.next()  # -

        chars = []
        while scanner.has_next():
            if scanner.starts_with(COMMENT_END):
                for _ in COMMENT_END:
                    scanner.next()
                self._emit(TokenType.COMMENT_CONTENT, "".join(chars), start)
                return
            chars.append(scanner.next())

        self._emit(TokenType.COMMENT_CONTENT, "".join(chars), start)
        self._error(LexerErrorType.UNCLOSED_COMMENT, "Unclosed comment", start)

    def _handle_doctype(self) -> None:
        """Capture ``<!DOCTYPE ...>`` verbatim, including the delimiters."""
        scanner = self._scanner
        start = self._start
        while scanner.has_next() and scanner.peek() != ">":
            scanner.next()
        scanner.match(">")
        self._emit(
            TokenType.DOCTYPE, scanner.get_source_segment(start, scanner.get_cursor()), start
        )

    def _skip_bogus_declaration(self) -> None:
        scanner = self._scanner
        start = self._start
        while scanner.has_next() and scanner.peek() != ">":
            scanner.next()
        scanner.match(">")
        text = scanner.get_source_segment(start, scanner.get_cursor())
        self._error(
            LexerErrorType.MALFORMED_TAG,
            f"Unrecognized markup declaration: {text}",
            start,
        )

    def _handle_processing_instruction_start(self) -> None:
        """Emit PI_TARGET for ``<?target`` and enter PI mode."""
        scanner = self._scanner
        start = self._start
        scanner.next()  # ?

        chars = []
        while scanner.has_next():
            char = scanner.peek()
            if char.isspace() or char == "?":
                break
            chars.append(scanner.next())

        self._emit(TokenType.PI_TARGET, "".join(chars), start)
        self._enter_mode(ContentMode.PROCESSING_INSTRUCTION)
