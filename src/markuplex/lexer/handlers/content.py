"""Content-mode handler mixin.

Each non-NORMAL mode accumulates raw characters verbatim into a single
content token until its delimiter. Markup inside the content is never
interpreted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markuplex.diagnostics import Diagnostic, LexerErrorType
from markuplex.lexer.modes import (
    CDATA_END,
    CONTENT_TOKEN_TYPES,
    PI_END,
    RAW_TEXT_TAGS,
    ContentMode,
)
from markuplex.tokens import Token, TokenType

if TYPE_CHECKING:
    from markuplex.lexer.state import LexerState
    from markuplex.scanner import Scanner


class ContentHandlerMixin:
    """Mixin providing SCRIPT, STYLE, CDATA and PROCESSING_INSTRUCTION scanning.

    Raw-text elements end at their case-insensitive end tag, which is
    detected by speculative lookahead and left unconsumed so the closing
    tag handler emits it and pops the tag stack. CDATA and PI delimiters
    are consumed here.

    """

    # These will be set by the Lexer class
    _scanner: Scanner
    _state: LexerState

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

    def _handle_content(self) -> None:
        """Scan the active content mode to its delimiter or end of input."""
        mode = self._state.mode
        if mode is ContentMode.SCRIPT or mode is ContentMode.STYLE:
            self._handle_raw_text_content(mode)
        elif mode is ContentMode.CDATA:
            self._handle_delimited_content(
                mode, CDATA_END, LexerErrorType.UNCLOSED_CDATA, "Unclosed CDATA section"
            )
        elif mode is ContentMode.PROCESSING_INSTRUCTION:
            self._handle_delimited_content(
                mode,
                PI_END,
                LexerErrorType.UNCLOSED_PROCESSING_INSTRUCTION,
                "Unclosed processing instruction",
            )

    def _handle_raw_text_content(self, mode: ContentMode) -> None:
        scanner = self._scanner
        tag = RAW_TEXT_TAGS[mode]
        token_type = CONTENT_TOKEN_TYPES[mode]
        start = scanner.get_cursor()

        chars = []
        while scanner.has_next():
            if scanner.peek() == "<" and self._check_end_tag(tag):
                self._emit(token_type, "".join(chars), start)
                self._enter_mode(ContentMode.NORMAL)
                return
            chars.append(scanner.next())

        self._emit(token_type, "".join(chars), start)
        self._enter_mode(ContentMode.NORMAL)
        # Reported here, so drop it from the stack to avoid a second UNCLOSED_TAG
        state = self._state
        offset = start
        if state.current_tag is not None and state.current_tag.lower() == tag:
            offset = state.tag_offsets[-1]
            state.pop_tag()
        self._error(LexerErrorType.UNCLOSED_TAG, f"Unclosed <{tag}> tag", offset)

    def _check_end_tag(self, tag: str) -> bool:
        """Check, without consuming, whether the cursor is at ``</tag>``.

        The tag name is compared case-insensitively and may be followed by
        whitespace before the ``>``.
        """
        scanner = self._scanner
        if not scanner.starts_with("</"):
            return False

        scanner.mark()
        try:
            scanner.next()  # <
            scanner.next()  # /
            chars = []
            while scanner.has_next():
                char = scanner.peek()
                if char.isspace() or char == ">" or char == "/":
                    break
                chars.append(scanner.next())
            if "".join(chars).lower() != tag:
                return False
            while scanner.has_next() and scanner.peek().isspace():
                scanner.next()
            return scanner.has_next() and scanner.peek() == ">"
        finally:
            scanner.reset()

    def _handle_delimited_content(
        self,
        mode: ContentMode,
        delimiter: str,
        error_type: LexerErrorType,
        message: str,
    ) -> None:
        scanner = self._scanner
        token_type = CONTENT_TOKEN_TYPES[mode]
        start = scanner.get_cursor()

        chars = []
        while scanner.has_next():
            if scanner.starts_with(delimiter):
                end = scanner.get_cursor()
                for _ in delimiter:
                    scanner.next()
                self._emit(token_type, "".join(chars), start, end)
                self._enter_mode(ContentMode.NORMAL)
                return
            chars.append(scanner.next())

        self._emit(token_type, "".join(chars), start)
        self._enter_mode(ContentMode.NORMAL)
        self._error(error_type, message, start)
