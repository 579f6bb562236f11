"""Opening and closing tag handler mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markuplex.constants import VOID_ELEMENTS
from markuplex.diagnostics import Diagnostic, LexerErrorType
from markuplex.lexer.modes import RAW_TEXT_MODES, ContentMode
from markuplex.tokens import Attribute, TagMetadata, Token, TokenType

if TYPE_CHECKING:
    from markuplex.lexer.state import LexerState
    from markuplex.scanner import Scanner


class TagHandlerMixin:
    """Mixin providing tag and attribute tokenization.

    Maintains the open-element stack: opening tags push (unless void or
    self-closing), closing tags pop and report a mismatch when the names
    differ. Opening ``<script>``/``<style>`` tags switch the content mode.

    """

    # These will be set by the Lexer class
    _scanner: Scanner
    _state: LexerState
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

    def _handle_text(self, first: str) -> None:
        """Tokenize text. Implemented by TextHandlerMixin."""
        raise NotImplementedError

    # =========================================================================
    # Opening tags
    # =========================================================================

    def _handle_opening_tag(self) -> None:
        """Tokenize ``<name attr="value" ...>`` after the consumed ``<``.

        A ``<`` not followed by a letter cannot start a tag and is
        tokenized as text instead.
        """
        scanner = self._scanner
        start = self._start
        if not scanner.peek().isalpha():
            self._handle_text("<")
            return

        name = self._read_tag_name()
        attributes = self._read_attributes()

        self_closing = scanner.match("/")
        if not scanner.match(">"):
            self._error(
                LexerErrorType.MALFORMED_TAG,
                f"Unterminated opening tag: <{name}",
                start,
            )

        lowered = name.lower()
        is_void = lowered in VOID_ELEMENTS
        if not self_closing:
            mode = RAW_TEXT_MODES.get(lowered)
            if mode is not None:
                self._enter_mode(mode)
            if not is_void:
                self._state.push_tag(name, start)

        prefix, sep, _ = name.partition(":")
        metadata = TagMetadata(
            is_void=is_void,
            is_custom_element="-" in name,
            namespace=prefix if sep and prefix else None,
            raw=scanner.get_source_segment(start, scanner.get_cursor()),
        )
        self._emit(
            TokenType.HTML_TAG_SELF_CLOSE if self_closing else TokenType.HTML_TAG_OPEN,
            name,
            start,
            attributes=tuple(attributes),
            metadata=metadata,
        )

    def _read_tag_name(self) -> str:
        scanner = self._scanner
        chars = []
        while scanner.has_next():
            char = scanner.peek()
            if char.isspace() or char == ">" or char == "/":
                break
            chars.append(scanner.next())
        return "".join(chars)

    def _read_attributes(self) -> list[Attribute]:
        """Read attributes up to (not including) ``>`` or ``/>``.

        A ``/`` that is not followed by ``>`` is skipped.
        """
        scanner = self._scanner
        attributes: list[Attribute] = []
        while True:
            self._skip_whitespace()
            if not scanner.has_next():
                break
            char = scanner.peek()
            if char == ">":
                break
            if char == "/":
                if self._at_self_close():
                    break
                scanner.next()
                continue

            attr_start = scanner.get_cursor()
            name = self._read_attribute_name()
            value = ""
            self._skip_whitespace()
            if scanner.match("="):
                self._skip_whitespace()
                value = self._read_attribute_value(name)

            if name:
                attributes.append(Attribute(name, value))
            else:
                self._error(
                    LexerErrorType.MALFORMED_ATTRIBUTE,
                    "Attribute value without a name",
                    attr_start,
                )
        return attributes

    def _read_attribute_name(self) -> str:
        scanner = self._scanner
        chars = []
        while scanner.has_next():
            char = scanner.peek()
            if char.isspace() or char in "=>/":
                break
            chars.append(scanner.next())
        return "".join(chars)

    def _read_attribute_value(self, name: str) -> str:
        """Read a quoted or unquoted value after ``=``.

        Unquoted values end at whitespace, ``>`` or ``/>``.
        """
        scanner = self._scanner
        value_start = scanner.get_cursor()
        if not scanner.has_next() or scanner.peek() == ">":
            self._error(
                LexerErrorType.MALFORMED_ATTRIBUTE,
                f"Missing value for attribute {name!r}",
                value_start,
            )
            return ""

        quote = scanner.peek()
        if quote == '"' or quote == "'":
            scanner.next()
            chars = []
            while scanner.has_next() and scanner.peek() != quote:
                chars.append(scanner.next())
            if not scanner.match(quote):
                self._error(
                    LexerErrorType.MALFORMED_ATTRIBUTE,
                    f"Unterminated value for attribute {name!r}",
                    value_start,
                )
            return "".join(chars)

        chars = []
        while scanner.has_next():
            char = scanner.peek()
            if char.isspace() or char == ">" or (char == "/" and self._at_self_close()):
                break
            chars.append(scanner.next())
        return "".join(chars)

    def _at_self_close(self) -> bool:
        scanner = self._scanner
        return scanner.starts_with("/>")

    def _skip_whitespace(self) -> None:
        scanner = self._scanner
        while scanner.has_next() and scanner.peek().isspace():
            scanner.next()

    # =========================================================================
    # Closing tags
    # =========================================================================

    def _handle_closing_tag(self) -> None:
        """Tokenize ``</name>`` after the consumed ``<`` and pop the tag stack.

        The popped name must match exactly; ``<DIV></div>`` is a mismatch.
        """
        scanner = self._scanner
        start = self._start
        scanner.next()  # /

        chars = []
        while scanner.has_next() and scanner.peek() != ">":
            chars.append(scanner.next())
        terminated = scanner.match(">")
        name = "".join(chars).strip()

        if not name:
            self._error(LexerErrorType.MALFORMED_TAG, "Closing tag without a name", start)
            return
        if not terminated:
            self._error(
                LexerErrorType.MALFORMED_TAG,
                f"Unterminated closing tag: </{name}",
                start,
            )

        lowered = name.lower()
        popped = self._state.pop_tag()
        if popped is None:
            self._error(
                LexerErrorType.MISMATCHED_TAG,
                f"Mismatched closing tag: no open element, found {name}",
                start,
            )
        elif popped[0] != name:
            self._error(
                LexerErrorType.MISMATCHED_TAG,
                f"Mismatched closing tag: expected {popped[0]}, found {name}",
                start,
            )

        if RAW_TEXT_MODES.get(lowered) is self._state.mode:
            self._enter_mode(ContentMode.NORMAL)

        self._emit(
            TokenType.HTML_TAG_CLOSE,
            name,
            start,
            metadata=TagMetadata(raw=scanner.get_source_segment(start, scanner.get_cursor())),
        )
