"""Single-pass, error-tolerant state-machine lexer.

The lexer walks the source once through a Scanner. In NORMAL mode it
dispatches on each character; in a content mode (script, style, CDATA,
processing instruction) it hands control to the matching content handler
until the delimiter is found.

Malformed input never raises. Problems are recorded as diagnostics, and
any internal failure inside a handler is caught at the per-character
recovery boundary, reported as MALFORMED_TAG, and skipped past.

Thread Safety:
Lexer instances own all of their state. Tokenize independent documents
concurrently by giving each its own Lexer.

"""

from __future__ import annotations

from markuplex.config import LexerConfig, get_lexer_config
from markuplex.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    LexerErrorType,
    TokenizeResult,
)
from markuplex.errors import MarkuplexError, ScannerError
from markuplex.lexer.handlers import (
    ContentHandlerMixin,
    DeclarationHandlerMixin,
    TagHandlerMixin,
    TextHandlerMixin,
)
from markuplex.lexer.modes import ContentMode
from markuplex.lexer.state import LexerState
from markuplex.location import LineIndex
from markuplex.scanner import Scanner
from markuplex.tokens import Attribute, TagMetadata, Token, TokenType
from markuplex.utils.logger import get_logger

logger = get_logger(__name__)


# TextHandlerMixin first: TagHandlerMixin declares a _handle_text stub
class Lexer(
    TextHandlerMixin,
    TagHandlerMixin,
    DeclarationHandlerMixin,
    ContentHandlerMixin,
):
    """Tokenizer for HTML-like markup.

    Usage:
            >>> tokens, errors = Lexer("<div>Hi</div>").tokenize()
            >>> tokens
        [Token(HTML_TAG_OPEN, 'div', 1:1), Token(TEXT, 'Hi', 1:6), Token(HTML_TAG_CLOSE, 'div', 1:8), Token(EOF, '', 1:14)]
            >>> errors
        []

    Each tokenize() call starts from a fresh Scanner and LexerState, so
    calling it twice returns equal results.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_index",
        "_scanner",
        "_state",
        "_tokens",
        "_diagnostics",
        "_start",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages
            config: Lexer configuration (defaults to the active context config)

        Raises:
            ScannerError: If ``source`` is None or not a string.
        """
        if source is None or not isinstance(source, str):
            raise ScannerError.invalid_source()
        self._source = source
        self._source_file = source_file
        self._config = config if config is not None else get_lexer_config()
        self._index = LineIndex(source)
        self._scanner = Scanner(source)
        self._state = LexerState()
        self._tokens: list[Token] = []
        self._diagnostics = DiagnosticCollector(source)
        self._start = 0

    @property
    def state(self) -> LexerState:
        """State of the most recent (or in-progress) tokenize() call."""
        return self._state

    @property
    def source_file(self) -> str | None:
        return self._source_file

    def tokenize(self) -> TokenizeResult:
        """Tokenize the whole source.

        Returns:
            TokenizeResult of (tokens, errors). The token list always ends
            with exactly one EOF token; errors may be empty.

        Raises:
            Exception: Only when ``config.debug`` is set: scanner contract
                violations and unexpected handler failures are re-raised
                instead of being reported as MALFORMED_TAG.
        """
        self._scanner = Scanner(self._source)
        self._state = LexerState()
        self._tokens = []
        self._diagnostics = DiagnosticCollector(self._source)

        scanner = self._scanner
        while scanner.has_next():
            self._start = scanner.get_cursor()
            self._guarded(self._dispatch)

        # A content mode entered on the last characters still needs its
        # token and UNCLOSED_* diagnostic
        if self._state.mode is not ContentMode.NORMAL:
            self._start = scanner.get_cursor()
            self._guarded(self._handle_content)

        end = scanner.get_cursor()
        self._emit(TokenType.EOF, "", end, end)
        self._validate_final_state()

        logger.debug(
            "Tokenized %s: %d tokens, %d diagnostics",
            self._source_file or "<string>",
            len(self._tokens),
            len(self._diagnostics),
        )
        return TokenizeResult(self._tokens, self._diagnostics.diagnostics)

    def _guarded(self, handler) -> None:
        """Run one dispatch step inside the recovery boundary."""
        depth = self._scanner.marker_depth
        try:
            handler()
        except ScannerError as exc:
            if self._config.debug:
                logger.debug("Scanner contract violation at offset %d", self._start)
                raise
            self._recover(exc, depth)
        except MarkuplexError as exc:
            self._recover(exc, depth)
        except Exception as exc:
            if self._config.debug:
                logger.debug("Internal error at offset %d", self._start)
                raise
            logger.warning("Internal lexer error at offset %d: %r", self._start, exc)
            self._recover(exc, depth)

    def _dispatch(self) -> None:
        """Handle one step: a content-mode run, or one NORMAL-mode character."""
        if self._state.mode is not ContentMode.NORMAL:
            self._handle_content()
            return

        scanner = self._scanner
        char = scanner.next()
        if char == "<":
            if not scanner.has_next():
                self._handle_text(char)
                return
            following = scanner.peek()
            if following == "!":
                self._handle_markup_declaration()
            elif following == "/":
                self._handle_closing_tag()
            elif following == "?":
                self._handle_processing_instruction_start()
            else:
                self._handle_opening_tag()
        elif char == "&":
            self._handle_entity()
        elif char.isspace() and not self._config.collect_whitespace_text:
            # Newlines included; line/column come from the LineIndex
            pass
        else:
            self._handle_text(char)

    # =========================================================================
    # Error recovery and final validation
    # =========================================================================

    def _recover(self, exc: Exception, marker_depth: int) -> None:
        """Report MALFORMED_TAG and skip to the next ``<``."""
        scanner = self._scanner
        while scanner.marker_depth > marker_depth:
            scanner.release()

        self._error(
            LexerErrorType.MALFORMED_TAG,
            str(exc) or type(exc).__name__,
            self._start,
            radius=self._config.recovery_context_radius,
        )
        logger.debug("Recovering from %r at offset %d", exc, self._start)

        if scanner.get_cursor() <= self._start and scanner.has_next():
            scanner.next()
        while scanner.has_next() and scanner.peek() != "<":
            scanner.next()

    def _validate_final_state(self) -> None:
        """Report every element still open at end of input, in stack order."""
        state = self._state
        for name, offset in zip(state.tag_stack, state.tag_offsets):
            self._error(
                LexerErrorType.UNCLOSED_TAG,
                f"Unclosed tag: {name}",
                offset,
                offset + len(name) + 1,
                radius=self._config.recovery_context_radius,
            )

    # =========================================================================
    # Shared helpers for the handler mixins
    # =========================================================================

    def _enter_mode(self, mode: ContentMode) -> None:
        if mode is not self._state.mode:
            logger.debug("Mode %s -> %s", self._state.mode.name, mode.name)
            self._state.mode = mode

    def _emit(
        self,
        token_type: TokenType,
        value: str,
        start: int,
        end: int | None = None,
        *,
        attributes: tuple[Attribute, ...] = (),
        metadata: TagMetadata | None = None,
    ) -> Token:
        token = Token(
            type=token_type,
            value=value,
            position=self._index.position(
                start, end if end is not None else self._scanner.get_cursor()
            ),
            attributes=attributes,
            metadata=metadata,
        )
        self._tokens.append(token)
        return token

    def _error(
        self,
        error_type: LexerErrorType,
        message: str,
        start: int,
        end: int | None = None,
        *,
        radius: int | None = None,
    ) -> Diagnostic:
        if end is None:
            end = max(start, self._scanner.get_cursor())
        return self._diagnostics.add(
            error_type,
            message,
            self._index.position(start, end),
            context_radius=radius if radius is not None else self._config.context_radius,
        )
