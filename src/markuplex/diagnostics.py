"""Non-fatal diagnostics collected during tokenization.

The lexer never raises for malformed markup. Each problem is recorded as
a Diagnostic carrying its position and a slice of the surrounding source,
and handed back to the caller next to the token list.

Thread Safety:
Diagnostic is frozen. A DiagnosticCollector belongs to a single
tokenize() call and is never shared.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

from markuplex.errors import LexError
from markuplex.location import Position

if TYPE_CHECKING:
    from markuplex.tokens import Token


class LexerErrorType(Enum):
    """Kinds of diagnostics the lexer can record."""

    MALFORMED_TAG = auto()  # Recovery boundary triggered
    UNCLOSED_TAG = auto()  # Open element at end of input
    UNEXPECTED_CLOSING_TAG = auto()  # Reserved
    MALFORMED_ATTRIBUTE = auto()
    UNCLOSED_COMMENT = auto()
    UNCLOSED_CDATA = auto()
    UNCLOSED_PROCESSING_INSTRUCTION = auto()
    INVALID_CHARACTER_REFERENCE = auto()  # Entity not in NAMED_ENTITIES
    MISMATCHED_TAG = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A well-formedness or syntax problem found in the source.

    Attributes:
        type: Diagnostic kind
        message: Human-readable description
        position: Where the problem was detected
        context: Source text surrounding the problem

    """

    type: LexerErrorType
    message: str
    position: Position
    context: str

    def format(self, source_file: str | None = None) -> str:
        """Format as ``[file:]line:col: TYPE: message``."""
        prefix = f"{source_file}:" if source_file else ""
        return f"{prefix}{self.position}: {self.type.name}: {self.message}"

    def __str__(self) -> str:
        return self.format()


class DiagnosticCollector:
    """Accumulates diagnostics for one tokenize() call.

    Builds the context excerpt from the source so callers only supply the
    error site.
    """

    __slots__ = ("_source", "_diagnostics")

    def __init__(self, source: str) -> None:
        self._source = source
        self._diagnostics: list[Diagnostic] = []

    def add(
        self,
        error_type: LexerErrorType,
        message: str,
        position: Position,
        context_radius: int = 10,
    ) -> Diagnostic:
        """Record a diagnostic centered on ``position.start``."""
        site = position.start
        context = self._source[
            max(0, site - context_radius) : min(len(self._source), site + context_radius)
        ]
        diagnostic = Diagnostic(
            type=error_type, message=message, position=position, context=context
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        return bool(self._diagnostics)


class TokenizeResult(NamedTuple):
    """Tokens and diagnostics from one tokenize() call.

    Unpacks as ``tokens, errors = lexer.tokenize()``.
    """

    tokens: list[Token]
    errors: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_of(self, error_type: LexerErrorType) -> list[Diagnostic]:
        """Return the diagnostics of one kind, in recording order."""
        return [err for err in self.errors if err.type is error_type]

    def raise_for_errors(self, source_file: str | None = None) -> None:
        """Raise LexError describing the first diagnostic, if any.

        Raises:
            LexError: When at least one diagnostic was recorded.
        """
        if not self.errors:
            return
        first = self.errors[0]
        extra = len(self.errors) - 1
        message = f"{first.type.name}: {first.message}"
        if extra:
            message += f" (and {extra} more)"
        raise LexError(
            message,
            lineno=first.position.line,
            col_offset=first.position.column,
            source_file=source_file,
        )
