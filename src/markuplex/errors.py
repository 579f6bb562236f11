"""Exception classes for markuplex.

Tokenization itself never raises for malformed markup; problems in the
input are collected as diagnostics. The exceptions here cover misuse of
the public API and scanner contract violations, plus LexError for callers
that want diagnostics raised.
"""

from __future__ import annotations


class MarkuplexError(Exception):
    """Base exception for all markuplex errors.

    Subclass this for specific error categories.
    """

    pass


class ScannerError(MarkuplexError):
    """Character-level scanner failure.

    Raised for an invalid source buffer or an out-of-range cursor
    operation. Inside the lexer these are caught by the recovery boundary
    and turned into MALFORMED_TAG diagnostics.
    """

    @classmethod
    def invalid_source(cls) -> ScannerError:
        return cls("Source cannot be None")

    @classmethod
    def end_of_input(cls) -> EndOfInputError:
        return EndOfInputError("Unexpected end of input")

    @classmethod
    def invalid_rewind(cls, position: object) -> ScannerError:
        return cls(f"Invalid rewind position: {position}")


class EndOfInputError(ScannerError):
    """Attempted to read past the end of the source buffer."""

    pass


class LexError(MarkuplexError):
    """Diagnostics promoted to an exception.

    Raised by ``TokenizeResult.raise_for_errors()`` for callers that want
    strict behavior. Carries the location of the first diagnostic.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
