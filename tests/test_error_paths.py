"""Error-path and malformed input tests.

Tests that exercise the exception hierarchy, diagnostic formatting and
graceful degradation for invalid markup. These complement the happy-path
tests in test_api.py and the per-handler tests in tests/lexer/.
"""

import pytest

from markuplex import tokenize
from markuplex.diagnostics import Diagnostic, DiagnosticCollector, LexerErrorType
from markuplex.errors import EndOfInputError, LexError, MarkuplexError, ScannerError
from markuplex.location import Position

# =========================================================================
# Exception hierarchy
# =========================================================================


class TestExceptionHierarchy:
    def test_scanner_error_is_markuplex_error(self) -> None:
        assert isinstance(ScannerError("x"), MarkuplexError)

    def test_end_of_input_is_scanner_error(self) -> None:
        err = ScannerError.end_of_input()
        assert isinstance(err, EndOfInputError)
        assert isinstance(err, ScannerError)
        assert str(err) == "Unexpected end of input"

    def test_invalid_source_message(self) -> None:
        assert str(ScannerError.invalid_source()) == "Source cannot be None"

    def test_invalid_rewind_message(self) -> None:
        assert str(ScannerError.invalid_rewind(-3)) == "Invalid rewind position: -3"


# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    """Verify LexError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = LexError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = LexError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = LexError("missing bracket", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = LexError("error", lineno=1, col_offset=1, source_file="page.html")
        assert str(err) == "page.html:1:1 error"

    def test_is_markuplex_error(self) -> None:
        assert isinstance(LexError("x"), MarkuplexError)


# =========================================================================
# Diagnostics
# =========================================================================


class TestDiagnosticFormatting:
    def _diagnostic(self) -> Diagnostic:
        return Diagnostic(
            type=LexerErrorType.UNCLOSED_TAG,
            message="Unclosed tag: div",
            position=Position(start=4, end=8, line=2, column=3),
            context="x<div",
        )

    def test_str(self) -> None:
        assert str(self._diagnostic()) == "2:3: UNCLOSED_TAG: Unclosed tag: div"

    def test_format_with_file(self) -> None:
        formatted = self._diagnostic().format("index.html")
        assert formatted == "index.html:2:3: UNCLOSED_TAG: Unclosed tag: div"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            self._diagnostic().message = "other"  # type: ignore[misc]


class TestDiagnosticCollector:
    def test_context_window(self) -> None:
        collector = DiagnosticCollector("0123456789abcdefghij")
        diag = collector.add(
            LexerErrorType.MALFORMED_TAG, "m", Position(10, 11, 1, 11), context_radius=3
        )
        assert diag.context == "789abc"

    def test_context_clamped(self) -> None:
        collector = DiagnosticCollector("abc")
        diag = collector.add(LexerErrorType.MALFORMED_TAG, "m", Position(1, 1, 1, 2))
        assert diag.context == "abc"

    def test_len_and_bool(self) -> None:
        collector = DiagnosticCollector("")
        assert not collector
        collector.add(LexerErrorType.UNCLOSED_COMMENT, "m", Position(0, 0, 1, 1))
        assert collector
        assert len(collector) == 1


class TestTokenizeResultErrors:
    def test_has_errors(self) -> None:
        assert tokenize("<p>").has_errors
        assert not tokenize("<p></p>").has_errors

    def test_errors_of(self) -> None:
        result = tokenize("&bad; <b>")
        assert len(result.errors_of(LexerErrorType.UNCLOSED_TAG)) == 1
        assert len(result.errors_of(LexerErrorType.INVALID_CHARACTER_REFERENCE)) == 1
        assert result.errors_of(LexerErrorType.MISMATCHED_TAG) == []

    def test_raise_for_errors_clean(self) -> None:
        tokenize("<p>ok</p>").raise_for_errors()

    def test_raise_for_errors_reports_first(self) -> None:
        result = tokenize("<a>\n</b><c>")
        with pytest.raises(LexError) as exc_info:
            result.raise_for_errors("doc.html")

        err = exc_info.value
        assert err.lineno == 2
        assert err.col_offset == 1
        assert err.source_file == "doc.html"
        assert "MISMATCHED_TAG" in str(err)
        assert "(and 1 more)" in str(err)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source",
        [
            "<",
            "</",
            "<!",
            "<?",
            "&",
            "<a b=>",
            "<a =x>",
            "<<a>>",
            "</>",
            "<!-->",
            "<![CDATA[]]",
            "<script></script",
            "\x00<\x00>",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        tokens, _ = tokenize(source)
        assert tokens[-1].type.name == "EOF"

    def test_missing_attribute_value(self) -> None:
        tokens, errors = tokenize("<a b=></a>")
        assert tokens[0].get_attribute("b") == ""
        assert [e.type for e in errors] == [LexerErrorType.MALFORMED_ATTRIBUTE]
        assert errors[0].message == "Missing value for attribute 'b'"

    def test_value_without_name(self) -> None:
        tokens, errors = tokenize("<a =x></a>")
        assert tokens[0].attributes == ()
        assert [e.message for e in errors] == ["Attribute value without a name"]

    def test_empty_closing_tag(self) -> None:
        _, errors = tokenize("</>")
        assert [e.message for e in errors] == ["Closing tag without a name"]

    def test_bogus_declaration(self) -> None:
        tokens, errors = tokenize("<!foo>bar")
        assert [t.value for t in tokens[:-1]] == ["bar"]
        assert errors[0].message == "Unrecognized markup declaration: <!foo>"
