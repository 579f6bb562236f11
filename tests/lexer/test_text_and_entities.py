"""Tests for text runs and named entity recognition."""

from __future__ import annotations

import pytest

from markuplex.config import LexerConfig
from markuplex.diagnostics import LexerErrorType
from markuplex.lexer import Lexer
from markuplex.tokens import TokenType


def _pairs(tokens) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in tokens if t.type != TokenType.EOF]


class TestEntities:
    @pytest.mark.parametrize("entity", ["&amp;", "&lt;", "&gt;", "&nbsp;", "&copy;", "&euro;"])
    def test_known_entity(self, entity: str) -> None:
        tokens, errors = Lexer(entity).tokenize()
        assert _pairs(tokens) == [(TokenType.ENTITY, entity)]
        assert errors == []

    def test_entity_between_text(self) -> None:
        tokens, errors = Lexer("Tom &amp; Jerry").tokenize()
        assert _pairs(tokens) == [
            (TokenType.TEXT, "Tom "),
            (TokenType.ENTITY, "&amp;"),
            (TokenType.TEXT, "Jerry"),
        ]
        assert errors == []

    def test_adjacent_entities(self) -> None:
        tokens, _ = Lexer("&lt;&gt;").tokenize()
        assert _pairs(tokens) == [
            (TokenType.ENTITY, "&lt;"),
            (TokenType.ENTITY, "&gt;"),
        ]

    def test_entity_followed_by_text(self) -> None:
        tokens, _ = Lexer("&copy;2024").tokenize()
        assert _pairs(tokens) == [(TokenType.ENTITY, "&copy;"), (TokenType.TEXT, "2024")]

    def test_unknown_entity_text_preserved(self) -> None:
        tokens, errors = Lexer("<p>&foo;</p>").tokenize()

        assert [e.type for e in errors] == [LexerErrorType.INVALID_CHARACTER_REFERENCE]
        assert "&foo;" in errors[0].message
        text = [t.value for t in tokens if t.type == TokenType.TEXT]
        assert text == ["&foo;"]

    def test_numeric_reference_not_resolved(self) -> None:
        tokens, errors = Lexer("&#123;").tokenize()
        assert _pairs(tokens) == [(TokenType.TEXT, "&#123;")]
        assert [e.type for e in errors] == [LexerErrorType.INVALID_CHARACTER_REFERENCE]

    def test_missing_semicolon(self) -> None:
        tokens, errors = Lexer("&amp").tokenize()
        assert _pairs(tokens) == [(TokenType.TEXT, "&amp")]
        assert len(errors) == 1

    def test_bare_ampersand(self) -> None:
        tokens, errors = Lexer("a & b").tokenize()
        assert "".join(v for _, v in _pairs(tokens)) == "a & b"
        assert [e.type for e in errors] == [LexerErrorType.INVALID_CHARACTER_REFERENCE]

    def test_entity_scan_stops_at_tag(self) -> None:
        tokens, errors = Lexer("&amp<b>x</b>").tokenize()
        assert _pairs(tokens)[:2] == [
            (TokenType.TEXT, "&amp"),
            (TokenType.HTML_TAG_OPEN, "b"),
        ]
        assert len(errors) == 1

    def test_entity_in_attribute_not_tokenized(self) -> None:
        tokens, errors = Lexer('<a title="&foo;"></a>').tokenize()
        assert tokens[0].get_attribute("title") == "&foo;"
        assert errors == []


class TestText:
    def test_text_runs_until_tag(self) -> None:
        tokens, _ = Lexer("<p>Hello  world</p>").tokenize()
        assert tokens[1].value == "Hello  world"

    def test_leading_whitespace_skipped(self) -> None:
        tokens, _ = Lexer("<p>  hi </p>").tokenize()
        assert tokens[1].value == "hi "

    def test_whitespace_only_dropped(self) -> None:
        tokens, _ = Lexer("<p>  \n\t </p>").tokenize()
        assert TokenType.TEXT not in [t.type for t in tokens]

    def test_multiline_text_single_token(self) -> None:
        tokens, _ = Lexer("a\nb").tokenize()
        assert _pairs(tokens) == [(TokenType.TEXT, "a\nb")]

    def test_collect_whitespace_text(self) -> None:
        config = LexerConfig(collect_whitespace_text=True)
        tokens, _ = Lexer("<p>   </p>", config=config).tokenize()
        assert _pairs(tokens) == [
            (TokenType.HTML_TAG_OPEN, "p"),
            (TokenType.TEXT, "   "),
            (TokenType.HTML_TAG_CLOSE, "p"),
        ]

    def test_empty_source(self) -> None:
        tokens, errors = Lexer("").tokenize()
        assert [t.type for t in tokens] == [TokenType.EOF]
        assert errors == []
