"""Tests ensuring lexer state is consistent after tokenization.

These tests verify that the tag stack and content mode are managed
correctly, and that no state leaks between tokenize() calls.
"""

from __future__ import annotations

import inspect

from markuplex.lexer import ContentMode, Lexer, LexerState
from markuplex.lexer.handlers import (
    ContentHandlerMixin,
    DeclarationHandlerMixin,
    TagHandlerMixin,
    TextHandlerMixin,
)
from markuplex.tokens import TokenType


class TestTagStack:
    """Verify the open-element stack is pushed and popped correctly."""

    def test_stack_empty_after_well_formed(self) -> None:
        lexer = Lexer("<html><body><p>x</p></body></html>")
        lexer.tokenize()

        assert lexer.state.tag_stack == []
        assert lexer.state.tag_offsets == []

    def test_stack_holds_unclosed_in_order(self) -> None:
        lexer = Lexer("<html><body>")
        lexer.tokenize()

        assert lexer.state.tag_stack == ["html", "body"]
        assert lexer.state.tag_offsets == [0, 6]

    def test_stack_keeps_original_case(self) -> None:
        lexer = Lexer("<Section>")
        lexer.tokenize()
        assert lexer.state.tag_stack == ["Section"]

    def test_void_and_self_closing_not_pushed(self) -> None:
        lexer = Lexer("<div><br><hr/><img src=x><span/>")
        lexer.tokenize()
        assert lexer.state.tag_stack == ["div"]

    def test_mismatch_pops_anyway(self) -> None:
        lexer = Lexer("<a><b></a>")
        lexer.tokenize()
        assert lexer.state.tag_stack == ["a"]

    def test_unclosed_script_removed_from_stack(self) -> None:
        lexer = Lexer("<div><script>x")
        lexer.tokenize()
        assert lexer.state.tag_stack == ["div"]


class TestModeTransitions:
    """Mode should always return to NORMAL."""

    def test_script_returns_to_normal(self) -> None:
        lexer = Lexer("<script>x</script>")
        lexer.tokenize()
        assert lexer.state.mode is ContentMode.NORMAL

    def test_unclosed_modes_return_to_normal(self) -> None:
        for source in ["<style>x", "<![CDATA[x", "<?pi x", "<script>"]:
            lexer = Lexer(source)
            lexer.tokenize()
            assert lexer.state.mode is ContentMode.NORMAL, source

    def test_mode_observed_during_tokenization(self) -> None:
        seen: list[ContentMode] = []

        class RecordingLexer(Lexer):
            def _handle_content(self) -> None:
                seen.append(self._state.mode)
                super()._handle_content()

        RecordingLexer("<style>a</style><![CDATA[b]]><?t c?>").tokenize()
        assert seen == [ContentMode.STYLE, ContentMode.CDATA, ContentMode.PROCESSING_INSTRUCTION]


class TestLexerStateFlags:
    """The single mode value keeps the content flags mutually exclusive."""

    def test_default_is_normal(self) -> None:
        state = LexerState()
        assert state.in_normal_mode
        assert not (state.in_script or state.in_style or state.in_cdata)
        assert not state.in_processing_instruction

    def test_at_most_one_flag(self) -> None:
        for mode in ContentMode:
            state = LexerState(mode=mode)
            flags = [
                state.in_script,
                state.in_style,
                state.in_cdata,
                state.in_processing_instruction,
            ]
            assert sum(flags) == (0 if mode is ContentMode.NORMAL else 1)

    def test_push_pop(self) -> None:
        state = LexerState()
        state.push_tag("div", 0)
        state.push_tag("p", 5)
        assert state.current_tag == "p"
        assert state.pop_tag() == ("p", 5)
        assert state.pop_tag() == ("div", 0)
        assert state.pop_tag() is None
        assert state.current_tag is None


class TestFreshStatePerCall:
    def test_repeated_tokenize_identical(self) -> None:
        lexer = Lexer("<div><p>x")
        first = lexer.tokenize()
        second = lexer.tokenize()

        assert first == second
        assert lexer.state.tag_stack == ["div", "p"]

    def test_results_not_shared(self) -> None:
        lexer = Lexer("<b>x</b>")
        first = lexer.tokenize()
        second = lexer.tokenize()
        assert first.tokens is not second.tokens
        assert [t.type for t in first.tokens][-1] == TokenType.EOF


class TestMixinComposition:
    """Every helper a mixin declares must resolve to a real implementation."""

    MIXINS = (TextHandlerMixin, TagHandlerMixin, DeclarationHandlerMixin, ContentHandlerMixin)

    def test_no_stub_wins_resolution(self) -> None:
        for mixin in self.MIXINS:
            for name, member in vars(mixin).items():
                if not inspect.isfunction(member):
                    continue
                resolved = getattr(Lexer, name)
                assert "NotImplementedError" not in resolved.__code__.co_names, (
                    f"Lexer.{name} resolves to stub {resolved.__qualname__}"
                )

    def test_handle_text_comes_from_text_mixin(self) -> None:
        assert Lexer._handle_text is TextHandlerMixin._handle_text

    def test_simple_document_tokenizes(self) -> None:
        tokens, errors = Lexer("<div>Hi</div>").tokenize()
        assert [t.type for t in tokens] == [
            TokenType.HTML_TAG_OPEN,
            TokenType.TEXT,
            TokenType.HTML_TAG_CLOSE,
            TokenType.EOF,
        ]
        assert errors == []
