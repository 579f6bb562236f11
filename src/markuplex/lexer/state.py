"""Per-call mutable state of the lexer."""

from __future__ import annotations

from dataclasses import dataclass, field

from markuplex.lexer.modes import ContentMode


@dataclass(slots=True)
class LexerState:
    """Open-element stack and active content mode for one tokenize() call.

    ``tag_stack`` holds tag names as written, innermost last;
    ``tag_offsets`` holds the source offset of each opening tag, in step.
    A single ``mode`` value means at most one content mode is ever active.

    """

    tag_stack: list[str] = field(default_factory=list)
    tag_offsets: list[int] = field(default_factory=list)
    mode: ContentMode = ContentMode.NORMAL

    def push_tag(self, name: str, offset: int) -> None:
        self.tag_stack.append(name)
        self.tag_offsets.append(offset)

    def pop_tag(self) -> tuple[str, int] | None:
        """Pop the innermost open element, or return None if none is open."""
        if not self.tag_stack:
            return None
        return self.tag_stack.pop(), self.tag_offsets.pop()

    @property
    def current_tag(self) -> str | None:
        return self.tag_stack[-1] if self.tag_stack else None

    @property
    def in_normal_mode(self) -> bool:
        return self.mode is ContentMode.NORMAL

    @property
    def in_script(self) -> bool:
        return self.mode is ContentMode.SCRIPT

    @property
    def in_style(self) -> bool:
        return self.mode is ContentMode.STYLE

    @property
    def in_cdata(self) -> bool:
        return self.mode is ContentMode.CDATA

    @property
    def in_processing_instruction(self) -> bool:
        return self.mode is ContentMode.PROCESSING_INSTRUCTION
