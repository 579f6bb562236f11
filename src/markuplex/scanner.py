"""Character-level cursor over the source buffer.

The Scanner owns an immutable source string, one integer cursor in
``[0, len(source)]``, and a LIFO stack of saved cursor positions. All
speculative lookahead in the lexer is written as mark, attempt, then
reset (on failure) or release (on success); the buffer itself is never
copied.

Reading past the end raises EndOfInputError. Handlers are expected to
check ``has_next()`` first; the lexer's recovery boundary catches the
error when they do not.
"""

from __future__ import annotations

from markuplex.errors import ScannerError


class Scanner:
    """Cursor with lookahead and a backtracking checkpoint stack.

    Example:
            >>> s = Scanner("<a>")
            >>> s.next(), s.peek(), s.peek_next()
            ('<', 'a', '>')

    """

    __slots__ = ("_source", "_length", "_cursor", "_markers")

    def __init__(self, source: str) -> None:
        if source is None or not isinstance(source, str):
            raise ScannerError.invalid_source()
        self._source = source
        self._length = len(source)
        self._cursor = 0
        self._markers: list[int] = []

    def has_next(self) -> bool:
        return self._cursor < self._length

    def next(self) -> str:
        """Return the current character and advance.

        Raises:
            EndOfInputError: At end of input.
        """
        if self._cursor >= self._length:
            raise ScannerError.end_of_input()
        char = self._source[self._cursor]
        self._cursor += 1
        return char

    def peek(self) -> str:
        """Return the current character without advancing.

        Raises:
            EndOfInputError: At end of input.
        """
        if self._cursor >= self._length:
            raise ScannerError.end_of_input()
        return self._source[self._cursor]

    def peek_next(self, offset: int = 1) -> str:
        """Return the character ``offset`` places after the cursor.

        Raises:
            EndOfInputError: If that index is out of bounds.
        """
        position = self._cursor + offset
        if position < 0 or position >= self._length:
            raise ScannerError.end_of_input()
        return self._source[position]

    def rewind(self, n: int = 1) -> str:
        """Move the cursor back by ``n`` characters.

        Returns:
            The character now under the cursor ("" at end of input).

        Raises:
            ScannerError: If ``n`` is not a non-negative integer or the
                cursor would move before the start of the source.
        """
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ScannerError.invalid_rewind(n)
        new_position = self._cursor - n
        if new_position < 0:
            raise ScannerError.invalid_rewind(new_position)
        self._cursor = new_position
        return self._source[new_position] if new_position < self._length else ""

    def match(self, expected: str) -> bool:
        """Consume ``expected`` if it is the current character."""
        if self._cursor < self._length and self._source[self._cursor] == expected:
            self._cursor += 1
            return True
        return False

    def starts_with(self, text: str, ignore_case: bool = False) -> bool:
        """Check whether the unread source begins with ``text``."""
        segment = self._source[self._cursor : self._cursor + len(text)]
        if ignore_case:
            return segment.lower() == text.lower()
        return segment == text

    # =========================================================================
    # Backtracking
    # =========================================================================

    def mark(self) -> None:
        """Push the current cursor as a checkpoint."""
        self._markers.append(self._cursor)

    def reset(self) -> None:
        """Restore the most recent checkpoint. No-op without one."""
        if self._markers:
            self._cursor = self._markers.pop()

    def release(self) -> None:
        """Drop the most recent checkpoint, keeping the cursor where it is."""
        if self._markers:
            self._markers.pop()

    @property
    def marker_depth(self) -> int:
        return len(self._markers)

    # =========================================================================
    # Introspection
    # =========================================================================

    def get_cursor(self) -> int:
        return self._cursor

    def get_length(self) -> int:
        return self._length

    def get_source_segment(self, start: int, end: int) -> str:
        return self._source[start:end]

    def get_remaining_source(self) -> str:
        return self._source[self._cursor :]
