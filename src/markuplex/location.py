"""Source positions for tokens and diagnostics.

Provides the Position dataclass attached to every token and diagnostic,
and LineIndex, which maps absolute offsets to line/column coordinates.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.
A LineIndex is built once per source and only read afterwards.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a token or diagnostic in the source buffer.

    Attributes:
        start: Absolute start offset (0-indexed, inclusive)
        end: Absolute end offset (0-indexed, exclusive)
        line: Line of ``start`` (1-indexed)
        column: Column of ``start`` (1-indexed)

    Examples:
            >>> pos = Position(start=0, end=5, line=1, column=1)
            >>> str(pos)
            '1:1'

    """

    start: int
    end: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end - self.start


class LineIndex:
    """Offset to line/column lookup for one source string.

    Line starts are collected once up front; each lookup is a binary
    search, so coordinates stay correct regardless of which lexer mode
    consumed the characters.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, source: str) -> None:
        starts = [0]
        find = source.find
        idx = find("\n")
        while idx != -1:
            starts.append(idx + 1)
            idx = find("\n", idx + 1)
        self._line_starts = starts
        self._length = len(source)

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return 1-indexed (line, column) for an absolute offset."""
        offset = max(0, min(offset, self._length))
        line = bisect_right(self._line_starts, offset)
        return line, offset - self._line_starts[line - 1] + 1

    def position(self, start: int, end: int) -> Position:
        """Build a Position spanning ``start`` to ``end``."""
        line, column = self.line_col(start)
        return Position(start=start, end=end, line=line, column=column)
