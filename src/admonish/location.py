"""Source spans for splicing and error messages.

Thread Safety:
SourceSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open range ``[start, end)`` of character offsets into a document.

    Attributes:
        start: Offset of the first fence character
        end: Offset just past the last character of the closing fence
        lineno: Line of the opening fence (1-indexed)
        end_lineno: Line of the closing fence (1-indexed)

    Examples:
        >>> span = SourceSpan(2, 9, lineno=2, end_lineno=3)
        >>> span.slice("x\\n```a\\n```\\n")
        '```a\\n```'
        >>> str(span)
        '2-3'

    """

    start: int
    end: int
    lineno: int = 0
    end_lineno: int = 0

    def __str__(self) -> str:
        """Format as a line range for log messages."""
        if self.end_lineno and self.end_lineno != self.lineno:
            return f"{self.lineno}-{self.end_lineno}"
        return str(self.lineno)

    def slice(self, source: str) -> str:
        """Return the text this span covers in ``source``."""
        return source[self.start : self.end]

    def overlaps(self, other: SourceSpan) -> bool:
        """Check whether two spans share at least one character."""
        return self.start < other.end and other.start < self.end
