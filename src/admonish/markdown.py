"""Markdown tokenizer and inline renderer.

admonish does not parse markdown itself. Block structure comes from
markdown-it-py configured like the host renderer (CommonMark plus tables,
strikethrough, footnotes and task lists), so a fence is recognized here
exactly when the host would render it as one.

markdown-it reports block positions as line ranges. :class:`LineIndex`
turns those into character offsets into the original, unnormalized text.

Thread Safety:
The MarkdownIt instance is built once and only read afterwards; every
``parse`` call works on its own state object.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import cache

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from admonish.location import SourceSpan

# Line terminators markdown-it normalizes to "\n"
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@cache
def get_markdown() -> MarkdownIt:
    """Return the shared, configured MarkdownIt instance."""
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    md.use(footnote_plugin).use(tasklists_plugin)
    return md


def tokenize(content: str) -> list[Token]:
    """Parse ``content`` into markdown-it's flat block token stream."""
    return get_markdown().parse(content)


def render_inline_markdown(text: str) -> str:
    """Render a single line of inline markdown to an HTML fragment.

    Example:
        >>> render_inline_markdown("Read **this**!")
        'Read <strong>this</strong>!'
    """
    return get_markdown().renderInline(text)


def unescape_info(info: str) -> str:
    """Apply CommonMark backslash-escape and entity decoding to an info string."""
    return unescapeAll(info).strip()


class LineIndex:
    """Maps line numbers to character offsets in the original text.

    Lines are split on ``\\r\\n``, ``\\r`` and ``\\n`` so numbering agrees with
    markdown-it's normalized source.

    Example:
        >>> index = LineIndex("a\\r\\nbc\\n")
        >>> index.start(1), index.end(1)
        (3, 5)
    """

    __slots__ = ("_source", "_starts", "_ends")

    def __init__(self, source: str) -> None:
        self._source = source
        self._starts: list[int] = [0]
        self._ends: list[int] = []
        for match in _NEWLINE_RE.finditer(source):
            self._ends.append(match.start())
            self._starts.append(match.end())
        self._ends.append(len(source))

    def __len__(self) -> int:
        return len(self._starts)

    def _clamp(self, line: int) -> int:
        return max(0, min(line, len(self._starts) - 1))

    def start(self, line: int) -> int:
        """Offset of the first character of a 0-indexed line."""
        return self._starts[self._clamp(line)]

    def end(self, line: int) -> int:
        """Offset just past the last character of a line, terminator excluded."""
        return self._ends[self._clamp(line)]

    def line(self, line: int) -> str:
        """Text of a 0-indexed line without its terminator."""
        return self._source[self.start(line) : self.end(line)]

    def fence_span(self, line_map: Sequence[int], markup: str) -> SourceSpan:
        """Source span of a fence token.

        Starts at the fence run on the opening line (after any indentation,
        list marker or blockquote marker) and ends at the end of the token's
        last line.

        Args:
            line_map: markdown-it ``token.map``: ``[first_line, end_line)``
            markup: The opening fence run (e.g., "````")
        """
        first, end_line = line_map
        last = max(first, end_line - 1)
        column = self.line(first).find(markup)
        return SourceSpan(
            start=self.start(first) + max(column, 0),
            end=self.end(last),
            lineno=first + 1,
            end_lineno=last + 1,
        )


__all__ = [
    "LineIndex",
    "get_markdown",
    "render_inline_markdown",
    "tokenize",
    "unescape_info",
]
