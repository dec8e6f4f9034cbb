"""Data types flowing from the scanner through the parser to the renderers.

Both types are frozen: an AdmonitionSpec is built per block, rendered once
and dropped.

Thread Safety:
Frozen dataclasses. Safe to share across threads.
"""

from __future__ import annotations

from dataclasses import dataclass

from admonish.kinds import AdmonitionKind
from admonish.location import SourceSpan


@dataclass(frozen=True, slots=True)
class FencedBlock:
    """A fenced code block whose info string starts with the trigger keyword.

    Attributes:
        span: Source range of the whole fence, delimiters included
        header: Info string text after the keyword (unescaped, stripped)
        fence_char: "`" or "~"
        fence_length: Length of the opening fence run

    """

    span: SourceSpan
    header: str
    fence_char: str = "`"
    fence_length: int = 3

    def source(self, document: str) -> str:
        """Exact source text of the block."""
        return self.span.slice(document)

    def body(self, document: str) -> str:
        """Content between the opening fence line and the closing fence.

        Lines are kept verbatim. The closing fence run (if the block was
        closed) and trailing whitespace are removed.
        """
        text = self.span.slice(document)
        newline = text.find("\n")
        if newline == -1:
            return ""
        text = text[newline + 1 :]

        last_line_start = text.rfind("\n") + 1
        last_line = text[last_line_start:].rstrip()
        marker = last_line.rstrip(self.fence_char)
        # Closing fence, possibly behind indentation or blockquote markers
        if (
            len(last_line) - len(marker) >= self.fence_length
            and not marker.strip(" \t>")
        ):
            text = text[:last_line_start]
        return text.rstrip()


@dataclass(frozen=True, slots=True)
class AdmonitionSpec:
    """A fully resolved admonition, ready to render.

    Defaults have already been applied. ``title`` is raw markdown; the empty
    string means the block has no title wrapper at all.

    Attributes:
        kind: Canonical kind (drives the CSS class)
        title: Raw title markdown, "" when suppressed
        extra_classes: Additional CSS classes, in header order
        collapsible: Render as ``<details>``/``<summary>``
        body: Raw fenced content, left as markdown

    """

    kind: AdmonitionKind
    title: str
    extra_classes: tuple[str, ...] = ()
    collapsible: bool = False
    body: str = ""

    @property
    def has_title(self) -> bool:
        """True unless the title was explicitly set to empty."""
        return self.title != ""

    @property
    def css_classes(self) -> str:
        """Value of the outer container's class attribute."""
        return " ".join(("admonition", self.kind.css_class, *self.extra_classes))
