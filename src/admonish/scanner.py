"""Find admonish blocks in a markdown document.

Walks markdown-it's block tokens and keeps every fence whose info string
starts with the ``admonish`` keyword, at any nesting depth (list items,
blockquotes, footnotes). Other fences and raw HTML are left alone.

Thread Safety:
Pure function over its arguments.
"""

from __future__ import annotations

from collections.abc import Iterable

from markdown_it.token import Token

from admonish.directives import split_info_string
from admonish.markdown import LineIndex, tokenize, unescape_info
from admonish.nodes import FencedBlock


def scan_admonitions(
    content: str,
    tokens: Iterable[Token] | None = None,
) -> list[FencedBlock]:
    """Locate admonish blocks.

    Args:
        content: Full document text
        tokens: Pre-computed token stream for ``content`` (tokenized here if None)

    Returns:
        Candidate blocks sorted by source position

    Example:
        >>> [b.header for b in scan_admonitions("```admonish tip\\nhi\\n```\\n")]
        ['tip']
    """
    if tokens is None:
        tokens = tokenize(content)

    index = LineIndex(content)
    blocks: list[FencedBlock] = []
    for token in tokens:
        if token.type != "fence" or token.map is None:
            continue

        header = split_info_string(unescape_info(token.info))
        if header is None:
            continue

        blocks.append(
            FencedBlock(
                span=index.fence_span(token.map, token.markup),
                header=header,
                fence_char=token.markup[0],
                fence_length=len(token.markup),
            )
        )

    # Footnote bodies are emitted at the end of the stream
    blocks.sort(key=lambda block: block.span.start)
    return blocks
