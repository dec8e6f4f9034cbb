"""Legacy positional header grammar.

    KIND? ('.' CLASS)* (WS+ '"' TITLE '"')? WS*

Examples of accepted headers::

    warning
    tip.my-style.other-style
    note "Read **this**!"
    .... ""

The title runs from the first double quote to the last one, and ``\\"``
inside it stands for a literal quote. Other backslashes are kept as written.
"""

from __future__ import annotations

from admonish.directives.options import HeaderOptions
from admonish.errors import DirectiveSyntaxError


def parse_legacy(header: str) -> HeaderOptions:
    """Parse a legacy header.

    Args:
        header: Header text after the keyword, without surrounding whitespace

    Returns:
        HeaderOptions (never sets ``collapsible``)

    Raises:
        DirectiveSyntaxError: On an unterminated title, text after the
            title, a title glued to the kind, or whitespace inside the kind

    Examples:
        >>> parse_legacy('tip.a..b "Hi"')
        HeaderOptions(kind='tip', title='Hi', classes=('a', 'b'), collapsible=None)
    """
    head = header
    title: str | None = None

    open_quote = header.find('"')
    if open_quote != -1:
        close_quote = header.rfind('"')
        if close_quote == open_quote:
            raise DirectiveSyntaxError(
                "unterminated title, expected a closing '\"'",
                header,
                col_offset=len(header) + 1,
            )
        head = header[:open_quote]
        if head and not head[-1].isspace():
            raise DirectiveSyntaxError(
                "expected whitespace before the title", header, col_offset=open_quote + 1
            )
        trailing = header[close_quote + 1 :]
        if trailing.strip():
            column = close_quote + 2 + len(trailing) - len(trailing.lstrip())
            raise DirectiveSyntaxError(
                "unexpected text after the title", header, col_offset=column
            )
        title = header[open_quote + 1 : close_quote].replace('\\"', '"')

    head = head.rstrip()
    for column, char in enumerate(head, start=1):
        if char.isspace():
            raise DirectiveSyntaxError(
                "unexpected whitespace in kind, expected `kind.class \"title\"`",
                header,
                col_offset=column,
            )

    kind, *classes = head.split(".")
    return HeaderOptions(
        kind=kind or None,
        title=title,
        classes=tuple(name for name in classes if name),
    )
