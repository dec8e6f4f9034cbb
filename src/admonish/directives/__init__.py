"""Directive header parsing.

An admonition is a fenced code block whose info string starts with the
``admonish`` keyword. Whatever follows the keyword is the header, written in
one of two grammars:

    ```admonish warning.my-class "A legacy title"
    ```admonish warning class="my-class" title="An attribute title"

The two grammars overlap, so the choice is made up front: a header that
contains an ``=`` outside double quotes (and not escaped) is an attribute
header, anything else is a legacy header. Only the chosen grammar is tried.

Thread Safety:
All functions are pure.
"""

from __future__ import annotations

from admonish.config import AdmonitionDefaults
from admonish.directives.attributes import parse_attributes
from admonish.directives.legacy import parse_legacy
from admonish.directives.options import HeaderOptions
from admonish.nodes import AdmonitionSpec

ADMONISH_KEYWORD = "admonish"


def split_info_string(info: str) -> str | None:
    """Return the header of an admonish info string, or None.

    The keyword must be the whole first word: ``admonishment`` is not an
    admonition.

    Args:
        info: Unescaped fence info string

    Returns:
        Header text with surrounding whitespace removed ("" when the info
        string is the bare keyword), or None for any other fence

    Examples:
        >>> split_info_string("admonish tip")
        'tip'
        >>> split_info_string("admonish")
        ''
        >>> split_info_string("rust") is None
        True
    """
    info = info.strip()
    if not info.startswith(ADMONISH_KEYWORD):
        return None
    rest = info[len(ADMONISH_KEYWORD) :]
    if rest and not rest[0].isspace():
        return None
    return rest.strip()


def uses_attribute_grammar(header: str) -> bool:
    """Check for an unescaped ``=`` outside double quotes.

    Examples:
        >>> uses_attribute_grammar('title="x"')
        True
        >>> uses_attribute_grammar('note "a = b"')
        False
    """
    in_quotes = False
    escaped = False
    for char in header:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "=" and not in_quotes:
            return True
    return False


def parse_header(header: str) -> HeaderOptions:
    """Parse a header with whichever grammar it is written in.

    Raises:
        DirectiveSyntaxError: If the header is malformed
    """
    header = header.strip()
    if not header:
        return HeaderOptions()
    if uses_attribute_grammar(header):
        return parse_attributes(header)
    return parse_legacy(header)


def parse_directive(
    header: str,
    defaults: AdmonitionDefaults | None = None,
    body: str = "",
) -> AdmonitionSpec:
    """Parse a header and resolve it against the defaults.

    Args:
        header: Text after the ``admonish`` keyword
        defaults: Host-supplied defaults (empty defaults if None)
        body: Raw fenced content copied onto the AdmonitionSpec

    Returns:
        Resolved AdmonitionSpec

    Raises:
        DirectiveSyntaxError: If the header is malformed

    Example:
        >>> spec = parse_directive("collapsible=true")
        >>> spec.kind.css_class, spec.title, spec.collapsible
        ('note', 'Note', True)
    """
    return parse_header(header).resolve(defaults or AdmonitionDefaults(), body)


__all__ = [
    "ADMONISH_KEYWORD",
    "HeaderOptions",
    "parse_attributes",
    "parse_directive",
    "parse_header",
    "parse_legacy",
    "split_info_string",
    "uses_attribute_grammar",
]
