"""Attribute header grammar.

    KIND? (WS KEY WS* '=' WS* VALUE)*

After the optional leading kind word, the header is a TOML table written on
one line. Each ``key=`` that follows whitespace starts a new line, and the
result is read with :mod:`tomllib`, so any TOML value syntax is accepted
(basic, literal and multi-line strings, escapes, comments). Recognized keys:

- ``class``: space-separated extra CSS classes
- ``title``: raw title markdown (``""`` suppresses the title)
- ``collapsible``: boolean

Unknown keys are ignored with a warning. TOML errors and wrongly typed
values raise :class:`DirectiveSyntaxError` pointing at the offending column
of the header.

Example:
    >>> parse_attributes('tip class="my other-style" title="Article Heading"')
    HeaderOptions(kind='tip', title='Article Heading', classes=('my', 'other-style'), collapsible=None)
"""

from __future__ import annotations

import re
import tomllib
from typing import Any

from admonish.directives.options import HeaderOptions
from admonish.errors import DirectiveSyntaxError
from admonish.utils.logger import get_logger

logger = get_logger(__name__)

# Leading bare word that is not itself a key
_KIND_RE = re.compile(r"\s*([A-Za-z0-9_-]+)(?!\s*=)(?=\s|$)")

# Strings and comments are matched first so keys inside them are skipped
_TOKEN_RE = re.compile(
    r"(?P<string>\"\"\"[\s\S]*?\"\"\"|'''[\s\S]*?'''|\"(?:\\.|[^\"\\])*\"|'[^']*')"
    r"|(?P<comment>#.*)"
    r"|(?:^|(?<=\s))(?P<key>[A-Za-z0-9_-]+)\s*="
)

_LOCATION_RE = re.compile(
    r"^(?P<message>.*) \(at (?:line (?P<line>\d+), column (?P<column>\d+)|end of document)\)$",
    re.DOTALL,
)

# key -> expected value type
_KNOWN_KEYS: dict[str, type] = {
    "class": str,
    "title": str,
    "collapsible": bool,
}


def _split_kind(header: str) -> tuple[str | None, int]:
    """Return the leading kind word (if any) and the offset where pairs start."""
    match = _KIND_RE.match(header)
    if match is None:
        return None, 0
    return match.group(1), match.end()


def _to_toml(pairs: str) -> tuple[str, list[int], dict[str, int]]:
    """Put each ``key=`` on its own line.

    Returns:
        The TOML document, the offsets in ``pairs`` where a newline was
        inserted, and the offset of the first occurrence of every key
    """
    breaks: list[int] = []
    key_offsets: dict[str, int] = {}
    for match in _TOKEN_RE.finditer(pairs):
        key = match.group("key")
        if key is None:
            continue
        start = match.start("key")
        key_offsets.setdefault(key, start)
        if start > 0:
            breaks.append(start)

    parts: list[str] = []
    cursor = 0
    for offset in breaks:
        parts.append(pairs[cursor:offset])
        parts.append("\n")
        cursor = offset
    parts.append(pairs[cursor:])
    return "".join(parts), breaks, key_offsets


def _error_offset(document: str, line: str | None, column: str | None) -> int:
    """Offset into the TOML document named by tomllib's line and column."""
    if line is None or column is None:
        return len(document)
    line_start = 0
    for _ in range(int(line) - 1):
        line_start = document.index("\n", line_start) + 1
    return line_start + int(column) - 1


def _syntax_error(
    error: tomllib.TOMLDecodeError,
    header: str,
    document: str,
    breaks: list[int],
    base: int,
) -> DirectiveSyntaxError:
    """Translate a TOML error back onto the one-line header."""
    match = _LOCATION_RE.match(str(error))
    if match is None:
        return DirectiveSyntaxError(str(error), header, col_offset=base + 1)

    offset = _error_offset(document, match.group("line"), match.group("column"))
    # Drop the newlines inserted before the failing position
    inserted = sum(1 for index, start in enumerate(breaks) if start + index < offset)
    column = base + offset - inserted + 1
    return DirectiveSyntaxError(match.group("message"), header, col_offset=column)


def _build(
    header: str,
    kind: str | None,
    values: dict[str, Any],
    key_columns: dict[str, int],
) -> HeaderOptions:
    for key, value in values.items():
        expected = _KNOWN_KEYS.get(key)
        if expected is None:
            logger.warning("Ignoring unknown admonition attribute %r", key)
            continue
        if not isinstance(value, expected):
            type_name = "a string" if expected is str else "a boolean"
            raise DirectiveSyntaxError(
                f"`{key}` must be {type_name}",
                header,
                col_offset=key_columns.get(key, 1),
            )

    classes = values.get("class")
    return HeaderOptions(
        kind=kind,
        title=values.get("title"),
        classes=tuple(classes.split()) if classes else (),
        collapsible=values.get("collapsible"),
    )


def parse_attributes(header: str) -> HeaderOptions:
    """Parse an attribute-style header.

    Args:
        header: Header text after the keyword

    Returns:
        HeaderOptions with the fields that were written

    Raises:
        DirectiveSyntaxError: On malformed TOML or a wrongly typed value
    """
    kind, base = _split_kind(header)
    document, breaks, key_offsets = _to_toml(header[base:])
    try:
        values = tomllib.loads(document)
    except tomllib.TOMLDecodeError as error:
        raise _syntax_error(error, header, document, breaks, base) from error

    key_columns = {key: base + offset + 1 for key, offset in key_offsets.items()}
    return _build(header, kind, values, key_columns)
