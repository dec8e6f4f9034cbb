"""Text helpers used for anchor ids and attribute values.

Example:
    >>> from admonish.utils.text import slugify
    >>> slugify("Developers don't want you to know this!")
    'developers-dont-want-you-to-know-this'
"""

from __future__ import annotations

import html as html_module
import re

_TAG_RE = re.compile(r"<[^>]*>")
_NON_WORD_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RE = re.compile(r"[-\s_]+")


def strip_tags(fragment: str) -> str:
    """Remove HTML tags from a rendered fragment, keeping their text.

    Examples:
        >>> strip_tags("Read <strong>this</strong>!")
        'Read this!'
    """
    return _TAG_RE.sub("", fragment)


def slugify(text: str, separator: str = "-") -> str:
    """Convert text to an id-safe slug.

    Punctuation is dropped rather than turned into a separator, so
    apostrophes and symbols disappear without splitting words. Runs of
    whitespace, hyphens and underscores collapse into a single separator.
    Unicode letters and digits are kept.

    Args:
        text: Plain text (tags already stripped, entities may remain)
        separator: Character placed between words

    Returns:
        Lowercase slug, possibly empty

    Examples:
        >>> slugify("Trademark™")
        'trademark'
        >>> slugify('And "in" the title')
        'and-in-the-title'
        >>> slugify("Café au lait")
        'café-au-lait'
    """
    if not text:
        return ""

    text = html_module.unescape(text).lower()
    text = _NON_WORD_RE.sub("", text)
    text = _SEPARATOR_RE.sub(separator, text)
    return text.strip(separator)


def escape_html(text: str) -> str:
    """Escape text for use inside a double-quoted HTML attribute.

    Examples:
        >>> escape_html('my "quoted" class')
        'my &quot;quoted&quot; class'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def longest_run(text: str, char: str) -> int:
    """Length of the longest consecutive run of ``char`` in ``text``.

    Examples:
        >>> longest_run("a ```` b ``", "`")
        4
    """
    longest = current = 0
    for c in text:
        if c == char:
            current += 1
            if current > longest:
                longest = current
        else:
            current = 0
    return longest
