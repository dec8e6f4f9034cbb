"""Anchor ids for rendered admonitions.

Each admonition gets an ``id`` derived from its title so it can be linked
to. Titles repeat (two blocks both titled "Note"), so ids are handed out by
an :class:`IdAllocator` that lives for exactly one document pass and appends
``-1``, ``-2``, ... to repeats.

Thread Safety:
An IdAllocator is per-document mutable state. Create one per pass and do
not share it between threads.
"""

from __future__ import annotations

from admonish.markdown import render_inline_markdown
from admonish.nodes import AdmonitionSpec
from admonish.utils.text import slugify, strip_tags

ID_PREFIX = "admonition"
DEFAULT_SLUG = "default"


def title_slug(title: str) -> str:
    """Slug for a raw markdown title.

    The title is rendered as inline markdown first so that markup doesn't
    leak into the id: ``Read **this**!`` and ``Read this!`` share a slug.

    Examples:
        >>> title_slug("Read **this**!")
        'read-this'
        >>> title_slug("")
        'default'
        >>> title_slug("™")
        'default'
    """
    if not title:
        return DEFAULT_SLUG
    slug = slugify(strip_tags(render_inline_markdown(title)))
    return slug or DEFAULT_SLUG


def spec_slug(spec: AdmonitionSpec) -> str:
    """Slug for a resolved spec; suppressed titles use the constant slug."""
    if not spec.has_title:
        return DEFAULT_SLUG
    return title_slug(spec.title)


class IdAllocator:
    """Hands out unique anchor ids within one document pass.

    The first request for a slug yields ``admonition-<slug>``; later requests
    yield ``admonition-<slug>-1``, ``admonition-<slug>-2`` and so on. A
    suffixed candidate that was already issued (because some title slugified
    to ``my-note-1``) is skipped, so every id returned by one allocator is
    distinct.

    Example:
        >>> ids = IdAllocator()
        >>> ids.allocate("my-note"), ids.allocate("my-note"), ids.allocate("my-note")
        ('admonition-my-note', 'admonition-my-note-1', 'admonition-my-note-2')
    """

    __slots__ = ("_counters", "_issued")

    def __init__(self) -> None:
        # slug -> number of times the slug has been requested
        self._counters: dict[str, int] = {}
        self._issued: set[str] = set()

    def allocate(self, slug: str) -> str:
        """Return a fresh id for ``slug``."""
        base = f"{ID_PREFIX}-{slug}"
        repeat = self._counters.get(slug, 0)
        candidate = base if repeat == 0 else f"{base}-{repeat}"
        while candidate in self._issued:
            repeat += 1
            candidate = f"{base}-{repeat}"
        self._counters[slug] = repeat + 1
        self._issued.add(candidate)
        return candidate

    def allocate_for(self, spec: AdmonitionSpec) -> str:
        """Allocate the id for a spec's title."""
        return self.allocate(spec_slug(spec))

    def __len__(self) -> int:
        """Number of ids issued so far."""
        return len(self._issued)

    def __contains__(self, anchor_id: str) -> bool:
        return anchor_id in self._issued
