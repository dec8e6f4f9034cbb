"""Strip renderer: keep the body, drop the admonition.

Used for targets that can't carry the container markup, such as a renderer
that compiles the book's code samples.
"""

from __future__ import annotations

from admonish.nodes import AdmonitionSpec


class StripRenderer:
    """Render only the raw body, framed by blank lines."""

    __slots__ = ()

    def render(self, spec: AdmonitionSpec, anchor_id: str) -> str:
        """Return the body alone. Kind, title, classes and id are ignored."""
        return f"\n{spec.body}\n"
