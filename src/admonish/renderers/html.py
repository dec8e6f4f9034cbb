"""HTML renderer for admonitions.

Output is a container element holding an optional title wrapper and a body
wrapper. The title and body are left as markdown: the host's markdown pass
renders them afterwards, which is why every piece of raw markdown is
surrounded by blank lines.

Rendered shape (collapsible blocks use ``details``/``summary``)::

    <div id="admonition-note" class="admonition note">
    <div class="admonition-title">

    Note

    <a class="admonition-anchor-link" href="#admonition-note"></a>
    </div>
    <div>

    Body markdown

    </div>
    </div>

Thread Safety:
Stateless. Safe for concurrent use.
"""

from __future__ import annotations

from admonish.nodes import AdmonitionSpec
from admonish.utils.text import escape_html


class HtmlRenderer:
    """Render admonitions as nested container markup."""

    __slots__ = ()

    def render(self, spec: AdmonitionSpec, anchor_id: str) -> str:
        """Render a spec to HTML around its raw markdown body.

        The result starts with a newline so the container never continues
        the preceding paragraph.

        Args:
            spec: Resolved admonition
            anchor_id: Allocated id (e.g., "admonition-note")

        Returns:
            Replacement text for the block
        """
        if spec.collapsible:
            outer, title_tag = "details", "summary"
        else:
            outer, title_tag = "div", "div"

        anchor = escape_html(anchor_id)
        parts = [f'\n<{outer} id="{anchor}" class="{escape_html(spec.css_classes)}">\n']
        if spec.has_title:
            parts.append(
                f'<{title_tag} class="admonition-title">\n'
                f"\n{spec.title}\n\n"
                f'<a class="admonition-anchor-link" href="#{anchor}"></a>\n'
                f"</{title_tag}>\n"
            )
        parts.append(f"<div>\n\n{spec.body}\n\n</div>\n</{outer}>")
        return "".join(parts)
