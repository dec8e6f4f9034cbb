"""Admonition renderers.

- HtmlRenderer: container markup (``RenderTextMode.HTML``)
- StripRenderer: body only (``RenderTextMode.STRIP``)
"""

from admonish.config import RenderTextMode
from admonish.renderers.html import HtmlRenderer
from admonish.renderers.protocol import AdmonitionRenderer
from admonish.renderers.strip import StripRenderer

_RENDERERS: dict[RenderTextMode, AdmonitionRenderer] = {
    RenderTextMode.HTML: HtmlRenderer(),
    RenderTextMode.STRIP: StripRenderer(),
}


def get_renderer(mode: RenderTextMode) -> AdmonitionRenderer:
    """Return the shared renderer for a render mode."""
    return _RENDERERS[mode]


__all__ = [
    "AdmonitionRenderer",
    "HtmlRenderer",
    "StripRenderer",
    "get_renderer",
]
