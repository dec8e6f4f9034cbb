"""AdmonitionRenderer protocol.

A renderer turns a resolved spec and its allocated anchor id into the text
spliced in place of the original fenced block.

Example:
    from admonish.renderers.protocol import AdmonitionRenderer

    def replace(renderer: AdmonitionRenderer, spec: AdmonitionSpec, ids: IdAllocator) -> str:
        return renderer.render(spec, ids.allocate_for(spec))

"""

from typing import Protocol

from admonish.nodes import AdmonitionSpec


class AdmonitionRenderer(Protocol):
    """Protocol for admonition renderers.

    Implementations must be stateless so a single instance can serve every
    document of a build.

    """

    def render(self, spec: AdmonitionSpec, anchor_id: str) -> str:
        """Render one admonition.

        Args:
            spec: Resolved admonition
            anchor_id: Unique id allocated for this block

        Returns:
            Replacement text for the block's source span.

        """
        ...
