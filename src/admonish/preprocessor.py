"""Document pass: find admonish blocks, render them, splice the results.

Thread Safety:
``preprocess`` keeps all mutable state (the id allocator) local to the call.
Independent documents can be processed concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from admonish.config import PreprocessConfig, get_preprocess_config
from admonish.directives import parse_directive
from admonish.errors import DirectiveSyntaxError
from admonish.ids import IdAllocator
from admonish.location import SourceSpan
from admonish.recovery import recover
from admonish.renderers import get_renderer
from admonish.scanner import scan_admonitions
from admonish.utils.logger import get_logger

logger = get_logger(__name__)


def splice(content: str, replacements: Iterable[tuple[SourceSpan, str]]) -> str:
    """Replace non-overlapping spans of ``content`` in one forward pass.

    Text outside the spans is copied unchanged.

    Args:
        content: Original text; every span indexes into it
        replacements: ``(span, replacement)`` pairs in any order

    Returns:
        New text

    Raises:
        ValueError: If two spans overlap

    Example:
        >>> splice("abcdef", [(SourceSpan(4, 5), "E"), (SourceSpan(1, 3), "BC!")])
        'aBC!dEf'
    """
    parts: list[str] = []
    cursor = 0
    for span, text in sorted(replacements, key=lambda item: item[0].start):
        if span.start < cursor:
            msg = f"Overlapping replacement at offset {span.start}"
            raise ValueError(msg)
        parts.append(content[cursor : span.start])
        parts.append(text)
        cursor = span.end
    parts.append(content[cursor:])
    return "".join(parts)


def preprocess(content: str, config: PreprocessConfig | None = None) -> str:
    """Render every admonish block in a markdown document.

    Args:
        content: Full document text
        config: Preprocessor settings (the context's config if None)

    Returns:
        Document text with each admonish block replaced. A document without
        admonish blocks is returned unchanged.

    Raises:
        AdmonitionBailError: If a header is malformed and the failure policy
            is ``bail``. Nothing is returned for the document in that case.

    Example:
        >>> print(preprocess("```admonish tip\\nUse it.\\n```"))
        <BLANKLINE>
        <div id="admonition-tip" class="admonition tip">
        <div class="admonition-title">
        <BLANKLINE>
        Tip
        <BLANKLINE>
        <a class="admonition-anchor-link" href="#admonition-tip"></a>
        </div>
        <div>
        <BLANKLINE>
        Use it.
        <BLANKLINE>
        </div>
        </div>
    """
    if config is None:
        config = get_preprocess_config()

    blocks = scan_admonitions(content)
    if not blocks:
        return content

    renderer = get_renderer(config.render_mode)
    ids = IdAllocator()
    replacements: list[tuple[SourceSpan, str]] = []

    for block in blocks:
        try:
            spec = parse_directive(block.header, config.defaults, block.body(content))
        except DirectiveSyntaxError as error:
            spec = recover(error, block, content, config.on_failure)

        anchor_id = ids.allocate_for(spec)
        logger.debug(
            "Admonition on line %s: kind=%s id=%s",
            block.span.lineno,
            spec.kind.value,
            anchor_id,
        )
        replacements.append((block.span, renderer.render(spec, anchor_id)))

    logger.debug("Rendered %d admonition(s) in %s mode", len(replacements), config.render_mode.value)
    return splice(content, replacements)


class Preprocessor:
    """A configured preprocessor for a whole build.

    Example:
        >>> pre = Preprocessor.from_dict({"default": {"collapsible": True}}, renderer="html")
        >>> "<details" in pre("```admonish\\nHidden\\n```")
        True
    """

    __slots__ = ("_config",)

    def __init__(self, config: PreprocessConfig | None = None) -> None:
        self._config = config or PreprocessConfig()

    @classmethod
    def from_dict(
        cls,
        table: Mapping[str, Any],
        renderer: str | None = None,
    ) -> Preprocessor:
        """Build from the host's preprocessor table. See PreprocessConfig.from_dict."""
        return cls(PreprocessConfig.from_dict(table, renderer=renderer))

    @property
    def config(self) -> PreprocessConfig:
        return self._config

    def __call__(self, content: str) -> str:
        """Process one document."""
        return preprocess(content, self._config)

    def process_many(
        self,
        documents: Sequence[str],
        max_workers: int | None = None,
    ) -> list[str]:
        """Process independent documents in parallel.

        Each document gets its own id allocator, so ids restart per document.
        Results are in input order. Under the bail policy the first failure
        (in input order) propagates.

        Args:
            documents: Document texts (e.g., one per chapter)
            max_workers: Thread pool size (executor default if None)

        Returns:
            Processed texts
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self, documents))
