"""Failure policy for malformed admonition headers.

A header that fails to parse is permanent: re-parsing gives the same error.
The host picks one of two outcomes per build:

- ``OnFailure.CONTINUE``: render a ``bug`` admonition in place of the block,
  showing the parse error and the untouched source, and carry on.
- ``OnFailure.BAIL``: abort the document with :class:`AdmonitionBailError`.
"""

from __future__ import annotations

from admonish.config import OnFailure
from admonish.errors import AdmonitionBailError, DirectiveSyntaxError
from admonish.kinds import AdmonitionKind
from admonish.nodes import AdmonitionSpec, FencedBlock
from admonish.utils.logger import get_logger
from admonish.utils.text import longest_run

logger = get_logger(__name__)

ERROR_TITLE = "Error rendering admonishment"


def _fence_for(text: str) -> str:
    """A backtick fence longer than any backtick run inside ``text``."""
    return "`" * max(3, longest_run(text, "`") + 1)


def error_spec(error: DirectiveSyntaxError, source: str) -> AdmonitionSpec:
    """Build the ``bug`` admonition reporting a parse failure.

    Args:
        error: The parse failure
        source: Exact source text of the failing block

    Returns:
        Spec whose body shows the error report and a fenced copy of the
        original block
    """
    report = error.describe()
    log_fence = _fence_for(report)
    source_fence = _fence_for(source)
    body = (
        "Failed with:\n\n"
        f"{log_fence}log\n{report}\n{log_fence}\n\n"
        "Original markdown input:\n\n"
        f"{source_fence}markdown\n{source}\n{source_fence}\n"
    )
    return AdmonitionSpec(kind=AdmonitionKind.BUG, title=ERROR_TITLE, body=body)


def recover(
    error: DirectiveSyntaxError,
    block: FencedBlock,
    document: str,
    on_failure: OnFailure,
) -> AdmonitionSpec:
    """Apply the failure policy to a block whose header didn't parse.

    Args:
        error: The parse failure
        block: The failing block
        document: Full document text the block's span points into
        on_failure: Failure policy

    Returns:
        Replacement spec (continue mode)

    Raises:
        AdmonitionBailError: In bail mode, chained to ``error``
    """
    source = block.source(document)
    if on_failure is OnFailure.BAIL:
        raise AdmonitionBailError(source) from error

    logger.warning(
        "Invalid admonition header on line %s, rendering error block: %s",
        block.span.lineno,
        error,
    )
    return error_spec(error, source)
