"""Exception classes for admonish.

All errors raised by the package derive from :class:`AdmonishError`.
A malformed directive header is a :class:`DirectiveSyntaxError`; whether it
is rendered inline or aborts the pass is decided by the recovery policy,
which raises :class:`AdmonitionBailError` in bail mode.
"""

from __future__ import annotations


class AdmonishError(Exception):
    """Base exception for all admonish errors."""

    pass


class DirectiveSyntaxError(AdmonishError):
    """Malformed admonition header.

    Raised by the directive parser for an invalid attribute table or an
    invalid legacy title. Carries the header text and a 1-indexed position
    so the error can be reported with a caret under the offending column.
    """

    def __init__(
        self,
        message: str,
        source: str,
        lineno: int = 1,
        col_offset: int = 1,
    ) -> None:
        """Initialize syntax error with its location in the header.

        Args:
            message: Short description of what was expected
            source: Header text that failed to parse
            lineno: Line number inside the header (1-indexed)
            col_offset: Column inside the header (1-indexed)
        """
        self.message = message
        self.source = source
        self.lineno = lineno
        self.col_offset = col_offset
        super().__init__(f"{lineno}:{col_offset} {message}")

    def describe(self) -> str:
        """Multi-line report with a caret under the failing column.

        Example:
            >>> print(DirectiveSyntaxError("unterminated string", 'title="', 1, 8).describe())
            directive parse error at line 1, column 8
              |
            1 | title="
              |        ^
            unterminated string
        """
        lines = self.source.split("\n")
        line = lines[self.lineno - 1] if 0 < self.lineno <= len(lines) else ""
        gutter = " " * len(str(self.lineno))
        return "\n".join(
            [
                f"directive parse error at line {self.lineno}, column {self.col_offset}",
                f"{gutter} |",
                f"{self.lineno} | {line}",
                f"{gutter} | {' ' * (self.col_offset - 1)}^",
                self.message,
            ]
        )


class AdmonitionBailError(AdmonishError):
    """Terminating failure raised when the failure policy is ``bail``.

    The message embeds the untouched source of the offending block so the
    author can find it without line numbers.
    """

    def __init__(self, source: str) -> None:
        """Initialize with the original block text.

        Args:
            source: Exact source text of the fenced block, delimiters included
        """
        self.source = source
        super().__init__(f"Error processing admonition, bailing:\n{source}")


class ConfigError(AdmonishError):
    """Invalid value in the host-supplied preprocessor configuration."""

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: Dotted path of the offending key (e.g., "default.collapsible")
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Config '{key}': {message}")
