"""Admonition kind registry.

The set of kinds is closed: every token a user can write after the
``admonish`` keyword resolves to one of the canonical kinds below, and
anything unrecognized falls back to ``note``. Several tokens alias a
canonical kind: they share its CSS class but keep their own default title
(``caution`` renders with class ``warning`` and title ``Caution``).

Thread Safety:
Module-level tables are read-only mappings. Safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class AdmonitionKind(Enum):
    """Canonical admonition kinds. The value is the CSS class."""

    NOTE = "note"
    ABSTRACT = "abstract"
    INFO = "info"
    TIP = "tip"
    SUCCESS = "success"
    QUESTION = "question"
    WARNING = "warning"
    FAILURE = "failure"
    DANGER = "danger"
    BUG = "bug"
    EXAMPLE = "example"
    QUOTE = "quote"

    @property
    def css_class(self) -> str:
        """CSS class emitted on the outer container."""
        return self.value


@dataclass(frozen=True, slots=True)
class KindEntry:
    """A resolved kind token: canonical kind plus its default title."""

    kind: AdmonitionKind
    title: str


_TOKENS: dict[AdmonitionKind, tuple[str, ...]] = {
    AdmonitionKind.NOTE: ("note",),
    AdmonitionKind.ABSTRACT: ("abstract", "summary", "tldr"),
    AdmonitionKind.INFO: ("info", "todo"),
    AdmonitionKind.TIP: ("tip", "hint", "important"),
    AdmonitionKind.SUCCESS: ("success", "check", "done"),
    AdmonitionKind.QUESTION: ("question", "help", "faq"),
    AdmonitionKind.WARNING: ("warning", "caution", "attention"),
    AdmonitionKind.FAILURE: ("failure", "fail", "missing"),
    AdmonitionKind.DANGER: ("danger", "error"),
    AdmonitionKind.BUG: ("bug",),
    AdmonitionKind.EXAMPLE: ("example",),
    AdmonitionKind.QUOTE: ("quote", "cite"),
}

# token -> entry, e.g. "caution" -> KindEntry(WARNING, "Caution")
KIND_REGISTRY: MappingProxyType[str, KindEntry] = MappingProxyType(
    {
        token: KindEntry(kind, token[:1].upper() + token[1:])
        for kind, tokens in _TOKENS.items()
        for token in tokens
    }
)

DEFAULT_KIND = KIND_REGISTRY["note"]


def resolve_kind(token: str) -> KindEntry:
    """Resolve a kind token, falling back to ``note`` when unknown.

    Matching is case-sensitive.

    Args:
        token: Kind token as written in the header (e.g., "caution")

    Returns:
        KindEntry with the canonical kind and default title

    Examples:
        >>> resolve_kind("caution")
        KindEntry(kind=<AdmonitionKind.WARNING: 'warning'>, title='Caution')
        >>> resolve_kind("unheard-of").kind
        <AdmonitionKind.NOTE: 'note'>
    """
    entry = KIND_REGISTRY.get(token)
    if entry is None:
        return DEFAULT_KIND
    return entry


def is_known_kind(token: str) -> bool:
    """Check whether ``token`` is a registered kind or alias."""
    return token in KIND_REGISTRY


__all__ = [
    "DEFAULT_KIND",
    "KIND_REGISTRY",
    "AdmonitionKind",
    "KindEntry",
    "is_known_kind",
    "resolve_kind",
]
