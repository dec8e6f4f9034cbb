"""Parsed directive header, before defaults are applied.

Both header grammars produce a :class:`HeaderOptions`. Every field is
optional so that "not written" stays distinguishable from "written as the
default value"; :meth:`HeaderOptions.resolve` fills the gaps.

Thread Safety:
Frozen dataclass. Safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass

from admonish.config import AdmonitionDefaults
from admonish.kinds import DEFAULT_KIND, resolve_kind
from admonish.nodes import AdmonitionSpec


@dataclass(frozen=True, slots=True)
class HeaderOptions:
    """Fields written in an admonition header.

    Attributes:
        kind: Kind token as written, None when omitted
        title: Raw title markdown, None when omitted, "" when explicitly empty
        classes: Extra CSS classes in header order
        collapsible: Collapsible flag, None when omitted

    """

    kind: str | None = None
    title: str | None = None
    classes: tuple[str, ...] = ()
    collapsible: bool | None = None

    def resolve(self, defaults: AdmonitionDefaults, body: str = "") -> AdmonitionSpec:
        """Apply defaults and produce a renderable spec.

        Title precedence: explicit title, then the kind's default title when a
        kind token was written, then ``defaults.title``, then "Note".

        Args:
            defaults: Host-supplied defaults
            body: Raw fenced content

        Returns:
            Fully resolved AdmonitionSpec

        Example:
            >>> HeaderOptions(kind="caution").resolve(AdmonitionDefaults()).title
            'Caution'
        """
        if self.kind is None:
            entry = DEFAULT_KIND
            default_title = defaults.title if defaults.title is not None else entry.title
        else:
            entry = resolve_kind(self.kind)
            default_title = entry.title

        return AdmonitionSpec(
            kind=entry.kind,
            title=self.title if self.title is not None else default_title,
            extra_classes=self.classes,
            collapsible=(
                self.collapsible if self.collapsible is not None else defaults.collapsible
            ),
            body=body,
        )
