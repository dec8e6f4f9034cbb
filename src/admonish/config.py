"""Preprocessor configuration for admonish.

The host (a book builder, a docs pipeline) supplies three settings per build:
defaults applied to blocks that omit a title or collapsible flag, the failure
policy, and the render mode. They are bundled in an immutable
:class:`PreprocessConfig`.

An ambient config can be installed per context with a ContextVar so that
hosts which call :func:`admonish.preprocess` from many places don't have to
thread the config through. Only configuration is ambient; per-document state
(the id allocator) is always created fresh by each call.

Thread Safety:
    ContextVars are thread-local by design and the config is frozen, so no
    locks are needed.

Usage:
    config = PreprocessConfig.from_dict(
        {"on_failure": "bail", "default": {"collapsible": True}},
        renderer="html",
    )
    html = preprocess(source, config)

    # Or ambient
    with preprocess_config_context(config):
        html = preprocess(source)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from admonish.errors import ConfigError


class OnFailure(Enum):
    """What to do when a directive header fails to parse."""

    CONTINUE = "continue"  # render an inline bug admonition
    BAIL = "bail"  # abort the whole document pass


class RenderTextMode(Enum):
    """Which renderer replaces recognized blocks."""

    HTML = "html"  # nested container markup
    STRIP = "strip"  # body content only


@dataclass(frozen=True, slots=True)
class AdmonitionDefaults:
    """Values used when a block omits the corresponding field.

    Attributes:
        title: Title for blocks that name no kind and no title. ``None``
            means the kind's own default ("Note").
        collapsible: Whether blocks render collapsible unless they say otherwise

    """

    title: str | None = None
    collapsible: bool = False

    @classmethod
    def from_dict(cls, table: Mapping[str, Any]) -> AdmonitionDefaults:
        """Build defaults from the host's ``default`` table.

        Unknown keys are ignored.

        Raises:
            ConfigError: If a value has the wrong type
        """
        title = table.get("title")
        if title is not None and not isinstance(title, str):
            raise ConfigError("default.title", f"expected a string, got {title!r}")

        collapsible = table.get("collapsible", False)
        if not isinstance(collapsible, bool):
            raise ConfigError(
                "default.collapsible", f"expected a boolean, got {collapsible!r}"
            )

        return cls(title=title, collapsible=collapsible)


@dataclass(frozen=True, slots=True)
class PreprocessConfig:
    """Immutable preprocessor configuration.

    Attributes:
        on_failure: Failure policy for malformed headers
        defaults: Fallback title and collapsible flag
        render_mode: Renderer used for recognized blocks

    """

    on_failure: OnFailure = OnFailure.CONTINUE
    defaults: AdmonitionDefaults = field(default_factory=AdmonitionDefaults)
    render_mode: RenderTextMode = RenderTextMode.HTML

    @classmethod
    def from_dict(
        cls,
        table: Mapping[str, Any],
        renderer: str | None = None,
    ) -> PreprocessConfig:
        """Create a config from the host's preprocessor table.

        Expected shape (every key optional, unknown keys ignored)::

            {
                "on_failure": "continue" | "bail",
                "default": {"title": str, "collapsible": bool},
                "renderer": {"<renderer name>": {"render_mode": "html" | "strip"}},
            }

        Args:
            table: Preprocessor configuration table
            renderer: Name of the host renderer the output is destined for.
                Selects the matching ``renderer`` entry; when none is
                configured, ``test`` strips and every other renderer gets HTML.

        Returns:
            New PreprocessConfig

        Raises:
            ConfigError: If a value is of the wrong type or not a known choice

        Example:
            >>> PreprocessConfig.from_dict({"on_failure": "bail"}).on_failure
            <OnFailure.BAIL: 'bail'>
            >>> PreprocessConfig.from_dict({}, renderer="test").render_mode
            <RenderTextMode.STRIP: 'strip'>

        """
        on_failure = _enum_value(OnFailure, table.get("on_failure"), "on_failure")

        default_table = table.get("default", {})
        if not isinstance(default_table, Mapping):
            raise ConfigError("default", f"expected a table, got {default_table!r}")
        defaults = AdmonitionDefaults.from_dict(default_table)

        render_mode = None
        if renderer is not None:
            renderers = table.get("renderer", {})
            if not isinstance(renderers, Mapping):
                raise ConfigError("renderer", f"expected a table, got {renderers!r}")
            renderer_table = renderers.get(renderer, {})
            if not isinstance(renderer_table, Mapping):
                raise ConfigError(
                    f"renderer.{renderer}", f"expected a table, got {renderer_table!r}"
                )
            render_mode = _enum_value(
                RenderTextMode,
                renderer_table.get("render_mode"),
                f"renderer.{renderer}.render_mode",
            )
            if render_mode is None:
                render_mode = default_render_mode(renderer)

        return cls(
            on_failure=on_failure or OnFailure.CONTINUE,
            defaults=defaults,
            render_mode=render_mode or RenderTextMode.HTML,
        )


def default_render_mode(renderer: str) -> RenderTextMode:
    """Render mode used for a renderer with no explicit configuration.

    The ``test`` renderer runs code samples, so it gets the bare bodies.
    """
    if renderer == "test":
        return RenderTextMode.STRIP
    return RenderTextMode.HTML


def _enum_value(enum_cls: type[Enum], value: Any, key: str) -> Any:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise ConfigError(key, f"expected one of {choices}, got {value!r}") from None


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PreprocessConfig = PreprocessConfig()

_preprocess_config: ContextVar[PreprocessConfig] = ContextVar(
    "preprocess_config",
    default=_DEFAULT_CONFIG,
)


def get_preprocess_config() -> PreprocessConfig:
    """Get the configuration active in the current context."""
    return _preprocess_config.get()


def set_preprocess_config(config: PreprocessConfig) -> None:
    """Set the configuration for the current context.

    Args:
        config: PreprocessConfig used by later ``preprocess()`` calls that
            don't pass one explicitly.

    """
    _preprocess_config.set(config)


def reset_preprocess_config() -> None:
    """Reset the current context to the default configuration."""
    _preprocess_config.set(_DEFAULT_CONFIG)


@contextmanager
def preprocess_config_context(config: PreprocessConfig) -> Iterator[None]:
    """Context manager for a temporary configuration.

    Restores the previous configuration even if the body raises.

    Example:
        >>> with preprocess_config_context(PreprocessConfig(on_failure=OnFailure.BAIL)):
        ...     get_preprocess_config().on_failure
        <OnFailure.BAIL: 'bail'>

    """
    previous = _preprocess_config.get()
    _preprocess_config.set(config)
    try:
        yield
    finally:
        _preprocess_config.set(previous)


__all__ = [
    "AdmonitionDefaults",
    "OnFailure",
    "PreprocessConfig",
    "RenderTextMode",
    "default_render_mode",
    "get_preprocess_config",
    "preprocess_config_context",
    "reset_preprocess_config",
    "set_preprocess_config",
]
