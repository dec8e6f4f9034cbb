"""
admonish: admonition blocks for markdown books

Turns fenced code blocks tagged with the ``admonish`` keyword into styled
callouts. Runs as a text-to-text preprocessor ahead of the host's markdown
renderer: the admonition body is left as markdown, only the container markup
is added.

Quick Start:
    >>> from admonish import preprocess
    >>> html = preprocess('''
    ... ```admonish warning "Read **this**!"
    ... Careful now.
    ... ```
    ... ''')
    >>> 'id="admonition-read-this"' in html
    True

Header syntax:
    ```admonish                                  -> note, titled "Note"
    ```admonish tip.my-class "Custom title"      -> legacy form
    ```admonish tip class="my-class" title="T"   -> attribute form
    ```admonish collapsible=true                 -> <details> container

Configuration:
    >>> from admonish import OnFailure, PreprocessConfig, Preprocessor
    >>> pre = Preprocessor(PreprocessConfig(on_failure=OnFailure.BAIL))
    >>> pre("No admonitions here.")
    'No admonitions here.'
"""

from admonish.config import (
    AdmonitionDefaults,
    OnFailure,
    PreprocessConfig,
    RenderTextMode,
    get_preprocess_config,
    preprocess_config_context,
    reset_preprocess_config,
    set_preprocess_config,
)
from admonish.directives import ADMONISH_KEYWORD, parse_directive, split_info_string
from admonish.errors import (
    AdmonishError,
    AdmonitionBailError,
    ConfigError,
    DirectiveSyntaxError,
)
from admonish.ids import IdAllocator, title_slug
from admonish.kinds import AdmonitionKind, resolve_kind
from admonish.location import SourceSpan
from admonish.markdown import render_inline_markdown
from admonish.nodes import AdmonitionSpec, FencedBlock
from admonish.preprocessor import Preprocessor, preprocess, splice
from admonish.renderers import HtmlRenderer, StripRenderer, get_renderer
from admonish.scanner import scan_admonitions

__version__ = "0.1.0"

__all__ = [
    "ADMONISH_KEYWORD",
    "AdmonishError",
    "AdmonitionBailError",
    "AdmonitionDefaults",
    "AdmonitionKind",
    "AdmonitionSpec",
    "ConfigError",
    "DirectiveSyntaxError",
    "FencedBlock",
    "HtmlRenderer",
    "IdAllocator",
    "OnFailure",
    "PreprocessConfig",
    "Preprocessor",
    "RenderTextMode",
    "SourceSpan",
    "StripRenderer",
    "__version__",
    "get_preprocess_config",
    "get_renderer",
    "parse_directive",
    "preprocess",
    "preprocess_config_context",
    "render_inline_markdown",
    "reset_preprocess_config",
    "resolve_kind",
    "scan_admonitions",
    "set_preprocess_config",
    "splice",
    "split_info_string",
    "title_slug",
]
