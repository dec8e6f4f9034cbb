"""Shared fixtures for admonish tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from admonish import (
    AdmonitionDefaults,
    OnFailure,
    PreprocessConfig,
    RenderTextMode,
    preprocess,
    reset_preprocess_config,
)


@pytest.fixture(autouse=True)
def _reset_ambient_config() -> Iterator[None]:
    """Keep ContextVar config from leaking between tests."""
    yield
    reset_preprocess_config()


@pytest.fixture
def prep() -> Callable[[str], str]:
    """Preprocess with continue-on-failure, empty defaults and HTML output."""

    def run(content: str) -> str:
        return preprocess(content, PreprocessConfig())

    return run


@pytest.fixture
def bail_config() -> PreprocessConfig:
    return PreprocessConfig(on_failure=OnFailure.BAIL)


@pytest.fixture
def strip_config() -> PreprocessConfig:
    return PreprocessConfig(on_failure=OnFailure.BAIL, render_mode=RenderTextMode.STRIP)


@pytest.fixture
def titled_defaults_config() -> PreprocessConfig:
    return PreprocessConfig(defaults=AdmonitionDefaults(title="Admonish"))
