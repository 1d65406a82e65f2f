"""Pytest configuration for the providers test suite.

Every test runs against built-in configuration defaults: provider
environment overrides and the external config file pointer are cleared and
the config file cache is reset around each test.
"""

from __future__ import annotations

import time
from typing import Iterator, List

import pytest

from loom_providers.config import ENV_FIELDS, reset_config_cache
from loom_providers.config.defaults import PROVIDERS_CONFIG_FILE_ENV
from loom_providers.base.logging import LOG_LEVEL_ENV

_PROVIDERS = ("ollama", "openai", "stabilityai")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider env overrides and reset the config file cache."""

    monkeypatch.delenv(PROVIDERS_CONFIG_FILE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    for provider in _PROVIDERS:
        for field in ENV_FIELDS:
            monkeypatch.delenv(f"{provider.upper()}_{field.upper()}", raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace ``time.sleep`` with a recorder and return the recorded delays."""

    recorded: List[float] = []
    monkeypatch.setattr(time, "sleep", recorded.append)
    return recorded
