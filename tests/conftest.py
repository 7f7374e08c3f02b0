from __future__ import annotations

from typing import Iterator

import pytest

from devoverride import bootstrap, config, OverrideRegistry


@pytest.fixture(autouse=True)
def auto_empty_registry() -> Iterator[None]:
    with bootstrap.test.empty():
        yield


@pytest.fixture(autouse=True)
def enabled_config() -> Iterator[None]:
    config.enabled = True
    yield
    config.enabled = True


@pytest.fixture
def disabled_config() -> Iterator[None]:
    config.enabled = False
    yield
    config.enabled = True


@pytest.fixture
def registry() -> OverrideRegistry:
    return OverrideRegistry()
