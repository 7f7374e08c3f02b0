import logging

import pytest

from devoverride import bootstrap, config, KeyPath


class Dependencies:
    pass


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="devoverride")
    return caplog


def test_mutations_are_logged(debug_logs: pytest.LogCaptureFixture) -> None:
    path = KeyPath.of(Dependencies, "value")
    bootstrap.mock(1)
    bootstrap.mock_path(path, 2)
    bootstrap.clear(int)
    bootstrap.clear(int)
    bootstrap.clear_path(path)
    bootstrap.clear_all()

    assert [r.getMessage() for r in debug_logs.records] == [
        "Mocked int with 1",
        f"Mocked \\{__name__}.Dependencies.value with 2",
        "Cleared int",
        f"Cleared \\{__name__}.Dependencies.value",
        "Cleared all overrides",
    ]
    assert all(r.name == "devoverride.core.registry" for r in debug_logs.records)


def test_ignored_when_disabled(debug_logs: pytest.LogCaptureFixture) -> None:
    config.enabled = False
    debug_logs.clear()
    bootstrap.mock(1)

    assert [r.getMessage() for r in debug_logs.records] == [
        "Overrides disabled, ignored mock of int"
    ]
