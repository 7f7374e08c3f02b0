from __future__ import annotations

import pytest

from devoverride import bootstrap
from devoverride._internal import state


class Environment:
    pass


def test_empty() -> None:
    env = Environment()
    bootstrap.mock(env)
    registry = state.current_registry()

    with bootstrap.test.empty():
        assert state.current_registry() is not registry
        assert bootstrap.get(Environment) is None
        assert bootstrap.identifiers() == []
        bootstrap.mock(1)

    assert state.current_registry() is registry
    assert bootstrap.get(Environment) is env
    assert bootstrap.get(int) is None


def test_clone() -> None:
    env = Environment()
    bootstrap.mock(env)

    with bootstrap.test.clone():
        assert bootstrap.get(Environment) is env
        bootstrap.clear(Environment)
        bootstrap.mock(1)
        assert bootstrap.get(Environment) is None

    assert bootstrap.get(Environment) is env
    assert bootstrap.get(int) is None


def test_nested() -> None:
    bootstrap.mock(1)
    with bootstrap.test.clone():
        bootstrap.mock(2)
        with bootstrap.test.clone():
            assert bootstrap.get(int) == 2
            bootstrap.mock(3)
        with bootstrap.test.empty():
            assert bootstrap.get(int) is None
        assert bootstrap.get(int) == 2
    assert bootstrap.get(int) == 1


def test_restored_on_error() -> None:
    registry = state.current_registry()
    with pytest.raises(RuntimeError):
        with bootstrap.test.empty():
            bootstrap.mock(1)
            raise RuntimeError()

    assert state.current_registry() is registry
    assert bootstrap.get(int) is None
