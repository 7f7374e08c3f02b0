"""
Testing utilities, used to run code against a separate registry. The previous one is
restored on exit whatever happened inside.
"""
from contextlib import contextmanager
from typing import Iterator

from .._internal import API, state
from ..core.registry import OverrideRegistry

__all__ = ["clone", "empty"]


@API.public
@contextmanager
def empty() -> Iterator[None]:
    """
    Starts from an empty registry.

    .. doctest:: bootstrap_test_empty

        >>> from devoverride import bootstrap
        >>> bootstrap.mock(3)
        >>> with bootstrap.test.empty():
        ...     bootstrap.get(int) is None
        True
        >>> bootstrap.get(int)
        3
        >>> bootstrap.clear(int)

    """
    with state.override(lambda _: OverrideRegistry()):
        yield


@API.public
@contextmanager
def clone() -> Iterator[None]:
    """
    Starts from a copy of the current registry. Overrides done inside do not leak.

    .. doctest:: bootstrap_test_clone

        >>> from devoverride import bootstrap
        >>> bootstrap.mock(3)
        >>> with bootstrap.test.clone():
        ...     bootstrap.get(int)
        ...     bootstrap.mock(4)
        3
        >>> bootstrap.get(int)
        3
        >>> bootstrap.clear(int)

    """
    with state.override(lambda registry: registry.copy()):
        yield
