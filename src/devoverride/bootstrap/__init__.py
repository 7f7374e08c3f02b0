"""
Mock the dependencies of a feature during development, and go back to the live behavior
later, without restarting anything.

Each type is its own identifier, as is each :py:class:`.KeyPath`. Hence only one override
can be active at a time for a given type or key path, mocking it again replaces it.
"""
from . import test
from ._methods import (
    clear,
    clear_all,
    clear_identifier,
    clear_path,
    debug,
    get,
    get_path,
    identifiers,
    mock,
    mock_path,
    resolve,
    resolve_path,
)

__all__ = [
    "clear",
    "clear_all",
    "clear_identifier",
    "clear_path",
    "debug",
    "get",
    "get_path",
    "identifiers",
    "mock",
    "mock_path",
    "resolve",
    "resolve_path",
    "test",
]
