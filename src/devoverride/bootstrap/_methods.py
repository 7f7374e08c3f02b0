from typing import Any, List, Optional, Type, TypeVar

from .._internal import API
from .._internal.state import current_registry, init
from ..core.keypath import KeyPath

# Create the global registry
init()

T = TypeVar("T")


@API.public
def mock(value: object, *, type_: Optional[type] = None) -> None:
    """
    Overrides a dependency, identified by its type, with a custom value. It's effective
    right away, the next resolution of the dependency will return it.

    .. doctest:: bootstrap_mock

        >>> from devoverride import bootstrap
        >>> class Environment:
        ...     def __init__(self, failing: bool = False) -> None:
        ...         self.failing = failing
        >>> bootstrap.mock(Environment(failing=True))
        >>> bootstrap.get(Environment).failing
        True
        >>> bootstrap.clear(Environment)

    Args:
        value: Override to install. Mocking :py:obj:`None` only emits a
            :py:class:`.UnitOverrideWarning`.
        type_: Type to override, defaults to the type of :code:`value`. Useful to
            override a base class with a subclass instance.

    """
    current_registry().mock(value, type_=type_)


@API.public
def mock_path(path: KeyPath[T], value: T) -> None:
    """
    Overrides a field of a dependency aggregate, identified by its :py:class:`.KeyPath`,
    with a custom value.

    .. doctest:: bootstrap_mock_path

        >>> from devoverride import bootstrap
        >>> from devoverride.core import KeyPath
        >>> class Dependencies:
        ...     api_url = "https://example.org"
        >>> path = KeyPath.of(Dependencies, "api_url")
        >>> bootstrap.mock_path(path, "http://localhost:8000")
        >>> bootstrap.resolve_path(Dependencies(), path)
        'http://localhost:8000'
        >>> bootstrap.clear_path(path)
        >>> bootstrap.resolve_path(Dependencies(), path)
        'https://example.org'

    """
    current_registry().mock_path(path, value)


@API.public
def clear(tpe: type) -> None:
    """
    Removes the override of :code:`tpe`, going back to the live behavior.
    """
    current_registry().clear(tpe)


@API.public
def clear_path(path: KeyPath[Any]) -> None:
    """
    Removes the override of :code:`path`, going back to the live behavior.
    """
    current_registry().clear_path(path)


@API.public
def clear_identifier(identifier: str) -> None:
    """
    Removes an override from one of the identifiers returned by :py:func:`.identifiers`.
    """
    current_registry().clear_identifier(identifier)


@API.public
def clear_all() -> None:
    """
    Removes all overrides.
    """
    current_registry().clear_all()


@API.public
def get(tpe: Type[T], default: Any = None) -> Any:
    """
    Override of :code:`tpe` if any and if it's an instance of it, :code:`default`
    otherwise.
    """
    return current_registry().get(tpe, default)


@API.public
def get_path(path: KeyPath[T], default: Any = None) -> Any:
    return current_registry().get_path(path, default)


@API.public
def resolve(tpe: Type[T], live: T) -> T:
    """
    Meant to be called by the dependency resolution of the application each time a
    dependency is needed. Returns the override if any, :code:`live` otherwise.
    """
    return current_registry().resolve(tpe, live)


@API.public
def resolve_path(root: object, path: KeyPath[T]) -> T:
    return current_registry().resolve_path(root, path)


@API.public
def identifiers() -> List[str]:
    """
    All identifiers currently overridden, type names first and then key paths.
    """
    return current_registry().identifiers()


@API.public
def debug() -> str:
    """
    Human readable listing of all overrides.

    .. doctest:: bootstrap_debug

        >>> from devoverride import bootstrap
        >>> with bootstrap.test.empty():
        ...     bootstrap.mock(3)
        ...     print(bootstrap.debug())
        Override/Type: int -> 3

    """
    return current_registry().debug()
