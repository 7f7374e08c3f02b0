from typing import TypeVar

T = TypeVar("T")


def public(x: T) -> T:
    """
    Objects marked with this decorator are part of the public API of devoverride. They
    are safe to use from a debug menu or from the dependency resolution of an application.
    """
    return x  # pragma: no cover


def private(x: T) -> T:
    """
    Only for internal use, may change without warning.
    """
    return x  # pragma: no cover
