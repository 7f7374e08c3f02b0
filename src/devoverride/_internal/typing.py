from __future__ import annotations

import typing
from typing import Any, Callable

__all__ = ["is_unit", "is_instance_if_possible", "NoneType"]

NoneType = type(None)


# inspired by how `typing_extensions.runtime_checkable` checks for a protocol
def _is_protocol(obj: type) -> bool:
    return issubclass(obj, typing.cast(type, typing.Generic)) and getattr(
        obj, "_is_protocol", False
    )


def is_unit(tpe: object) -> bool:
    """Whether the type represents the absence of any meaningful value."""
    return tpe is None or tpe is NoneType


def is_instance_if_possible(obj: object, tpe: object) -> bool:
    """
    isinstance() whenever it can be applied. Non runtime-checkable protocols and typing
    constructs (List[int], Union, ...) cannot be checked, so any object is accepted.
    """
    if not isinstance(tpe, type):
        return True
    if _is_protocol(tpe) and not getattr(tpe, "_is_runtime_protocol", False):
        return True
    return _check(obj, tpe, isinstance)


def _check(obj: Any, tpe: type, check: Callable[[Any, type], bool]) -> bool:
    try:
        return check(obj, tpe)
    except TypeError:
        # isinstance() with a parametrized generic alias
        return True
