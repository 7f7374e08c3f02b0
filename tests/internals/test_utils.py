from __future__ import annotations

from typing import List, Union

import pytest
from typing_extensions import Protocol, runtime_checkable

from devoverride._internal import (
    debug_repr,
    is_instance_if_possible,
    is_unit,
    NoneType,
    qualified_name,
)


class Dummy:
    class Nested:
        pass

    def method(self) -> None:
        pass  # pragma: no cover


def function() -> None:
    pass  # pragma: no cover


class WithDebugRepr:
    def __devoverride_debug_repr__(self) -> str:
        return "custom"


class Broken:
    def __devoverride_debug_repr__(self) -> str:
        raise RuntimeError()

    def __repr__(self) -> str:
        return "Broken()"


def test_qualified_name() -> None:
    assert qualified_name(Dummy) == f"{__name__}.Dummy"
    assert qualified_name(Dummy.Nested) == f"{__name__}.Dummy.Nested"
    assert qualified_name(int) == "int"
    assert qualified_name(NoneType) == "NoneType"


def test_debug_repr() -> None:
    assert debug_repr(Dummy) == f"{__name__}.Dummy"
    assert debug_repr(Dummy().method) == f"{__name__}.Dummy.method"
    assert debug_repr(function) == f"{__name__}.function"
    assert debug_repr(WithDebugRepr()) == "custom"
    assert debug_repr(Broken()) == "Broken()"
    assert debug_repr(1) == "1"


def test_is_unit() -> None:
    assert is_unit(None)
    assert is_unit(NoneType)
    assert not is_unit(int)
    assert not is_unit(object)


class Greeter(Protocol):
    def greet(self) -> str:
        ...  # pragma: no cover


@runtime_checkable
class CheckedGreeter(Protocol):
    def greet(self) -> str:
        ...  # pragma: no cover


@pytest.mark.parametrize(
    "obj, tpe, expected",
    [
        (1, int, True),
        ("1", int, False),
        (True, int, True),
        (object(), Greeter, True),
        (object(), CheckedGreeter, False),
        (object(), List[int], True),
        (object(), Union[int, str], True),
    ],
)
def test_is_instance_if_possible(obj: object, tpe: object, expected: bool) -> None:
    assert is_instance_if_possible(obj, tpe) is expected
