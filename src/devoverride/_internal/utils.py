from __future__ import annotations

import enum
import inspect
from typing import Any, ClassVar, Optional

from typing_extensions import final

# Modules which are not worth repeating in an identifier.
_IMPLICIT_MODULES = frozenset({"__main__", "builtins"})


class Singleton:
    __slots__ = ()
    __instance: ClassVar[Optional[Any]] = None

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls.__instance is None:
            cls.__instance = super().__new__(cls)
        return cls.__instance


@final
class Default(enum.Enum):
    sentinel = enum.auto()


def qualified_name(__tpe: type) -> str:
    """
    Fully qualified name of a type, used as its identifier in the registry.
    """
    module = getattr(__tpe, "__module__", None)
    qualname = getattr(__tpe, "__qualname__", None) or getattr(__tpe, "__name__", None)
    if qualname is None:
        # typing constructs such as List[int]
        return repr(__tpe)
    if isinstance(module, str) and module not in _IMPLICIT_MODULES:
        return f"{module}.{qualname}"
    return str(qualname)


def debug_repr(__obj: object) -> str:
    try:
        return str(__obj.__devoverride_debug_repr__())  # type: ignore
    except Exception:
        pass

    if isinstance(__obj, type) or inspect.isfunction(__obj) or inspect.ismethod(__obj):
        return qualified_name(__obj)  # type: ignore

    return repr(__obj)
