from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, Iterable, Tuple, TypeVar, Union

from typing_extensions import final

from .._internal import API, qualified_name
from .exceptions import InvalidKeyPathError

__all__ = ["KeyPath"]

T = TypeVar("T")

_ATTRIBUTE = re.compile(r"[A-Za-z_]\w*")


@API.public
@final
@dataclass(frozen=True, eq=True)
class KeyPath(Generic[T]):
    """
    Names one field within a configuration / dependency aggregate, the structural
    counterpart of a type identifier. Two key paths are equal if they start from the
    same root type and go through the same attributes.

    .. doctest:: core_keypath

        >>> from devoverride.core import KeyPath
        >>> class Dependencies:
        ...     network = None
        >>> path = KeyPath.of(Dependencies, "network.environment")
        >>> path.attributes
        ('network', 'environment')

    """

    __slots__ = ("root", "attributes")
    root: type
    attributes: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.root, type):
            raise TypeError(f"root must be a class, not a {type(self.root)!r}")
        if not isinstance(self.attributes, tuple):
            raise TypeError(f"attributes must be a tuple, not a {type(self.attributes)!r}")
        if not self.attributes:
            raise InvalidKeyPathError(self.attributes, "at least one attribute is required")
        for name in self.attributes:
            if not isinstance(name, str) or not _ATTRIBUTE.fullmatch(name):
                raise InvalidKeyPathError(self.attributes, f"{name!r} is not an attribute name")

    @classmethod
    def of(cls, root: type, path: Union[str, Iterable[str]]) -> KeyPath[T]:
        """
        Build a key path from a dotted string or from an iterable of attribute names.
        """
        if isinstance(path, str):
            attributes = tuple(path.split("."))
        else:
            attributes = tuple(path)
        return KeyPath(root, attributes)

    def read(self, obj: object) -> T:
        """
        Walks the attributes from :code:`obj`, which is expected to be an instance of the
        root, and returns the live value.
        """
        value: object = obj
        for name in self.attributes:
            value = getattr(value, name)
        return value  # type: ignore

    def child(self, name: str) -> KeyPath[object]:
        return KeyPath(self.root, self.attributes + (name,))

    def __str__(self) -> str:
        return "\\" + ".".join((qualified_name(self.root),) + self.attributes)

    def __devoverride_debug_repr__(self) -> str:
        return str(self)
