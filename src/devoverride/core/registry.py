from __future__ import annotations

import logging
import threading
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type, TypeVar, Union, overload

from typing_extensions import final

from .._internal import (
    API,
    config,
    debug_repr,
    Default,
    is_instance_if_possible,
    is_unit,
    qualified_name,
)
from .exceptions import UnitOverrideWarning
from .keypath import KeyPath

__all__ = ["OverrideRegistry"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")


@API.public
@final
@dataclass(eq=False)
class OverrideRegistry:
    """
    Stores at most one override per identifier. Types are identified by their fully
    qualified name and fields of a dependency aggregate by their :py:class:`.KeyPath`.
    Inserting on an existing identifier replaces the previous value.

    Every operation is a no-op, and every lookup reports nothing, while
    :code:`config.enabled` is :py:obj:`False`.

    .. doctest:: core_registry

        >>> from devoverride.core import OverrideRegistry
        >>> class Environment:
        ...     pass
        >>> registry = OverrideRegistry()
        >>> fake = Environment()
        >>> registry.mock(fake)
        >>> registry.get(Environment) is fake
        True
        >>> registry.clear(Environment)
        >>> registry.get(Environment) is None
        True

    """

    by_type: Dict[str, object] = field(default_factory=dict)
    by_path: Dict[KeyPath[Any], object] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def copy(self) -> OverrideRegistry:
        with self.lock:
            return OverrideRegistry(by_type=self.by_type.copy(), by_path=self.by_path.copy())

    ###########
    # Mocking #
    ###########

    def mock(self, __value: object, *, type_: Optional[type] = None) -> None:
        """
        Overrides the type of :code:`__value`, or :code:`type_` if specified, with it.
        Mocking :py:obj:`None` is a mistake which only emits a
        :py:class:`.UnitOverrideWarning`.
        """
        if type_ is None:
            tpe: object = type(__value)
        else:
            if not isinstance(type_, type):
                raise TypeError(f"type_ must be a class, not a {type(type_)!r}")
            tpe = type_

        if is_unit(tpe):
            warnings.warn(
                "None cannot be mocked, there is never any need to override the absence "
                "of a value. Nothing was registered.",
                UnitOverrideWarning,
                stacklevel=2,
            )
            return

        if type_ is not None and not is_instance_if_possible(__value, type_):
            raise TypeError(f"{__value!r} is not an instance of {debug_repr(type_)}")

        identifier = qualified_name(tpe)  # type: ignore
        if not config.enabled:
            logger.debug("Overrides disabled, ignored mock of %s", identifier)
            return
        with self.lock:
            self.by_type[identifier] = __value
        logger.debug("Mocked %s with %r", identifier, __value)

    def mock_path(self, __path: KeyPath[T], __value: T) -> None:
        """
        Overrides the field designated by :code:`__path` with :code:`__value`.
        """
        _enforce_key_path(__path)
        if not config.enabled:
            logger.debug("Overrides disabled, ignored mock of %s", __path)
            return
        with self.lock:
            self.by_path[__path] = __value
        logger.debug("Mocked %s with %r", __path, __value)

    ############
    # Clearing #
    ############

    def clear(self, __tpe: type) -> None:
        identifier = qualified_name(__tpe)
        if not config.enabled:
            logger.debug("Overrides disabled, ignored clear of %s", identifier)
            return
        with self.lock:
            found = self.by_type.pop(identifier, Default.sentinel) is not Default.sentinel
        if found:
            logger.debug("Cleared %s", identifier)

    def clear_path(self, __path: KeyPath[Any]) -> None:
        _enforce_key_path(__path)
        if not config.enabled:
            logger.debug("Overrides disabled, ignored clear of %s", __path)
            return
        with self.lock:
            found = self.by_path.pop(__path, Default.sentinel) is not Default.sentinel
        if found:
            logger.debug("Cleared %s", __path)

    def clear_identifier(self, __identifier: str) -> None:
        """
        Removes the override(s) associated with an identifier as returned by
        :py:meth:`.identifiers`. Meant for debug menus which only know about those.
        """
        if not isinstance(__identifier, str):
            raise TypeError(f"identifier must be a string, not a {type(__identifier)!r}")
        if not config.enabled:
            logger.debug("Overrides disabled, ignored clear of %s", __identifier)
            return
        with self.lock:
            found = self.by_type.pop(__identifier, Default.sentinel) is not Default.sentinel
            for path in [p for p in self.by_path if str(p) == __identifier]:
                del self.by_path[path]
                found = True
        if found:
            logger.debug("Cleared %s", __identifier)

    def clear_all(self) -> None:
        if not config.enabled:
            logger.debug("Overrides disabled, ignored clear of all overrides")
            return
        with self.lock:
            self.by_type.clear()
            self.by_path.clear()
        logger.debug("Cleared all overrides")

    ###########
    # Lookups #
    ###########

    @overload
    def get(self, __tpe: Type[T]) -> Optional[T]:
        ...  # pragma: no cover

    @overload
    def get(self, __tpe: Type[T], default: D) -> Union[T, D]:
        ...  # pragma: no cover

    def get(self, __tpe: Type[T], default: object = None) -> object:
        """
        Returns the override of :code:`__tpe` if there is one and if it's an instance of
        it. Otherwise :code:`default` is returned.
        """
        if not config.enabled:
            return default
        with self.lock:
            value = self.by_type.get(qualified_name(__tpe), Default.sentinel)
        if value is Default.sentinel or not is_instance_if_possible(value, __tpe):
            return default
        return value

    @overload
    def get_path(self, __path: KeyPath[T]) -> Optional[T]:
        ...  # pragma: no cover

    @overload
    def get_path(self, __path: KeyPath[T], default: D) -> Union[T, D]:
        ...  # pragma: no cover

    def get_path(self, __path: KeyPath[Any], default: object = None) -> object:
        _enforce_key_path(__path)
        if not config.enabled:
            return default
        with self.lock:
            return self.by_path.get(__path, default)

    def resolve(self, __tpe: Type[T], live: T) -> T:
        """
        To be used by the dependency resolution of the application: the override of
        :code:`__tpe` if any, :code:`live` otherwise.
        """
        return self.get(__tpe, live)

    def resolve_path(self, __root: object, __path: KeyPath[T]) -> T:
        """
        The override of :code:`__path` if any, otherwise the live value read from
        :code:`__root`. The live value is only read when needed.
        """
        value = self.get_path(__path, Default.sentinel)
        if value is Default.sentinel:
            return __path.read(__root)
        return value  # type: ignore

    #################
    # Introspection #
    #################

    def identifiers(self) -> List[str]:
        """
        All active identifiers, type names first followed by key paths. The order is
        not guaranteed to be stable.
        """
        if not config.enabled:
            return []
        with self.lock:
            return list(self.by_type) + [str(path) for path in self.by_path]

    def debug(self) -> str:
        from ._debug import registry_debug_info

        if not config.enabled:
            return "Overrides are disabled."
        with self.lock:
            return registry_debug_info(self)

    def __contains__(self, __identifier: object) -> bool:
        if not config.enabled:
            return False
        with self.lock:
            if isinstance(__identifier, KeyPath):
                return __identifier in self.by_path
            if isinstance(__identifier, type):
                return qualified_name(__identifier) in self.by_type
            return __identifier in self.identifiers()

    def __len__(self) -> int:
        if not config.enabled:
            return 0
        with self.lock:
            return len(self.by_type) + len(self.by_path)


def _enforce_key_path(path: object) -> None:
    if not isinstance(path, KeyPath):
        raise TypeError(f"path must be a KeyPath, not a {type(path)!r}")
