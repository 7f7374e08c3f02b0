"""
devoverride has a global registry which is managed in this module.
"""
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from ..core.registry import OverrideRegistry

__registry: Optional[OverrideRegistry] = None
__registry_lock = threading.RLock()


def current_registry() -> OverrideRegistry:
    assert __registry is not None
    return __registry


def init() -> None:
    global __registry
    if __registry is None:
        with __registry_lock:
            if __registry is None:
                __registry = OverrideRegistry()


@contextmanager
def override(create: Callable[[OverrideRegistry], OverrideRegistry]) -> Iterator[None]:
    global __registry
    with __registry_lock:
        assert __registry is not None
        old = __registry
        try:
            __registry = create(old)
            yield
        finally:
            __registry = old
