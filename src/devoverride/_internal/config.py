import logging
from dataclasses import dataclass

from typing_extensions import final

from . import API
from .utils import Singleton

logger = logging.getLogger(__name__)


@API.private
@final
@dataclass(eq=False)
class ConfigImpl(Singleton):
    __slots__ = ("_enabled",)
    _enabled: bool

    def __init__(self) -> None:
        # Running python with -O is treated as a release build.
        object.__setattr__(self, "_enabled", __debug__)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"enabled must be a boolean, not a {type(value)}.")
        if value != self._enabled:
            logger.debug("Overrides %s", "enabled" if value else "disabled")
        object.__setattr__(self, "_enabled", value)


config = ConfigImpl()
