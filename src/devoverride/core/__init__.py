from .exceptions import DevOverrideError, InvalidKeyPathError, UnitOverrideWarning
from .keypath import KeyPath
from .registry import OverrideRegistry

__all__ = [
    "DevOverrideError",
    "InvalidKeyPathError",
    "KeyPath",
    "OverrideRegistry",
    "UnitOverrideWarning",
]
