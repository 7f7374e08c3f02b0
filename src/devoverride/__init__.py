from ._internal import config
from .core import (
    DevOverrideError,
    InvalidKeyPathError,
    KeyPath,
    OverrideRegistry,
    UnitOverrideWarning,
)
from . import bootstrap

__all__ = [
    "__version__",
    "bootstrap",
    "config",
    "DevOverrideError",
    "InvalidKeyPathError",
    "KeyPath",
    "OverrideRegistry",
    "UnitOverrideWarning",
]

__version__ = "1.0.0"
