from . import API
from .config import config, ConfigImpl
from .typing import is_instance_if_possible, is_unit, NoneType
from .utils import debug_repr, Default, qualified_name, Singleton

__all__ = [
    "API",
    "config",
    "ConfigImpl",
    "debug_repr",
    "Default",
    "is_instance_if_possible",
    "is_unit",
    "NoneType",
    "qualified_name",
    "Singleton",
]
