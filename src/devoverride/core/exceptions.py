from __future__ import annotations

from .._internal import API

__all__ = ["DevOverrideError", "InvalidKeyPathError", "UnitOverrideWarning"]


@API.public
class DevOverrideError(Exception):
    """Base class of all errors of devoverride."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


@API.public
class InvalidKeyPathError(DevOverrideError, ValueError):
    """
    Raised when a :py:class:`.KeyPath` is built from something which isn't a chain of
    attribute names.
    """

    @API.private
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Invalid key path {path!r}: {reason}")


@API.public
class UnitOverrideWarning(UserWarning):
    """
    Emitted when trying to mock :py:obj:`None`. There is never any need to override the
    absence of a value, so nothing is registered.
    """
