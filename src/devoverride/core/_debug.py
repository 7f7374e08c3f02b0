from __future__ import annotations

from typing import List, TYPE_CHECKING

from .._internal import API, debug_repr

if TYPE_CHECKING:
    from .registry import OverrideRegistry


@API.private
def registry_debug_info(registry: OverrideRegistry) -> str:
    if not registry.by_type and not registry.by_path:
        return "No overrides."

    lines: List[str] = []
    for identifier, value in registry.by_type.items():
        lines.append(f"Override/Type: {identifier} -> {debug_repr(value)}")
    for path, value in registry.by_path.items():
        lines.append(f"Override/Path: {debug_repr(path)} -> {debug_repr(value)}")
    return "\n".join(lines)
