"""Display tokens for parameter type names."""

from __future__ import annotations

from typing import Optional

_FIXED_LABELS = {
    "Boolean": "<bool>",
    "Byte": "<byte>",
    "Int32": "<int>",
    "Int64": "<long>",
}


def map_type_name(name: Optional[str]) -> Optional[str]:
    """Return the syntax token for a type name, or None for presence-only switches."""
    if not name or name == "SwitchParameter":
        return None
    if name in _FIXED_LABELS:
        return _FIXED_LABELS[name]
    if name in {"Char", "String"}:
        return f"<{name.lower()}>"
    return f"<{name}>"


__all__ = ["map_type_name"]
