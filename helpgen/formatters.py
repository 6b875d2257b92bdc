"""Parameter-name formatters for Unix and DOS style syntax."""

from __future__ import annotations

from typing import Callable, Dict, Optional

ParameterNameFormatter = Callable[[str, Optional[str], bool, bool], str]


def _wrap(name_token: str, value_token: str, is_mandatory: bool, is_positional: bool) -> str:
    parts = []
    if not is_mandatory:
        parts.append("[")
    if is_positional:
        parts.append(f"[{name_token}]")
    else:
        parts.append(name_token)
    parts.append(value_token)
    if not is_mandatory:
        parts.append("]")
    return "".join(parts)


def format_unix_parameter(
    name: str, type_label: Optional[str], is_mandatory: bool, is_positional: bool
) -> str:
    """Format a parameter the way a Unix-style parser expects it.

    ``"a"`` becomes ``-a``; longer names become ``--name`` (lower-cased).
    Optional parameters are wrapped in brackets, and positional ones get an
    extra pair around the name so ``[[--name] <string>]`` reads as "optional,
    and the ``--name`` itself may be left out".
    """
    name_token = f"-{name}" if len(name) == 1 else f"--{name.lower()}"
    value_token = f" {type_label}" if type_label else ""
    return _wrap(name_token, value_token, is_mandatory, is_positional)


def format_dos_parameter(
    name: str, type_label: Optional[str], is_mandatory: bool, is_positional: bool
) -> str:
    """Format a parameter as a DOS switch: ``/first:string``, ``/a``."""
    name_token = f"/{name.lower()}"
    value_token = ""
    if type_label:
        value_token = ":" + type_label.strip("<>")
    return _wrap(name_token, value_token, is_mandatory, is_positional)


FORMATTERS: Dict[str, ParameterNameFormatter] = {
    "unix": format_unix_parameter,
    "dos": format_dos_parameter,
}


def get_formatter(style: str) -> ParameterNameFormatter:
    """Return the formatter registered for ``style``."""
    try:
        return FORMATTERS[style.lower()]
    except KeyError:
        known = ", ".join(sorted(FORMATTERS))
        raise ValueError(f"Unknown syntax style '{style}' (expected one of: {known})") from None


__all__ = [
    "FORMATTERS",
    "ParameterNameFormatter",
    "format_dos_parameter",
    "format_unix_parameter",
    "get_formatter",
]
