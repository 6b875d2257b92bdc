"""Declarative building blocks used by cmdlet plugin classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

_CMDLET_ATTR = "__cmdlet__"

T = TypeVar("T", bound=type)


class SwitchParameter:
    """Marker type for presence-only flags."""

    def __init__(self, is_present: bool = False) -> None:
        self.is_present = bool(is_present)

    def __bool__(self) -> bool:
        return self.is_present

    def __repr__(self) -> str:
        return f"SwitchParameter({self.is_present})"


@dataclass(frozen=True)
class ParameterAttribute:
    """Binds a parameter to a parameter set (or to all sets when unnamed)."""

    parameter_set_name: Optional[str] = None
    mandatory: bool = False
    position: Optional[int] = None


class Alias:
    """Alternative names accepted for a parameter."""

    def __init__(self, *names: str) -> None:
        self.names: Tuple[str, ...] = tuple(names)

    def __repr__(self) -> str:
        return f"Alias{self.names!r}"


@dataclass(frozen=True)
class CmdletAttribute:
    """Verb/noun pair naming a cmdlet class."""

    verb: str
    noun: str

    @property
    def command_name(self) -> str:
        return f"{self.verb}-{self.noun}"


class Parameter:
    """Class-level parameter declaration.

    Instances act as descriptors so a cmdlet object exposes bound values under
    the same attribute names it declares. Extra positional arguments are the
    attached attributes (``ParameterAttribute`` and ``Alias`` instances).
    """

    def __init__(
        self,
        parameter_type: type = str,
        *attributes: object,
        name: str | None = None,
        builtin: bool = False,
        default: Any = None,
    ) -> None:
        self.parameter_type = parameter_type
        self.attributes: Tuple[object, ...] = tuple(attributes)
        self.name = name
        self.builtin = builtin
        self.default = default
        self.attr_name: str | None = None

    def __set_name__(self, owner: type, attr_name: str) -> None:
        self.attr_name = attr_name
        if self.name is None:
            self.name = attr_name

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.attr_name, self.default)

    def __set__(self, instance: object, value: Any) -> None:
        instance.__dict__[self.attr_name] = value


class Cmdlet:
    """Base class for cmdlet plugins; carries the framework's common parameters."""

    verbose = Parameter(SwitchParameter, builtin=True)
    debug = Parameter(SwitchParameter, builtin=True)


def cmdlet(verb: str, noun: str) -> Callable[[T], T]:
    """Class decorator tagging a cmdlet implementation with its verb and noun."""

    def _decorate(cls: T) -> T:
        setattr(cls, _CMDLET_ATTR, CmdletAttribute(verb=verb, noun=noun))
        return cls

    return _decorate


def get_cmdlet_attribute(cls: Type[object]) -> Optional[CmdletAttribute]:
    """Return the ``@cmdlet`` tag declared directly on ``cls``, if any."""
    value = cls.__dict__.get(_CMDLET_ATTR)
    return value if isinstance(value, CmdletAttribute) else None


__all__ = [
    "Alias",
    "Cmdlet",
    "CmdletAttribute",
    "Parameter",
    "ParameterAttribute",
    "SwitchParameter",
    "cmdlet",
    "get_cmdlet_attribute",
]
