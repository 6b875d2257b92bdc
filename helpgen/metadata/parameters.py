"""Type-side parameter facts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from .attributes import Alias, Parameter, ParameterAttribute, SwitchParameter

V = TypeVar("V")

NOT_POSITIONAL = -1

_TYPE_NAMES: Dict[type, str] = {
    str: "String",
    int: "Int32",
    bool: "Boolean",
    bytes: "Byte",
    float: "Double",
    SwitchParameter: "SwitchParameter",
}


class ScopedValue(Generic[V]):
    """Per-parameter-set values with a single all-sets default."""

    def __init__(self) -> None:
        self._by_set: Dict[str, V] = {}
        self._default: Optional[V] = None
        self._has_default = False

    def set(self, parameter_set: str | None, value: V) -> None:
        if parameter_set:
            self._by_set[parameter_set] = value
        else:
            self._default = value
            self._has_default = True

    def get(self, parameter_set: str | None, fallback: V) -> V:
        if parameter_set and parameter_set in self._by_set:
            return self._by_set[parameter_set]
        if self._has_default:
            return self._default  # type: ignore[return-value]
        return fallback


class ParameterMetadata:
    """Everything the type system knows about one declared parameter."""

    def __init__(
        self,
        name: str,
        parameter_type: type = str,
        *,
        aliases: Sequence[str] = (),
        builtin: bool = False,
    ) -> None:
        self.name = name
        self.parameter_type = parameter_type
        self.is_builtin = builtin
        self._aliases: Tuple[str, ...] = tuple(aliases)
        self._mandatory: ScopedValue[bool] = ScopedValue()
        self._position: ScopedValue[int] = ScopedValue()
        self._declared_sets: List[str] = []
        self._in_all_sets = False

    @classmethod
    def from_declaration(cls, declaration: Parameter) -> "ParameterMetadata":
        aliases: List[str] = []
        for attribute in declaration.attributes:
            if isinstance(attribute, Alias):
                aliases.extend(attribute.names)
        metadata = cls(
            declaration.name or declaration.attr_name or "",
            declaration.parameter_type,
            aliases=aliases,
            builtin=declaration.builtin,
        )
        scoped = [a for a in declaration.attributes if isinstance(a, ParameterAttribute)]
        for attribute in scoped:
            metadata.declare(attribute)
        if not scoped and not declaration.builtin:
            # A bare declaration joins every parameter set with default facts.
            metadata._in_all_sets = True
        return metadata

    def declare(self, attribute: ParameterAttribute) -> None:
        """Apply one ``ParameterAttribute`` to this parameter."""
        set_name = attribute.parameter_set_name or None
        if set_name is None:
            self._in_all_sets = True
        elif set_name not in self._declared_sets:
            self._declared_sets.append(set_name)
        self.set_mandatory(set_name, attribute.mandatory)
        self.set_position(set_name, attribute.position)

    def set_mandatory(self, parameter_set: str | None, is_mandatory: bool) -> None:
        self._mandatory.set(parameter_set, bool(is_mandatory))

    def set_position(self, parameter_set: str | None, position: int | None) -> None:
        if position is None or position == NOT_POSITIONAL:
            return
        self._position.set(parameter_set, position)

    def is_mandatory(self, parameter_set: str | None = None) -> bool:
        return self._mandatory.get(parameter_set, False)

    def position(self, parameter_set: str | None = None) -> int:
        return self._position.get(parameter_set, NOT_POSITIONAL)

    def is_positional(self, parameter_set: str | None = None) -> bool:
        return self.position(parameter_set) != NOT_POSITIONAL

    def belongs_to(self, parameter_set: str) -> bool:
        return self._in_all_sets or parameter_set in self._declared_sets

    @property
    def declared_sets(self) -> List[str]:
        return list(self._declared_sets)

    @property
    def aliases(self) -> List[str]:
        return list(self._aliases)

    @property
    def switch_parameter(self) -> bool:
        return self.parameter_type is SwitchParameter

    @property
    def type_name(self) -> str:
        return _TYPE_NAMES.get(self.parameter_type, self.parameter_type.__name__)

    def __repr__(self) -> str:
        return f"ParameterMetadata(name={self.name!r}, type={self.type_name!r})"


@dataclass
class TypeParameterSet:
    """Ordered parameters for one named (or synthetic) parameter set."""

    name: Optional[str]
    parameters: List[ParameterMetadata] = field(default_factory=list)
    synthesized: bool = False


ParameterSetCollection = List[TypeParameterSet]


__all__ = [
    "NOT_POSITIONAL",
    "ParameterMetadata",
    "ParameterSetCollection",
    "ScopedValue",
    "TypeParameterSet",
]
