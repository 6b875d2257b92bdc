"""Introspection of cmdlet classes into parameter metadata."""

from __future__ import annotations

from typing import Dict, List, Mapping

from ..logging import get_logger
from .attributes import Parameter
from .base import TypeMetadataProvider
from .parameters import ParameterMetadata, ParameterSetCollection, TypeParameterSet

logger = get_logger("metadata")


class TypeMetadata(TypeMetadataProvider):
    """Reads ``Parameter`` declarations off a cmdlet class and its bases."""

    def __init__(self, cmdlet_type: type) -> None:
        self.cmdlet_type = cmdlet_type
        self._parameters: Dict[str, ParameterMetadata] = {}
        self._parameter_sets: ParameterSetCollection = []
        self._loaded = False

    def load(self) -> "TypeMetadata":
        if self._loaded:
            return self
        for klass in reversed(self.cmdlet_type.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Parameter):
                    metadata = ParameterMetadata.from_declaration(value)
                    self._parameters[metadata.name.lower()] = metadata
        self._parameter_sets = self._build_parameter_sets()
        self._loaded = True
        logger.debug(
            "Loaded %d parameters in %d set(s) from %s",
            len(self._parameters),
            len(self._parameter_sets),
            self.cmdlet_type.__name__,
        )
        return self

    @property
    def parameters(self) -> Mapping[str, ParameterMetadata]:
        self.load()
        return self._parameters

    def parameter_sets(self) -> ParameterSetCollection:
        self.load()
        return list(self._parameter_sets)

    def _build_parameter_sets(self) -> ParameterSetCollection:
        names: List[str] = []
        for metadata in self._parameters.values():
            for set_name in metadata.declared_sets:
                if set_name not in names:
                    names.append(set_name)

        if not names:
            return [
                TypeParameterSet(
                    name=None,
                    parameters=[p for p in self._parameters.values() if not p.is_builtin],
                    synthesized=True,
                )
            ]

        return [
            TypeParameterSet(
                name=set_name,
                parameters=[p for p in self._parameters.values() if p.belongs_to(set_name)],
            )
            for set_name in names
        ]


__all__ = ["TypeMetadata"]
