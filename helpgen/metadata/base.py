"""Base classes for type metadata providers."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from .parameters import ParameterMetadata, ParameterSetCollection


class TypeMetadataProvider(ABC):
    """Contract for sources that describe a command's declared parameters."""

    @property
    @abstractmethod
    def parameters(self) -> Mapping[str, ParameterMetadata]:
        """Declared parameters keyed by lower-cased name, in declaration order."""

    @abstractmethod
    def parameter_sets(self) -> ParameterSetCollection:
        """Return at least one parameter set, synthesising one when none are declared."""

    def find(self, name: str) -> Optional[ParameterMetadata]:
        """Look up a parameter by case-insensitive name."""
        return self.parameters.get(name.lower())
