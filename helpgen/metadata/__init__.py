"""Cmdlet declarations and type-side parameter metadata."""

from __future__ import annotations

from .attributes import (
    Alias,
    Cmdlet,
    CmdletAttribute,
    Parameter,
    ParameterAttribute,
    SwitchParameter,
    cmdlet,
    get_cmdlet_attribute,
)
from .base import TypeMetadataProvider
from .parameters import (
    NOT_POSITIONAL,
    ParameterMetadata,
    ParameterSetCollection,
    ScopedValue,
    TypeParameterSet,
)
from .reflection import TypeMetadata

__all__ = [
    "Alias",
    "Cmdlet",
    "CmdletAttribute",
    "NOT_POSITIONAL",
    "Parameter",
    "ParameterAttribute",
    "ParameterMetadata",
    "ParameterSetCollection",
    "ScopedValue",
    "SwitchParameter",
    "TypeMetadata",
    "TypeMetadataProvider",
    "TypeParameterSet",
    "cmdlet",
    "get_cmdlet_attribute",
]
