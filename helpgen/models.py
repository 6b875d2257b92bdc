"""Core data models shared across helpgen components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


class UnresolvableCommandError(LookupError):
    """Raised when a command or its implementing type cannot be resolved."""


@dataclass(frozen=True)
class CommandIdentity:
    """Names an invocable command: its display name and its key path."""

    name: str
    keys: str


@dataclass
class DocParameter:
    """One parameter as described by documentation (or synthesised from a type)."""

    name: str
    type_label: Optional[str] = None
    is_mandatory: bool = False
    is_positional: bool = False
    description: List[str] = field(default_factory=list)
    # None means "not yet resolved"; an empty list is a resolved "no aliases".
    aliases: Optional[List[str]] = None


@dataclass
class CommandDoc:
    """Documentation record for a single command."""

    name: str
    brief: str = ""
    description: List[str] = field(default_factory=list)
    parameter_sets: List[List[DocParameter]] = field(default_factory=list)
    synthesized: bool = False


@dataclass
class MergedParameter:
    """Parameter reference entry; aliases are backfilled from type metadata."""

    name: str
    aliases: Optional[List[str]] = None
    description: List[str] = field(default_factory=list)


@dataclass
class HelpModel:
    """Merged, render-ready view of one command's help."""

    name: str
    title: str
    invocation: str
    description: List[str] = field(default_factory=list)
    parameter_sets: List[List[DocParameter]] = field(default_factory=list)
    parameters: Dict[str, MergedParameter] = field(default_factory=dict)
