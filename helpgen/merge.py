"""Reconciles authored documentation with type metadata."""

from __future__ import annotations

from typing import Dict, List, Optional

from .labels import map_type_name
from .logging import get_logger
from .metadata.base import TypeMetadataProvider
from .metadata.parameters import TypeParameterSet
from .models import (
    CommandDoc,
    CommandIdentity,
    DocParameter,
    HelpModel,
    MergedParameter,
    UnresolvableCommandError,
)

logger = get_logger("merge")

DEFAULT_PROGRAM_NAME = "az"
DEFAULT_KEY_SEPARATOR = ";"


class HelpMerger:
    """Builds a ``HelpModel`` from an optional ``CommandDoc`` and type metadata."""

    def __init__(
        self,
        program_name: str = DEFAULT_PROGRAM_NAME,
        key_separator: str = DEFAULT_KEY_SEPARATOR,
    ) -> None:
        self.program_name = program_name
        self.key_separator = key_separator or DEFAULT_KEY_SEPARATOR

    def merge(
        self,
        identity: CommandIdentity,
        command_doc: Optional[CommandDoc],
        metadata: Optional[TypeMetadataProvider],
    ) -> HelpModel:
        if not identity.name or not identity.keys:
            raise UnresolvableCommandError(f"Command identity is incomplete: {identity!r}")
        if metadata is None:
            raise UnresolvableCommandError(f"No type metadata for command '{identity.name}'")

        if command_doc is None:
            logger.debug("No documentation for %s; synthesising from type metadata", identity.name)
            command_doc = synthesize_command_doc(identity, metadata)

        parameters: Dict[str, MergedParameter] = {}
        if not command_doc.synthesized:
            parameters = self._register_parameters(command_doc)
            self._backfill_aliases(parameters, metadata)

        return HelpModel(
            name=command_doc.name,
            title=format_title(command_doc.name, command_doc.brief),
            invocation=self.invocation(identity.keys),
            description=list(command_doc.description),
            parameter_sets=[list(pset) for pset in command_doc.parameter_sets],
            parameters=parameters,
        )

    def invocation(self, keys: str) -> str:
        words = [word for word in keys.split(self.key_separator) if word]
        if self.program_name:
            words.insert(0, self.program_name)
        return " ".join(words)

    @staticmethod
    def _register_parameters(command_doc: CommandDoc) -> Dict[str, MergedParameter]:
        parameters: Dict[str, MergedParameter] = {}
        for pset in command_doc.parameter_sets:
            for parameter in pset:
                key = parameter.name.lower()
                if key in parameters:
                    continue
                parameters[key] = MergedParameter(
                    name=parameter.name,
                    aliases=None if parameter.aliases is None else list(parameter.aliases),
                    description=list(parameter.description),
                )
        return parameters

    @staticmethod
    def _backfill_aliases(
        parameters: Dict[str, MergedParameter], metadata: TypeMetadataProvider
    ) -> None:
        for key, parameter in parameters.items():
            if parameter.aliases:
                continue
            fact = metadata.find(key)
            if fact is not None:
                parameter.aliases = list(fact.aliases)


def synthesize_command_doc(
    identity: CommandIdentity, metadata: TypeMetadataProvider
) -> CommandDoc:
    """Build a documentation record entirely from type metadata."""
    return CommandDoc(
        name=identity.name,
        parameter_sets=[_doc_parameters(pset) for pset in metadata.parameter_sets()],
        synthesized=True,
    )


def _doc_parameters(pset: TypeParameterSet) -> List[DocParameter]:
    return [
        DocParameter(
            name=fact.name,
            type_label=map_type_name(fact.type_name),
            is_mandatory=fact.is_mandatory(pset.name),
            is_positional=fact.is_positional(pset.name),
            aliases=fact.aliases,
        )
        for fact in pset.parameters
    ]


def format_title(name: str, brief: str) -> str:
    if not brief:
        return name
    return f"{name}: {brief}"


__all__ = ["HelpMerger", "format_title", "synthesize_command_doc"]
