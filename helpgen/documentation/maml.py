"""MAML help document reader."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional

from ..labels import map_type_name
from ..logging import get_logger
from ..models import CommandDoc, DocParameter
from .base import DocumentationError, DocumentationProvider

logger = get_logger("documentation")

MAML_NS = "http://schemas.microsoft.com/maml/2004/10"
COMMAND_NS = "http://schemas.microsoft.com/maml/dev/command/2004/10"

_NS = {"maml": MAML_NS, "command": COMMAND_NS}

HELP_FILE_SUFFIX = "-help.xml"


def help_file_path(content_root: Path, assembly: str) -> Path:
    """Return where the help document for ``assembly`` lives under ``content_root``."""
    return Path(content_root) / f"{assembly}{HELP_FILE_SUFFIX}"


class MamlDocumentationProvider(DocumentationProvider):
    """Parses ``<assembly>-help.xml`` files into ``CommandDoc`` records."""

    def __init__(self) -> None:
        self._cache: Dict[Path, Dict[str, CommandDoc]] = {}

    def load(self, content_root: Path, assembly: str) -> Dict[str, CommandDoc]:
        path = help_file_path(content_root, assembly)
        cached = self._cache.get(path)
        if cached is not None:
            return cached
        if not path.is_file():
            logger.debug("No help document at %s", path)
            docs: Dict[str, CommandDoc] = {}
        else:
            docs = parse_maml(path.read_text(encoding="utf-8"), source=str(path))
            logger.debug("Read %d command(s) from %s", len(docs), path)
        self._cache[path] = docs
        return docs


def parse_maml(text: str, *, source: str = "<string>") -> Dict[str, CommandDoc]:
    """Parse a MAML document into command records keyed by lower-cased name."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise DocumentationError(f"Failed to parse {source}: {exc}") from exc

    docs: Dict[str, CommandDoc] = {}
    for element in root.iter(f"{{{COMMAND_NS}}}command"):
        doc = _parse_command(element)
        if not doc.name:
            logger.warning("Skipping unnamed command entry in %s", source)
            continue
        docs.setdefault(doc.name.lower(), doc)
    return docs


def _parse_command(element: ET.Element) -> CommandDoc:
    details = element.find("command:details", _NS)
    name = ""
    brief = ""
    if details is not None:
        name = _clean(details.findtext("command:name", default="", namespaces=_NS))
        brief = " ".join(_paragraphs(details.find("maml:description", _NS)))

    description = _paragraphs(element.find("maml:description", _NS))
    reference = _parameter_reference(element)

    parameter_sets: List[List[DocParameter]] = []
    for item in element.findall("command:syntax/command:syntaxItem", _NS):
        parameter_sets.append(
            [_parse_parameter(node, reference) for node in item.findall("command:parameter", _NS)]
        )

    return CommandDoc(
        name=name,
        brief=brief,
        description=description,
        parameter_sets=parameter_sets,
    )


def _parameter_reference(element: ET.Element) -> Dict[str, List[str]]:
    reference: Dict[str, List[str]] = {}
    for node in element.findall("command:parameters/command:parameter", _NS):
        name = _clean(node.findtext("maml:name", default="", namespaces=_NS))
        if name:
            reference.setdefault(name.lower(), _paragraphs(node.find("maml:description", _NS)))
    return reference


def _parse_parameter(node: ET.Element, reference: Dict[str, List[str]]) -> DocParameter:
    name = _clean(node.findtext("maml:name", default="", namespaces=_NS))
    description = _paragraphs(node.find("maml:description", _NS))
    if not description:
        description = list(reference.get(name.lower(), []))
    return DocParameter(
        name=name,
        type_label=_type_label(node.find("command:parameterValue", _NS)),
        is_mandatory=_is_true(node.get("required")),
        is_positional=_is_positional(node.get("position")),
        description=description,
        aliases=_parse_aliases(node.get("aliases")),
    )


def _is_positional(value: Optional[str]) -> bool:
    # "named" (or no attribute at all) means the parameter must be given by name.
    return value is not None and value.strip().isdigit()


def _parse_aliases(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    aliases = [alias.strip() for alias in value.split(",") if alias.strip()]
    if not aliases or [alias.lower() for alias in aliases] == ["none"]:
        return None
    return aliases


def _type_label(node: Optional[ET.Element]) -> Optional[str]:
    if node is None:
        return None
    text = _clean(node.text or "")
    if not text:
        return None
    if text.startswith("<") and text.endswith(">"):
        return text
    return map_type_name(text)


def _paragraphs(node: Optional[ET.Element]) -> List[str]:
    if node is None:
        return []
    paragraphs: List[str] = []
    for para in node.findall("maml:para", _NS):
        text = _clean("".join(para.itertext()))
        if text:
            paragraphs.append(text)
    return paragraphs


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _clean(text: str) -> str:
    return " ".join(text.split())


__all__ = ["MamlDocumentationProvider", "help_file_path", "parse_maml"]
