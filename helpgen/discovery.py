"""Discovery of installed cmdlet packages and their implementing classes."""

from __future__ import annotations

import importlib.util
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterator, List, Optional

from .logging import get_logger
from .metadata.attributes import get_cmdlet_attribute
from .models import CommandIdentity, UnresolvableCommandError

logger = get_logger("discovery")

INDEX_FOLDER = "_indexes"
CMDLETS_INDEX_FILE = "_cmdlets.idx"
INDEX_WORD_SEPARATOR = ";"
INDEX_VALUE_SEPARATOR = ":"
INDEX_TYPE_SEPARATOR = "/"

_LOADED_MODULES: Dict[Path, ModuleType] = {}


@dataclass(frozen=True)
class IndexEntry:
    """One ``keys:assembly/TypeName`` row of a cmdlet index."""

    keys: str
    assembly: str
    type_name: str

    @classmethod
    def parse(cls, line: str) -> Optional["IndexEntry"]:
        keys, sep, target = line.strip().partition(INDEX_VALUE_SEPARATOR)
        if not sep:
            return None
        assembly, sep, type_name = target.partition(INDEX_TYPE_SEPARATOR)
        keys, assembly, type_name = keys.strip(), assembly.strip(), type_name.strip()
        if not (sep and keys and assembly and type_name):
            return None
        return cls(keys=keys, assembly=assembly, type_name=type_name)


@dataclass(frozen=True)
class LocalPackage:
    """A package directory holding an ``_indexes`` folder under the packages root."""

    name: str
    path: Path

    @property
    def index_path(self) -> Path:
        return self.path / INDEX_FOLDER / CMDLETS_INDEX_FILE

    @property
    def content_dir(self) -> Path:
        return self.path / "content"

    @property
    def lib_dir(self) -> Path:
        return self.path / "lib"

    def entries(self) -> List[IndexEntry]:
        if not self.index_path.is_file():
            return []
        entries: List[IndexEntry] = []
        lines = self.index_path.read_text(encoding="utf-8").splitlines()
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            entry = IndexEntry.parse(line)
            if entry is None:
                logger.warning(
                    "Skipping malformed index entry %s:%d: %r", self.index_path, number, line
                )
                continue
            entries.append(entry)
        return entries

    def find_assembly(self, assembly: str) -> Optional[Path]:
        if not self.lib_dir.is_dir():
            return None
        for candidate in sorted(self.lib_dir.rglob(assembly)):
            if candidate.is_file():
                return candidate
        return None


@dataclass(frozen=True)
class InstalledCmdlet:
    """A resolved command: its keys, implementing class and documentation root."""

    keys: str
    command_name: str
    assembly: str
    type: type
    package_name: str
    content_dir: Path

    @property
    def identity(self) -> CommandIdentity:
        return CommandIdentity(name=self.command_name, keys=self.keys)


def iter_packages(root: Path) -> Iterator[LocalPackage]:
    """Yield every package below ``root`` that carries an index folder."""
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Packages root not found: {root}")
    for index_dir in sorted(root.rglob(INDEX_FOLDER)):
        if not index_dir.is_dir():
            continue
        package_dir = index_dir.parent
        yield LocalPackage(name=package_dir.parent.name, path=package_dir)


def command_name_for(cmdlet_type: type) -> str:
    attribute = get_cmdlet_attribute(cmdlet_type)
    if attribute is None:
        raise UnresolvableCommandError(
            f"{cmdlet_type.__qualname__} is not tagged with @cmdlet(verb, noun)"
        )
    return attribute.command_name


def load_cmdlet_type(path: Path, type_name: str) -> type:
    """Import the plugin module at ``path`` and return the class ``type_name``."""
    module = _load_module(path)
    value = getattr(module, type_name, None)
    if not isinstance(value, type):
        raise UnresolvableCommandError(f"Type '{type_name}' not found in {path}")
    return value


def resolve_entry(package: LocalPackage, entry: IndexEntry) -> Optional[InstalledCmdlet]:
    """Resolve an index row, or return None when its assembly is not installed."""
    assembly_path = package.find_assembly(entry.assembly)
    if assembly_path is None:
        logger.warning(
            "Assembly %s for '%s' not found under %s", entry.assembly, entry.keys, package.lib_dir
        )
        return None
    cmdlet_type = load_cmdlet_type(assembly_path, entry.type_name)
    return InstalledCmdlet(
        keys=entry.keys,
        command_name=command_name_for(cmdlet_type),
        assembly=entry.assembly,
        type=cmdlet_type,
        package_name=package.name,
        content_dir=package.content_dir,
    )


def discover_cmdlets(root: Path) -> Iterator[InstalledCmdlet]:
    """Yield every resolvable cmdlet installed below ``root``."""
    for package in iter_packages(root):
        for entry in package.entries():
            cmdlet = resolve_entry(package, entry)
            if cmdlet is not None:
                yield cmdlet


def find_cmdlet(
    root: Path, keys: str, separator: str = INDEX_WORD_SEPARATOR
) -> InstalledCmdlet:
    """Return the one cmdlet registered under ``keys``.

    ``keys`` may use ``separator`` or whitespace between words.
    """
    wanted = _normalise_keys(keys, separator)
    matches: List[tuple[LocalPackage, IndexEntry]] = []
    for package in iter_packages(root):
        for entry in package.entries():
            if _normalise_keys(entry.keys, separator) == wanted:
                matches.append((package, entry))

    if not matches:
        raise UnresolvableCommandError(f"No command registered for '{keys}'")
    if len(matches) > 1:
        packages = ", ".join(sorted(package.name for package, _ in matches))
        raise UnresolvableCommandError(f"Command '{keys}' is ambiguous across packages: {packages}")

    package, entry = matches[0]
    cmdlet = resolve_entry(package, entry)
    if cmdlet is None:
        raise UnresolvableCommandError(f"Assembly {entry.assembly} for '{keys}' is not installed")
    return cmdlet


def _normalise_keys(keys: str, separator: str) -> str:
    pattern = f"(?:{re.escape(separator)}|\\s)+"
    words = [word.lower() for word in re.split(pattern, keys) if word]
    return separator.join(words)


def _load_module(path: Path) -> ModuleType:
    path = path.resolve()
    cached = _LOADED_MODULES.get(path)
    if cached is not None:
        return cached
    module_name = "helpgen_plugin_" + re.sub(r"\W", "_", path.with_suffix("").as_posix())
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise UnresolvableCommandError(f"Cannot import plugin module {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        raise
    _LOADED_MODULES[path] = module
    logger.debug("Loaded plugin module %s", path)
    return module


__all__ = [
    "CMDLETS_INDEX_FILE",
    "INDEX_FOLDER",
    "IndexEntry",
    "InstalledCmdlet",
    "LocalPackage",
    "command_name_for",
    "discover_cmdlets",
    "find_cmdlet",
    "iter_packages",
    "load_cmdlet_type",
    "resolve_entry",
]
