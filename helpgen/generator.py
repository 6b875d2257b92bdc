"""Pipeline orchestration: documentation + metadata -> merged model -> help files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

from .config import HelpGenConfig
from .discovery import INDEX_WORD_SEPARATOR, InstalledCmdlet, discover_cmdlets, find_cmdlet
from .documentation import DocumentationProvider, MamlDocumentationProvider
from .formatters import ParameterNameFormatter, get_formatter
from .logging import get_logger
from .merge import HelpMerger
from .metadata import TypeMetadata, TypeMetadataProvider
from .render import HelpRenderer

logger = get_logger("generator")

HELP_FILE_SUFFIX = ".hlp"

MetadataFactory = Callable[[type], TypeMetadataProvider]


def _default_metadata(cmdlet_type: type) -> TypeMetadataProvider:
    return TypeMetadata(cmdlet_type).load()


@dataclass
class GenerationReport:
    """Files written and skipped during a generation run."""

    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


class HelpGenerator:
    """Coordinates help generation for one command or a whole packages root."""

    def __init__(
        self,
        formatter: ParameterNameFormatter | None = None,
        *,
        merger: HelpMerger | None = None,
        renderer: HelpRenderer | None = None,
        documentation: DocumentationProvider | None = None,
        metadata_factory: MetadataFactory | None = None,
    ) -> None:
        self.formatter = formatter or get_formatter("unix")
        self.merger = merger or HelpMerger()
        self.renderer = renderer or HelpRenderer()
        self.documentation = documentation or MamlDocumentationProvider()
        self.metadata_factory = metadata_factory or _default_metadata

    @classmethod
    def from_config(cls, config: HelpGenConfig) -> "HelpGenerator":
        return cls(
            get_formatter(config.syntax),
            merger=HelpMerger(
                program_name=config.program_name, key_separator=config.key_separator
            ),
        )

    def generate(self, cmdlet: InstalledCmdlet) -> List[str]:
        """Return the help lines for a single command."""
        logger.debug("Generating help for %s (%s)", cmdlet.command_name, cmdlet.keys)
        doc = self.documentation.lookup(cmdlet.content_dir, cmdlet.assembly, cmdlet.command_name)
        metadata = self.metadata_factory(cmdlet.type)
        model = self.merger.merge(cmdlet.identity, doc, metadata)
        return self.renderer.render(self.formatter, model)

    def generate_for_keys(self, packages_root: Path, keys: str) -> List[str]:
        return self.generate(find_cmdlet(packages_root, keys, self.merger.key_separator))

    def run(self, packages_root: Path, output_dir: Path) -> GenerationReport:
        """Write a help file for every installed command, leaving existing files alone."""
        report = GenerationReport()
        for cmdlet in discover_cmdlets(packages_root):
            target = help_file_for(output_dir, cmdlet, self.merger.key_separator)
            if target.exists():
                logger.info("File %s already exists - skipping", target)
                report.skipped.append(target)
                continue
            lines = self.generate(cmdlet)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("\n".join(lines) + "\n", encoding="utf-8")
            logger.info("Wrote %s", target)
            report.written.append(target)
        return report


def help_file_for(
    output_dir: Path, cmdlet: InstalledCmdlet, separator: str = INDEX_WORD_SEPARATOR
) -> Path:
    file_name = cmdlet.keys.replace(separator, ".") + HELP_FILE_SUFFIX
    return Path(output_dir) / cmdlet.package_name / file_name


__all__ = ["GenerationReport", "HelpGenerator", "help_file_for"]
