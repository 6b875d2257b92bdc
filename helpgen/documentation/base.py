"""Base classes for documentation providers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..models import CommandDoc


class DocumentationError(RuntimeError):
    """Raised when a documentation source exists but cannot be parsed."""


class DocumentationProvider(ABC):
    """Contract for sources that describe commands in authored documentation."""

    @abstractmethod
    def load(self, content_root: Path, assembly: str) -> Dict[str, CommandDoc]:
        """Return every command documented for ``assembly``, keyed by lower-cased name."""

    def lookup(
        self, content_root: Path, assembly: str, command_name: str
    ) -> Optional[CommandDoc]:
        """Return the record for one command, or None when it is not documented."""
        return self.load(content_root, assembly).get(command_name.lower())
