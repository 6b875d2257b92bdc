"""Authored documentation sources."""

from __future__ import annotations

from .base import DocumentationError, DocumentationProvider
from .maml import MamlDocumentationProvider, help_file_path, parse_maml

__all__ = [
    "DocumentationError",
    "DocumentationProvider",
    "MamlDocumentationProvider",
    "help_file_path",
    "parse_maml",
]
