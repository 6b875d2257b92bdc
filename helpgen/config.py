"""Configuration loading for helpgen (.helpgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .formatters import FORMATTERS
from .merge import DEFAULT_KEY_SEPARATOR, DEFAULT_PROGRAM_NAME

CONFIG_FILE_NAME = ".helpgen.yml"
DEFAULT_OUTPUT_DIR = "help"
DEFAULT_SYNTAX = "unix"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class HelpGenConfig:
    """Represents the settings defined in .helpgen.yml."""

    root: Path
    packages_root: Optional[Path] = None
    output_dir: Optional[Path] = None
    syntax: str = DEFAULT_SYNTAX
    program_name: str = DEFAULT_PROGRAM_NAME
    key_separator: str = DEFAULT_KEY_SEPARATOR

    def resolved_output_dir(self) -> Path:
        return self.output_dir or self.root / DEFAULT_OUTPUT_DIR


def load_config(config_path: Path) -> HelpGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HelpGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    syntax = _as_str(data.get("syntax")) or DEFAULT_SYNTAX
    if syntax.lower() not in FORMATTERS:
        raise ConfigError(f"Unsupported syntax style '{syntax}' in {CONFIG_FILE_NAME}")

    program_name = _as_str(data.get("program_name"))
    key_separator = _as_str(data.get("key_separator"))

    return HelpGenConfig(
        root=root,
        packages_root=_as_path(root, data.get("packages_root")),
        output_dir=_as_path(root, data.get("output_dir")),
        syntax=syntax.lower(),
        program_name=DEFAULT_PROGRAM_NAME if program_name is None else program_name,
        key_separator=key_separator or DEFAULT_KEY_SEPARATOR,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else (root / path).resolve()


__all__ = ["ConfigError", "HelpGenConfig", "load_config"]
