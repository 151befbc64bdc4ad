"""Configuration loading for docresolver (.docresolver.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docresolver.yml"
JAVA_VERSION_ENV = "DOCRESOLVER_JAVA_VERSION"
DEFAULT_PREFIX = "docs"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ResolverConfig:
    """Settings defined in .docresolver.yml."""

    root: Path
    doc_jars: List[Path] = field(default_factory=list)
    prefix: str = DEFAULT_PREFIX
    java_version: Optional[str] = None


def load_config(config_path: Path) -> ResolverConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        loaded = _read_config(config_file)
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        data = loaded or {}

    prefix = _as_str(data.get("prefix")) or DEFAULT_PREFIX
    prefix = prefix.rstrip("/") or DEFAULT_PREFIX

    doc_jars = [_resolve_jar(root, jar) for jar in _as_str_list(data.get("doc_jars"))]

    java_version = os.environ.get(JAVA_VERSION_ENV) or _as_str(data.get("java_version"))

    return ResolverConfig(
        root=root,
        doc_jars=doc_jars,
        prefix=prefix,
        java_version=java_version,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(config_file: Path) -> Any:
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc


def _resolve_jar(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    raise ConfigError("doc_jars must be a list of paths")


__all__ = ["ConfigError", "ResolverConfig", "load_config"]
