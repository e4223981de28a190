"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_RUNNER_ARCHIVE,
    DEFAULT_RUNNER_ENTRY_CLASS,
    DEFAULT_RUNNER_LIBRARY,
    ArgumentsSettings,
    Configuration,
    RunnerSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    runner = _parse_runner_section(parsed.get("runner"), base_path)
    arguments = _parse_arguments_section(parsed.get("arguments"), base_path)
    return Configuration(path=path, runner=runner, arguments=arguments)


def _parse_runner_section(value: Any, base_path: Path) -> RunnerSettings:
    section = _require_mapping(value, "runner")
    home = _resolve_path(base_path, _require_non_empty_string(section.get("home"), "runner.home"))
    archive = _require_non_empty_string(
        section.get("archive", DEFAULT_RUNNER_ARCHIVE), "runner.archive"
    )
    library = _require_non_empty_string(
        section.get("library", DEFAULT_RUNNER_LIBRARY), "runner.library"
    )
    entry_class = _require_non_empty_string(
        section.get("entry_class", DEFAULT_RUNNER_ENTRY_CLASS), "runner.entry_class"
    )
    port = _require_non_negative_int(section.get("port", 0), "runner.port")
    return RunnerSettings(
        home=home,
        archive=archive,
        library=library,
        entry_class=entry_class,
        port=port,
    )


def _parse_arguments_section(value: Any, base_path: Path) -> ArgumentsSettings:
    section = _require_mapping(value, "arguments")
    raw_path = _require_non_empty_string(section.get("path"), "arguments.path")
    document_path = _resolve_path(base_path, raw_path)
    if not document_path.exists():
        raise ConfigurationError(f"Arguments document not found: {document_path}")
    return ArgumentsSettings(document_path=document_path)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
