"""Run request document reader."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .request_models import (
    ExecutionKind,
    ExecutionScope,
    RunRequest,
    SourcePosition,
    SourceRange,
)

_E = TypeVar("_E", bound=Enum)


class RequestValidationError(Exception):
    """Raised when a run request document is invalid."""


def read_run_request(request_path: Path | str) -> RunRequest:
    """Read a YAML/JSON run request document."""
    path = Path(request_path)
    if not path.exists():
        raise RequestValidationError(f"Run request file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RequestValidationError(f"Failed to read run request file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RequestValidationError(f"Failed to parse run request file: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise RequestValidationError("Run request root must be a mapping.")
    return parse_run_request(parsed)


def parse_run_request(document: Mapping[str, Any]) -> RunRequest:
    """Build a RunRequest from its wire representation.

    Args:
      document: Mapping using the camelCase keys produced by the test explorer.

    Returns:
      The validated run request.

    Raises:
      RequestValidationError: If a required key is missing or has the wrong type.
    """
    full_name = _require_string(document.get("fullName"), "fullName")
    project_name = _require_string(document.get("projectName"), "projectName")
    test_uri = document.get("testUri", "")
    if not isinstance(test_uri, str):
        raise RequestValidationError("testUri must be a string.")
    kind = _parse_enum(ExecutionKind, document.get("kind"), "kind")
    scope = _parse_enum(ExecutionScope, document.get("scope"), "scope")
    location = _parse_location(document.get("location"))
    return RunRequest(
        full_name=full_name,
        test_uri=test_uri,
        project_name=project_name,
        kind=kind,
        scope=scope,
        location=location,
        is_debug=_parse_flag(document.get("isDebug", False), "isDebug"),
        is_hierarchical_package=_parse_flag(
            document.get("isHierarchicalPackage", False), "isHierarchicalPackage"
        ),
    )


def _parse_enum(enum_cls: type[_E], value: Any, field_name: str) -> _E:
    if not isinstance(value, str):
        raise RequestValidationError(f"{field_name} must be a string.")
    for member in enum_cls:
        if member.value.lower() == value.strip().lower():
            return member
    allowed = ", ".join(member.value for member in enum_cls)
    raise RequestValidationError(f"{field_name} '{value}' is not one of: {allowed}.")


def _parse_location(value: Any) -> SourceRange | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise RequestValidationError("location must be a mapping.")
    return SourceRange(
        start=_parse_position(value.get("start"), "location.start"),
        end=_parse_position(value.get("end"), "location.end"),
    )


def _parse_position(value: Any, field_name: str) -> SourcePosition:
    if not isinstance(value, Mapping):
        raise RequestValidationError(f"{field_name} must be a mapping.")
    return SourcePosition(
        line=_require_non_negative_int(value.get("line"), f"{field_name}.line"),
        character=_require_non_negative_int(value.get("character", 0), f"{field_name}.character"),
    )


def _parse_flag(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise RequestValidationError(f"{field_name} must be a boolean.")
    return value


def _require_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise RequestValidationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise RequestValidationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RequestValidationError(f"{field_name} must be an integer.")
    if value < 0:
        raise RequestValidationError(f"{field_name} must not be negative.")
    return value
