"""Override document reader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from .override_models import OverrideConfig


class OverrideLoadError(Exception):
    """Raised when an override document cannot be read."""


def load_override_config(override_path: Path | str) -> OverrideConfig:
    """Read a YAML/JSON override document; an empty document yields an empty override."""
    path = Path(override_path)
    if not path.exists():
        raise OverrideLoadError(f"Override file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OverrideLoadError(f"Failed to read override file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OverrideLoadError(f"Failed to parse override file: {exc}") from exc
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise OverrideLoadError("Override root must be a mapping.")
    return OverrideConfig.from_mapping(parsed)
