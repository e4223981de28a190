"""Launch override exports."""

from .override_models import (
    RESERVED_KEYS,
    NormalizedOverride,
    OverrideConfig,
    normalize_override,
)
from .override_reader import OverrideLoadError, load_override_config

__all__ = [
    "RESERVED_KEYS",
    "NormalizedOverride",
    "OverrideConfig",
    "normalize_override",
    "OverrideLoadError",
    "load_override_config",
]
