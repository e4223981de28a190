"""User-supplied launch override entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

RESERVED_KEYS = frozenset(
    {
        "name",
        "type",
        "request",
        "projectName",
        "mainClass",
        "cwd",
        "workingDirectory",
        "classPaths",
        "modulePaths",
        "args",
        "vmargs",
        "vmArgs",
    }
)


@dataclass(frozen=True)
class OverrideConfig:  # pylint: disable=too-many-instance-attributes
    """Partial launch configuration supplied by the user.

    Recognized keys are kept as given, without validation. Every key outside
    RESERVED_KEYS lands in ``extras`` and is passed through to the launch
    descriptor verbatim. Reserved keys that have no field here (``name``,
    ``type``, ``request``, ``projectName``, ``mainClass``) are dropped.
    """

    working_directory: Any = None
    cwd: Any = None
    class_paths: Any = None
    module_paths: Any = None
    args: Any = None
    vm_args: Any = None
    vmargs: Any = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> OverrideConfig:
        return OverrideConfig(
            working_directory=raw.get("workingDirectory"),
            cwd=raw.get("cwd"),
            class_paths=raw.get("classPaths"),
            module_paths=raw.get("modulePaths"),
            args=raw.get("args"),
            vm_args=raw.get("vmArgs"),
            vmargs=raw.get("vmargs"),
            extras={key: value for key, value in raw.items() if key not in RESERVED_KEYS},
        )


@dataclass(frozen=True)
class NormalizedOverride:
    """Override with the alternate spellings collapsed to one value each."""

    working_directory: str | None
    class_paths: tuple[Any, ...]
    module_paths: tuple[Any, ...] | None
    vm_args: tuple[Any, ...]
    extras: Mapping[str, Any]


def normalize_override(override: OverrideConfig | None) -> NormalizedOverride:
    """Collapse the two accepted spellings of working directory and VM arguments.

    Precedence:
      * working directory: ``workingDirectory`` then ``cwd``; empty values count as absent.
      * VM arguments: ``vmArgs`` when present (even empty), otherwise ``vmargs``.
        The other spelling is ignored entirely when both are given.

    Falsy VM argument entries are dropped. An empty ``modulePaths`` list is a
    real value and still replaces the baseline module path.
    """
    if override is None:
        return NormalizedOverride(
            working_directory=None,
            class_paths=(),
            module_paths=None,
            vm_args=(),
            extras={},
        )
    working_directory = override.working_directory or override.cwd or None
    raw_vm_args = override.vm_args if override.vm_args is not None else override.vmargs
    return NormalizedOverride(
        working_directory=working_directory,
        class_paths=tuple(override.class_paths or ()),
        module_paths=tuple(override.module_paths) if override.module_paths is not None else None,
        vm_args=tuple(entry for entry in raw_vm_args or () if entry),
        extras=dict(override.extras),
    )
