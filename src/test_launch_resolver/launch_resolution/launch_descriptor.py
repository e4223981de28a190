"""Launch descriptor entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEBUGGER_TYPE = "java"
REQUEST_KIND = "launch"


@dataclass(frozen=True)
class LaunchDescriptor:  # pylint: disable=too-many-instance-attributes
    """Fully resolved configuration handed to the debugger front end."""

    name: str
    project_name: str
    main_class: str
    cwd: str
    class_paths: tuple[str, ...]
    module_paths: tuple[str, ...]
    args: tuple[str, ...]
    vm_args: tuple[str, ...]
    no_debug: bool
    extras: Mapping[str, Any] = field(default_factory=dict)
    type: str = DEBUGGER_TYPE
    request: str = REQUEST_KIND

    def to_mapping(self) -> dict[str, Any]:
        """Render the wire form; pass-through keys overwrite computed ones except noDebug."""
        mapping: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "request": self.request,
            "projectName": self.project_name,
            "mainClass": self.main_class,
            "cwd": self.cwd,
            "classPaths": list(self.class_paths),
            "modulePaths": list(self.module_paths),
            "args": list(self.args),
            "vmArgs": list(self.vm_args),
        }
        mapping.update(self.extras)
        mapping["noDebug"] = self.no_debug
        return mapping
