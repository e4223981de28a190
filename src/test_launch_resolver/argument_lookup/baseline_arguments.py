"""Baseline launch argument entities and lookup contract."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from test_launch_resolver.run_requests.request_models import (
    ExecutionKind,
    ExecutionScope,
    SourcePosition,
)


class ResolutionError(Exception):
    """Raised when baseline launch arguments cannot be resolved for a target."""


@dataclass(frozen=True)
class BaselineArguments:  # pylint: disable=too-many-instance-attributes
    """Canonical launch arguments for a target before overrides are applied."""

    project_name: str
    main_class: str
    working_directory: str
    classpath: tuple[str, ...] = ()
    modulepath: tuple[str, ...] = ()
    program_arguments: tuple[str, ...] = ()
    vm_arguments: tuple[str, ...] = ()

    @staticmethod
    def from_mapping(document: Mapping[str, Any]) -> BaselineArguments:
        """Build baseline arguments from the camelCase wire representation."""
        return BaselineArguments(
            project_name=str(document.get("projectName", "")),
            main_class=str(document.get("mainClass", "")),
            working_directory=str(document.get("workingDirectory", "")),
            classpath=tuple(document.get("classpath") or ()),
            modulepath=tuple(document.get("modulepath") or ()),
            program_arguments=tuple(document.get("programArguments") or ()),
            vm_arguments=tuple(document.get("vmArguments") or ()),
        )


@dataclass(frozen=True)
class ArgumentQuery:  # pylint: disable=too-many-instance-attributes
    """Key of a per-target baseline argument lookup."""

    test_uri: str
    class_name: str
    method_name: str
    project_name: str
    scope: ExecutionScope
    kind: ExecutionKind
    start: SourcePosition | None = None
    end: SourcePosition | None = None
    is_hierarchical_package: bool = False


class ArgumentLookup(Protocol):
    """Protocol for services resolving baseline launch arguments."""

    def lookup_execution_arguments(self, query: ArgumentQuery) -> BaselineArguments: ...

    def lookup_alternate_framework_arguments(self, project_name: str) -> BaselineArguments: ...
