"""Baseline argument lookup backed by a YAML/JSON arguments document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from test_launch_resolver.run_requests.request_models import ExecutionKind, ExecutionScope

from .baseline_arguments import ArgumentQuery, BaselineArguments, ResolutionError

_LOGGER = logging.getLogger(__name__)

_SEQUENCE_KEYS = ("classpath", "modulepath", "programArguments", "vmArguments")


class DocumentArgumentLookup:
    """Serve baseline arguments per project from a pre-computed document.

    The document maps project names to their resolved launch arguments::

        projects:
          demo:
            mainClass: com.example.Launcher
            workingDirectory: /work/demo
            classpath: [...]
            modulepath: [...]
            programArguments: [...]
            vmArguments: [...]
    """

    def __init__(self, projects: Mapping[str, BaselineArguments]) -> None:
        self._projects = dict(projects)

    @classmethod
    def from_path(cls, document_path: Path | str) -> DocumentArgumentLookup:
        """Load the arguments document.

        Raises:
          ResolutionError: If the document is missing or malformed.
        """
        path = Path(document_path)
        if not path.exists():
            raise ResolutionError(f"Arguments document not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResolutionError(f"Failed to read arguments document: {exc}") from exc
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ResolutionError(f"Failed to parse arguments document: {exc}") from exc
        return cls.from_document(parsed)

    @classmethod
    def from_document(cls, document: Any) -> DocumentArgumentLookup:
        if not isinstance(document, Mapping):
            raise ResolutionError("Arguments document root must be a mapping.")
        projects = document.get("projects")
        if not isinstance(projects, Mapping):
            raise ResolutionError("Arguments document requires a 'projects' mapping.")
        resolved: dict[str, BaselineArguments] = {}
        for project_name, entry in projects.items():
            resolved[str(project_name)] = _parse_project_entry(str(project_name), entry)
        return cls(resolved)

    def lookup_execution_arguments(self, query: ArgumentQuery) -> BaselineArguments:
        if query.scope in (ExecutionScope.CLASS, ExecutionScope.METHOD) and not query.class_name:
            raise ResolutionError(f"Test target in project '{query.project_name}' has no class.")
        if query.scope is ExecutionScope.METHOD and not query.method_name:
            raise ResolutionError(f"Test target '{query.class_name}' has no method.")
        arguments = self._projects.get(query.project_name)
        if arguments is None:
            raise ResolutionError(f"Project not resolvable: {query.project_name}")
        _LOGGER.debug(
            "resolved baseline arguments for %s (%s, %s)",
            query.class_name or query.project_name,
            query.kind.value,
            query.scope.value,
        )
        return arguments

    def lookup_alternate_framework_arguments(self, project_name: str) -> BaselineArguments:
        return self.lookup_execution_arguments(
            ArgumentQuery(
                test_uri="",
                class_name="",
                method_name="",
                project_name=project_name,
                scope=ExecutionScope.ROOT,
                kind=ExecutionKind.TESTNG,
            )
        )


def _parse_project_entry(project_name: str, entry: Any) -> BaselineArguments:
    if not isinstance(entry, Mapping):
        raise ResolutionError(f"Arguments for project '{project_name}' must be a mapping.")
    if not isinstance(entry.get("mainClass"), str):
        raise ResolutionError(f"Arguments for project '{project_name}' require a mainClass.")
    for key in _SEQUENCE_KEYS:
        value = entry.get(key)
        if value is not None and not isinstance(value, list):
            raise ResolutionError(f"{project_name}.{key} must be a list.")
    return BaselineArguments.from_mapping({"projectName": project_name, **entry})
