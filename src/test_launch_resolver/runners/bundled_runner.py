"""Runner shipped alongside the resolver as an archive plus library folder."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from test_launch_resolver.configuration.runtime_settings import RunnerSettings
from test_launch_resolver.launch_overrides.override_models import OverrideConfig
from test_launch_resolver.run_requests.request_models import ExecutionKind

from .runner_contracts import ArtifactLookupError


class BundledTestRunner:
    """TestNG runner resolved from a runner home directory."""

    def __init__(self, settings: RunnerSettings, test_names: Sequence[str]) -> None:
        self._settings = settings
        self._test_names = tuple(test_names)

    @property
    def entry_class_name(self) -> str:
        return self._settings.entry_class

    def archive_path(self, kind: ExecutionKind) -> str:
        return str(self._locate(kind, self._settings.archive, "archive"))

    def library_path(self, kind: ExecutionKind) -> str:
        return str(self._locate(kind, self._settings.library, "library"))

    def application_args(self, override: OverrideConfig | None) -> list[str]:
        """Runner arguments: report port, framework marker, tests, then user args."""
        arguments = [str(self._settings.port), "testng", *self._test_names]
        if override is not None and override.args:
            arguments.extend(str(argument) for argument in override.args)
        return arguments

    def _locate(self, kind: ExecutionKind, relative: str, label: str) -> Path:
        if not kind.is_alternate_framework:
            raise ArtifactLookupError(f"No runner {label} is bundled for {kind.value} tests.")
        path = self._settings.home / relative
        if not path.exists():
            raise ArtifactLookupError(f"Runner {label} not found: {path}")
        return path.resolve()
