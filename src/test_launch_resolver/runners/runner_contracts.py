"""Test runner collaborator contract."""

from __future__ import annotations

from typing import Protocol

from test_launch_resolver.launch_overrides.override_models import OverrideConfig
from test_launch_resolver.run_requests.request_models import ExecutionKind


class ArtifactLookupError(Exception):
    """Raised when a runner archive or library path cannot be located."""


class TestRunner(Protocol):
    """Protocol for runners that launch the alternate test framework."""

    @property
    def entry_class_name(self) -> str: ...

    def archive_path(self, kind: ExecutionKind) -> str: ...

    def library_path(self, kind: ExecutionKind) -> str: ...

    def application_args(self, override: OverrideConfig | None) -> list[str]: ...
