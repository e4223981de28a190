"""Test runner exports."""

from .bundled_runner import BundledTestRunner
from .runner_contracts import ArtifactLookupError, TestRunner

__all__ = ["ArtifactLookupError", "BundledTestRunner", "TestRunner"]
