"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_RUNNER_ARCHIVE = "com.microsoft.java.test.runner-jar-with-dependencies.jar"
DEFAULT_RUNNER_LIBRARY = "lib"
DEFAULT_RUNNER_ENTRY_CLASS = "com.microsoft.java.test.runner.Launcher"


@dataclass(frozen=True)
class RunnerSettings:
    """Location and entry point of the bundled test runner."""

    home: Path
    archive: str = DEFAULT_RUNNER_ARCHIVE
    library: str = DEFAULT_RUNNER_LIBRARY
    entry_class: str = DEFAULT_RUNNER_ENTRY_CLASS
    port: int = 0


@dataclass(frozen=True)
class ArgumentsSettings:
    """Source of baseline launch arguments."""

    document_path: Path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    runner: RunnerSettings
    arguments: ArgumentsSettings
