"""Run request entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExecutionKind(str, Enum):
    """Test framework that produced a run request."""

    JUNIT = "JUnit"
    JUNIT5 = "JUnit5"
    TESTNG = "TestNG"

    @property
    def is_alternate_framework(self) -> bool:
        return self is ExecutionKind.TESTNG

    @property
    def supports_range_filtering(self) -> bool:
        return self is ExecutionKind.JUNIT5


class ExecutionScope(str, Enum):
    """How much of the project a run request covers."""

    ROOT = "root"
    CLASS = "class"
    METHOD = "method"


@dataclass(frozen=True)
class SourcePosition:
    """Zero-based line/character position in a source file."""

    line: int
    character: int


@dataclass(frozen=True)
class SourceRange:
    """Start and end positions of a test declaration."""

    start: SourcePosition
    end: SourcePosition


@dataclass(frozen=True)
class RunRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract describing what to run and how."""

    full_name: str
    test_uri: str
    project_name: str
    kind: ExecutionKind
    scope: ExecutionScope
    location: SourceRange | None = None
    is_debug: bool = False
    is_hierarchical_package: bool = False

    @property
    def class_name(self) -> str:
        return self.full_name.split("#")[0]

    @property
    def method_name(self) -> str:
        parts = self.full_name.split("#")
        return parts[1] if len(parts) > 1 else ""
