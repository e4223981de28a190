"""Run request domain exports."""

from .request_models import (
    ExecutionKind,
    ExecutionScope,
    RunRequest,
    SourcePosition,
    SourceRange,
)
from .request_reader import RequestValidationError, parse_run_request, read_run_request

__all__ = [
    "ExecutionKind",
    "ExecutionScope",
    "RunRequest",
    "SourcePosition",
    "SourceRange",
    "RequestValidationError",
    "parse_run_request",
    "read_run_request",
]
