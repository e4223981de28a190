"""Baseline argument lookup exports."""

from .baseline_arguments import ArgumentLookup, ArgumentQuery, BaselineArguments, ResolutionError
from .document_lookup import DocumentArgumentLookup

__all__ = [
    "ArgumentLookup",
    "ArgumentQuery",
    "BaselineArguments",
    "ResolutionError",
    "DocumentArgumentLookup",
]
