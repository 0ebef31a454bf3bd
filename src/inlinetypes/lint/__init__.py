"""Lint module - discovery, check and fix over TypeScript sources."""

from inlinetypes.lint.discovery import discover_files
from inlinetypes.lint.models import FileResult, LintResult
from inlinetypes.lint.ops import FixOutcome, LintOps, select_fixes

__all__ = [
    "FileResult",
    "FixOutcome",
    "LintOps",
    "LintResult",
    "discover_files",
    "select_fixes",
]
