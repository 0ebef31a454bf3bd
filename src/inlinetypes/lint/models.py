"""Lint models - per-file and aggregated results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from inlinetypes.rule.models import Diagnostic

FileStatus = Literal["clean", "dirty", "fixed", "error"]


@dataclass
class FileResult:
    """Result of analyzing (and possibly fixing) a single file."""

    path: str
    status: FileStatus
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixes_applied: int = 0
    fix_passes: int = 0
    syntax_errors: int = 0  # ERROR/MISSING nodes tree-sitter recovered from
    diff: str | None = None  # For dry_run mode
    error_detail: str | None = None  # If status=="error"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "fixes_applied": self.fixes_applied,
            "fix_passes": self.fix_passes,
            "syntax_errors": self.syntax_errors,
            "diff": self.diff,
            "error": self.error_detail,
        }


@dataclass
class LintResult:
    """Aggregated result over every analyzed file."""

    action: Literal["check", "fix"]
    dry_run: bool = False
    files: list[FileResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def total_diagnostics(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def total_fixable(self) -> int:
        return sum(1 for f in self.files for d in f.diagnostics if d.fixable)

    @property
    def total_fixes_applied(self) -> int:
        return sum(f.fixes_applied for f in self.files)

    @property
    def files_modified(self) -> int:
        return sum(1 for f in self.files if f.fixes_applied)

    @property
    def has_errors(self) -> bool:
        return any(f.status == "error" for f in self.files)

    @property
    def status(self) -> Literal["clean", "dirty", "error"]:
        if self.has_errors:
            return "error"
        if self.total_diagnostics:
            return "dirty"
        return "clean"

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "dry_run": self.dry_run,
            "status": self.status,
            "files_checked": len(self.files),
            "total_diagnostics": self.total_diagnostics,
            "total_fixable": self.total_fixable,
            "total_fixes_applied": self.total_fixes_applied,
            "files_modified": self.files_modified,
            "duration_seconds": round(self.duration_seconds, 3),
            "files": [f.to_dict() for f in self.files if f.status != "clean"],
        }
