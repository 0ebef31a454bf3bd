"""Lint operations - check and fix TypeScript sources."""

from __future__ import annotations

import difflib
import time
from dataclasses import dataclass
from pathlib import Path

from inlinetypes.config.models import ScanConfig
from inlinetypes.core.errors import InlineTypesError, InternalError
from inlinetypes.core.logging import get_logger
from inlinetypes.core.progress import progress
from inlinetypes.lint.discovery import discover_files
from inlinetypes.lint.models import FileResult, LintResult
from inlinetypes.parsing.treesitter import SourceFile, SourceRange, TreeSitterParser
from inlinetypes.rule.engine import analyze
from inlinetypes.rule.models import Diagnostic, TextEdit
from inlinetypes.rule.rewrite import apply_edits

log = get_logger("lint.ops")


@dataclass
class FixOutcome:
    """Text after repeated fix passes, with what remains to report."""

    text: str
    fixes_applied: int
    passes: int
    remaining: list[Diagnostic]
    syntax_errors: int


def select_fixes(diagnostics: list[Diagnostic]) -> list[tuple[TextEdit, ...]]:
    """Fixes that can be applied together: no edit overlaps an accepted edit.

    Conflicting fixes are left for the next pass, where they are recomputed
    against the updated text.
    """
    taken: list[SourceRange] = []
    accepted: list[tuple[TextEdit, ...]] = []
    for diagnostic in diagnostics:
        if diagnostic.fix is None:
            continue
        ranges = [edit.range for edit in diagnostic.fix]
        if any(r.overlaps(t) for r in ranges for t in taken):
            continue
        taken.extend(ranges)
        accepted.append(diagnostic.fix)
    return accepted


class LintOps:
    """Check and fix operations over files and directories.

    Each file is parsed and analyzed independently; a failure in one file is
    recorded on its FileResult and never stops the run.
    """

    def __init__(
        self, config: ScanConfig | None = None, parser: TreeSitterParser | None = None
    ) -> None:
        self._config = config or ScanConfig()
        self._parser = parser or TreeSitterParser()

    def check(self, paths: list[Path]) -> LintResult:
        """Report diagnostics without touching any file."""
        start_time = time.time()
        files = discover_files(paths, self._config)
        results = [self.check_file(path) for path in progress(files, desc="Checking")]
        return LintResult(
            action="check", files=results, duration_seconds=time.time() - start_time
        )

    def fix(self, paths: list[Path], *, dry_run: bool = False) -> LintResult:
        """Apply fixes in place, or produce diffs when *dry_run*."""
        start_time = time.time()
        files = discover_files(paths, self._config)
        results = [
            self.fix_file(path, dry_run=dry_run) for path in progress(files, desc="Fixing")
        ]
        return LintResult(
            action="fix",
            dry_run=dry_run,
            files=results,
            duration_seconds=time.time() - start_time,
        )

    def check_file(self, path: Path) -> FileResult:
        try:
            source = self._parser.parse(path)
        except InlineTypesError as e:
            log.warning("file_parse_failed", path=str(path), error=e.error_name)
            return FileResult(path=str(path), status="error", error_detail=e.message)

        if source.error_count:
            log.info("file_has_syntax_errors", path=str(path), errors=source.error_count)
        diagnostics = analyze(source)
        return FileResult(
            path=str(path),
            status="dirty" if diagnostics else "clean",
            diagnostics=diagnostics,
            syntax_errors=source.error_count,
        )

    def fix_file(self, path: Path, *, dry_run: bool = False) -> FileResult:
        try:
            source = self._parser.parse(path)
            outcome = self.fix_source(source)
        except InlineTypesError as e:
            log.warning("file_fix_failed", path=str(path), error=e.error_name)
            return FileResult(path=str(path), status="error", error_detail=e.message)

        diff: str | None = None
        if outcome.fixes_applied:
            if dry_run:
                diff = _unified_diff(str(path), source.text, outcome.text)
            else:
                # newline="" keeps the file's own line terminators
                path.write_text(outcome.text, encoding="utf-8", newline="")
                log.info("file_fixed", path=str(path), fixes=outcome.fixes_applied)

        if outcome.remaining:
            status = "dirty"
        elif outcome.fixes_applied:
            status = "fixed"
        else:
            status = "clean"
        return FileResult(
            path=str(path),
            status=status,
            diagnostics=outcome.remaining,
            fixes_applied=outcome.fixes_applied,
            fix_passes=outcome.passes,
            syntax_errors=outcome.syntax_errors,
            diff=diff,
        )

    def fix_source(self, source: SourceFile) -> FixOutcome:
        """Analyze, apply every compatible fix, and repeat until stable.

        Stops when a pass applies nothing or after ``max_fix_passes`` passes;
        ``remaining`` holds the diagnostics of the final text.

        Raises:
            InternalError: If a pass leaves more syntax errors than it started with.
        """
        text = source.text
        fixes_applied = 0
        passes = 0
        diagnostics = analyze(source)

        while passes < self._config.max_fix_passes:
            fixes = select_fixes(diagnostics)
            if not fixes:
                break
            text = apply_edits(text, [edit for fix in fixes for edit in fix])
            fixes_applied += len(fixes)
            passes += 1
            log.debug("fix_pass_done", path=source.path, pass_number=passes, fixes=len(fixes))
            baseline = source.error_count
            source = self._parser.parse_text(text, language=source.language, path=source.path)
            if source.error_count > baseline:
                raise InternalError.unexpected(
                    "fix introduced syntax errors",
                    path=source.path,
                    pass_number=passes,
                    errors=source.error_count,
                )
            diagnostics = analyze(source)

        return FixOutcome(
            text=text,
            fixes_applied=fixes_applied,
            passes=passes,
            remaining=diagnostics,
            syntax_errors=source.error_count,
        )


def _unified_diff(path: str, before: str, after: str) -> str:
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )
