"""Rendering of lint results for the terminal and for JSON consumers."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape

from inlinetypes.core.progress import pluralize
from inlinetypes.lint.models import LintResult

_stdout = Console(highlight=False, soft_wrap=True)


def echo_json(result: LintResult) -> None:
    click.echo(json.dumps(result.to_dict(), indent=2))


def render(result: LintResult) -> None:
    """Print ``path:line:col  message  rule`` lines and a one-line summary."""
    for file in result.files:
        if file.status == "error":
            _stdout.print(f"[red]{escape(file.path)}[/red]: {escape(file.error_detail or '')}")
            continue
        if file.diff:
            _stdout.out(file.diff, end="")
        for diag in file.diagnostics:
            fix_hint = "" if diag.fixable else " [dim](no automatic fix)[/dim]"
            _stdout.print(
                f"{escape(diag.path)}:{diag.line}:{diag.column + 1}  "
                f"[yellow]{diag.severity.value}[/yellow]  {escape(diag.message)}  "
                f"[dim]{diag.code}[/dim]{fix_hint}"
            )
    _stdout.print(summary_line(result))


def summary_line(result: LintResult) -> str:
    parts = [pluralize(len(result.files), "file") + " checked"]
    if result.action == "fix":
        verb = "would apply" if result.dry_run else "applied"
        applied = pluralize(result.total_fixes_applied, "fix", "fixes")
        parts.append(f"{verb} {applied} in {pluralize(result.files_modified, 'file')}")
    problems = pluralize(result.total_diagnostics, "problem")
    if result.total_diagnostics:
        problems += f" ({result.total_fixable} fixable)"
    parts.append(problems)
    errors = sum(1 for f in result.files if f.status == "error")
    if errors:
        parts.append(pluralize(errors, "error"))
    return ", ".join(parts)
