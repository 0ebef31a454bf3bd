"""inlinetypes fix command - inline single-use parameter types in place."""

from pathlib import Path

import click

from inlinetypes.cli.output import echo_json, render
from inlinetypes.cli.utils import exit_code
from inlinetypes.lint.ops import LintOps


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--dry-run", is_flag=True, help="Print diffs instead of writing files")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def fix_command(ctx: click.Context, paths: tuple[Path, ...], dry_run: bool, as_json: bool) -> None:
    """Inline single-use parameter types and delete their declarations.

    PATHS are files or directories (default: current directory). Problems
    without an automatic fix are reported and make the exit code non-zero.
    """
    ops = LintOps(ctx.obj["config"].scan)
    result = ops.fix(list(paths) or [Path(".")], dry_run=dry_run)

    if as_json:
        echo_json(result)
    else:
        render(result)
    ctx.exit(exit_code(result))
