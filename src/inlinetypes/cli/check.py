"""inlinetypes check command - report single-use parameter types."""

from pathlib import Path

import click

from inlinetypes.cli.output import echo_json, render
from inlinetypes.cli.utils import exit_code
from inlinetypes.lint.ops import LintOps


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def check_command(ctx: click.Context, paths: tuple[Path, ...], as_json: bool) -> None:
    """Report type declarations used once as a function parameter type.

    PATHS are files or directories (default: current directory).
    """
    ops = LintOps(ctx.obj["config"].scan)
    result = ops.check(list(paths) or [Path(".")])

    if as_json:
        echo_json(result)
    else:
        render(result)
    ctx.exit(exit_code(result))
