"""inlinetypes CLI."""

from pathlib import Path

import click

from inlinetypes import __version__
from inlinetypes.cli.check import check_command
from inlinetypes.cli.fix import fix_command
from inlinetypes.cli.utils import load_cli_config
from inlinetypes.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="inlinetypes")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: ./.inlinetypes.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Inline TypeScript types that are only used by one function parameter."""
    config = load_cli_config(config_path)
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_run_id()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(check_command, name="check")
cli.add_command(fix_command, name="fix")


if __name__ == "__main__":
    cli()
