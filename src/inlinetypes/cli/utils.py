"""CLI utilities."""

from pathlib import Path

import click

from inlinetypes.config.loader import load_config
from inlinetypes.config.models import InlineTypesConfig
from inlinetypes.core.errors import ConfigError
from inlinetypes.lint.models import LintResult

EXIT_CLEAN = 0
EXIT_PROBLEMS = 1
EXIT_ERROR = 2


def load_cli_config(config_path: Path | None) -> InlineTypesConfig:
    """Load configuration, turning ConfigError into a click usage error."""
    try:
        return load_config(Path.cwd(), config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(e.message) from e


def exit_code(result: LintResult) -> int:
    """2 if any file errored, 1 if problems remain, else 0."""
    if result.has_errors:
        return EXIT_ERROR
    if result.total_diagnostics:
        return EXIT_PROBLEMS
    return EXIT_CLEAN
