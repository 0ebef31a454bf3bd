"""Core module exports."""

from inlinetypes.core.errors import (
    ConfigError,
    ErrorCode,
    InlineTypesError,
    InternalError,
    ParseError,
    RewriteError,
)
from inlinetypes.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from inlinetypes.core.progress import pluralize, progress

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InlineTypesError",
    "InternalError",
    "ParseError",
    "RewriteError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Output
    "pluralize",
    "progress",
]
