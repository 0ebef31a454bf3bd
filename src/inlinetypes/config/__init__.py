"""Config module exports."""

from inlinetypes.config.loader import load_config
from inlinetypes.config.models import (
    InlineTypesConfig,
    LoggingConfig,
    LogOutputConfig,
    ScanConfig,
)

__all__ = [
    "load_config",
    "InlineTypesConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ScanConfig",
]
