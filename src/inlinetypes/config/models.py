"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (INLINETYPES__SECTION__KEY)
3. Repo YAML (.inlinetypes.yaml)
4. Global YAML (~/.config/inlinetypes/config.yaml)
5. Built-in defaults (this file)

Examples:
    INLINETYPES__LOGGING__LEVEL=DEBUG
    INLINETYPES__SCAN__MAX_FIX_PASSES=3
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        INLINETYPES__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG prints one event per recorded declaration.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ScanConfig(BaseModel):
    """Source discovery and fix configuration.

    Env vars:
        INLINETYPES__SCAN__MAX_FILE_SIZE_KB: Skip files larger than this
        INLINETYPES__SCAN__MAX_FIX_PASSES: Upper bound on fix iterations per file
    """

    extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".mts", ".cts"],
        description="File extensions analyzed when walking directories.",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns (fnmatch) for files or directories to skip.",
    )
    include_declaration_files: bool = Field(
        default=False,
        description="Analyze .d.ts files. Off by default: they only declare types.",
    )
    max_file_size_kb: int = Field(
        default=1024,
        description="Skip files larger than this (KB).",
    )
    max_fix_passes: int = Field(
        default=10,
        description="Re-analyze and apply fixes until stable, at most this many times.",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in (e.lower() for e in v)]

    @field_validator("max_fix_passes")
    @classmethod
    def validate_passes(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_fix_passes must be >= 1, got {v}")
        return v


class InlineTypesConfig(BaseModel):
    """Root configuration for inlinetypes."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
