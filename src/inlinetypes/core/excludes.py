"""Directory and file exclusion for source discovery.

Tier 0 (HARDCODED_DIRS): Never traversed, not user-configurable.
Tier 1 (DEFAULT_PRUNABLE_DIRS): Dependencies, caches and build outputs.
    Skipped unless the user passes the directory explicitly.
"""

from __future__ import annotations

import fnmatch
from pathlib import PurePath

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
    )
)

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # -------------------------------------------------------------------------
        # JavaScript/Node.js ecosystem
        # -------------------------------------------------------------------------
        "node_modules",
        ".npm",
        ".yarn",
        ".pnpm-store",
        "bower_components",
        ".next",  # Next.js build
        ".nuxt",  # Nuxt.js build
        ".turbo",  # Turborepo cache
        ".svelte-kit",
        # -------------------------------------------------------------------------
        # Build outputs
        # -------------------------------------------------------------------------
        "dist",
        "build",
        "out",
        "coverage",
        # -------------------------------------------------------------------------
        # Editors and misc caches
        # -------------------------------------------------------------------------
        ".idea",
        ".vscode",
        ".cache",
        "vendor",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is hardcoded (never traversable, not overridable)."""
    return dirname in HARDCODED_DIRS


def is_prunable_dir(dirname: str) -> bool:
    """Check if directory is skipped during discovery."""
    return dirname in PRUNABLE_DIRS


def matches_any_glob(path: PurePath, patterns: list[str]) -> bool:
    """True if the posix form of *path*, or its name, matches one of *patterns*."""
    posix = path.as_posix()
    return any(
        fnmatch.fnmatch(posix, pattern) or fnmatch.fnmatch(path.name, pattern)
        for pattern in patterns
    )
