"""Source file discovery."""

from __future__ import annotations

import os
from pathlib import Path

from inlinetypes.config.models import ScanConfig
from inlinetypes.core.excludes import is_hardcoded_dir, is_prunable_dir, matches_any_glob
from inlinetypes.core.logging import get_logger

log = get_logger("lint.discovery")

_DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")


def is_declaration_file(path: Path) -> bool:
    return path.name.lower().endswith(_DECLARATION_SUFFIXES)


def _wanted(path: Path, config: ScanConfig, *, explicit: bool) -> bool:
    if path.suffix.lower() not in config.extensions:
        return False
    if is_declaration_file(path) and not config.include_declaration_files:
        return False
    if not explicit and matches_any_glob(path, config.exclude):
        return False
    try:
        size_kb = path.stat().st_size / 1024
    except OSError:
        # Unreadable files are reported by the analysis step
        return True
    if size_kb > config.max_file_size_kb:
        log.info("file_skipped_too_large", path=str(path), size_kb=round(size_kb))
        return False
    return True


def discover_files(paths: list[Path], config: ScanConfig) -> list[Path]:
    """Expand *paths* into the sorted, de-duplicated list of files to analyze.

    Files named explicitly are taken as-is (extension permitting); directories
    are walked with VCS, dependency and build directories pruned.
    """
    found: set[Path] = set()
    for root in paths:
        if root.is_file():
            if _wanted(root, config, explicit=True):
                found.add(root)
            continue
        if not root.is_dir():
            log.warning("path_not_found", path=str(root))
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            base = Path(dirpath)
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not is_hardcoded_dir(d)
                and not is_prunable_dir(d)
                and not matches_any_glob(base / d, config.exclude)
            )
            for filename in filenames:
                path = base / filename
                if _wanted(path, config, explicit=False):
                    found.add(path)
    return sorted(found)
