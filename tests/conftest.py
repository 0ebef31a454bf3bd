"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from inlinetypes.parsing.treesitter import SourceFile, TreeSitterParser  # noqa: E402


@pytest.fixture(scope="session")
def parser() -> TreeSitterParser:
    """Shared TreeSitterParser instance."""
    return TreeSitterParser()


@pytest.fixture
def parse(parser: TreeSitterParser) -> Callable[..., SourceFile]:
    """Parse TypeScript text into a SourceFile."""

    def _parse(text: str, language: str = "typescript") -> SourceFile:
        return parser.parse_text(text, language=language, path="example.ts")

    return _parse


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    """Route structlog through stdlib at WARNING so debug events stay out of output."""
    from inlinetypes.core.logging import configure_logging

    configure_logging(level="WARNING")
