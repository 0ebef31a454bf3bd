"""Tree-sitter parsing for TypeScript sources."""

from inlinetypes.parsing.treesitter import SourceFile, SourceRange, TreeSitterParser

__all__ = [
    "SourceFile",
    "SourceRange",
    "TreeSitterParser",
]
