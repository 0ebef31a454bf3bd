"""Tree-sitter parsing of TypeScript sources.

The rule engine never touches raw bytes: a ``SourceFile`` owns the tree and
the decoded text, and translates tree-sitter byte offsets into character
offsets so every range handed out can slice ``SourceFile.text`` directly.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tree_sitter

from inlinetypes.core.errors import ParseError
from inlinetypes.parsing.packs import LanguagePack, get_pack, get_pack_for_ext


@dataclass(frozen=True, slots=True, order=True)
class SourceRange:
    """Half-open ``[start, end)`` character range into a source text."""

    start: int
    end: int

    def contains(self, other: SourceRange) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: SourceRange) -> bool:
        return self.start < other.end and other.start < self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass
class SourceFile:
    """A parsed source file: tree plus the text it was parsed from."""

    path: str
    language: str
    text: str
    content: bytes  # UTF-8 encoding of text; tree offsets index into this
    tree: Any  # tree_sitter.Tree
    error_count: int = 0
    _ascii: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._ascii = len(self.content) == len(self.text)

    @property
    def root_node(self) -> Any:
        return self.tree.root_node

    def char_offset(self, byte_offset: int) -> int:
        """Translate a tree-sitter byte offset into a character offset."""
        if self._ascii:
            return byte_offset
        return len(self.content[:byte_offset].decode("utf-8"))

    def node_range(self, node: Any) -> SourceRange:
        return SourceRange(self.char_offset(node.start_byte), self.char_offset(node.end_byte))

    def node_text(self, node: Any) -> str:
        """Verbatim source text of *node*, comments and whitespace included."""
        return self.content[node.start_byte : node.end_byte].decode("utf-8")

    def position(self, offset: int) -> tuple[int, int]:
        """1-based line and 0-based column of a character offset.

        LF, CRLF and lone CR each end one line.
        """
        text = self.text
        breaks = (
            text.count("\n", 0, offset)
            + text.count("\r", 0, offset)
            - text.count("\r\n", 0, offset)
        )
        line_start = max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1
        return breaks + 1, offset - line_start


def _count_errors(root: Any) -> int:
    errors = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            errors += 1
        stack.extend(node.children)
    return errors


@dataclass
class TreeSitterParser:
    """
    Tree-sitter parser for TypeScript and TSX.

    Usage::

        parser = TreeSitterParser()
        source = parser.parse(Path("src/user.ts"))
        source = parser.parse_text("type P = { a: string };", language="typescript")
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._parser = tree_sitter.Parser()

    def _get_language(self, pack: LanguagePack) -> Any:
        """Get or load the tree-sitter Language for *pack*."""
        if pack.name in self._languages:
            return self._languages[pack.name]
        try:
            mod = importlib.import_module(pack.grammar_module)
            lang_fn = getattr(mod, pack.language_func)
        except (ImportError, AttributeError) as err:
            raise ParseError.unsupported_language(pack.grammar_package, pack.name) from err
        lang = tree_sitter.Language(lang_fn())
        self._languages[pack.name] = lang
        return lang

    @staticmethod
    def detect_language(path: Path) -> str | None:
        """Language name for *path* by extension, or None if unsupported."""
        pack = get_pack_for_ext(path.suffix.lstrip("."))
        return pack.name if pack is not None else None

    def parse(self, path: Path, content: bytes | None = None) -> SourceFile:
        """
        Parse a file with Tree-sitter.

        Args:
            path: Path to file (used for language detection)
            content: File content as bytes. If None, reads from path.

        Raises:
            ParseError: Unsupported extension, unreadable or non-UTF-8 file.
        """
        language = self.detect_language(path)
        if language is None:
            raise ParseError.unsupported_language(str(path), path.suffix)

        if content is None:
            try:
                content = path.read_bytes()
            except OSError as e:
                raise ParseError.read_error(str(path), str(e)) from e

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError.decode_error(str(path), str(e)) from e

        return self._parse(str(path), language, text)

    def parse_text(
        self, text: str, *, language: str = "typescript", path: str = "<string>"
    ) -> SourceFile:
        """Parse in-memory source text."""
        return self._parse(path, language, text)

    def _parse(self, path: str, language: str, text: str) -> SourceFile:
        pack = get_pack(language)
        if pack is None:
            raise ParseError.unsupported_language(path, language)

        self._parser.language = self._get_language(pack)
        content = text.encode("utf-8")
        tree = self._parser.parse(content)

        return SourceFile(
            path=path,
            language=language,
            text=text,
            content=content,
            tree=tree,
            error_count=_count_errors(tree.root_node),
        )
