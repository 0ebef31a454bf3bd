"""Text-level rewrite: move a declaration's body into its single use site.

Both edits are computed against the original text by slicing source ranges,
so comments, doc annotations and line breaks inside the body survive verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from inlinetypes.core.errors import RewriteError
from inlinetypes.core.logging import get_logger
from inlinetypes.parsing.treesitter import SourceFile, SourceRange
from inlinetypes.rule.models import EligibilityResult, TextEdit

log = get_logger("rule.rewrite")


def deletion_range(text: str, statement: SourceRange) -> SourceRange:
    """*statement* extended over one trailing line terminator (LF, CRLF or CR)."""
    end = statement.end
    if text.startswith("\r\n", end):
        end += 2
    elif text.startswith(("\n", "\r"), end):
        end += 1
    return SourceRange(statement.start, end)


def compute_fix(source: SourceFile, result: EligibilityResult) -> tuple[TextEdit, ...] | None:
    """Delete the declaration and substitute its body at the annotation.

    Returns None when no safe edit exists; the caller still reports.
    """
    name = result.declaration.name
    if not result.rewritable:
        log.debug("fix_withheld", name=name, reason="nested_reference")
        return None

    body_range = result.declaration.body_range
    if body_range is None:
        log.debug("fix_withheld", name=name, reason="no_body")
        return None
    body = source.text[body_range.start : body_range.end]

    annotated = _annotation_type(result.annotation)
    if annotated is None:
        log.debug("fix_withheld", name=name, reason="no_annotation_type")
        return None
    replace = source.node_range(annotated)

    statement = result.declaration.statement_range
    if statement != result.declaration.source_range:
        # Nested in a namespace, declare block or function body: deleting the
        # program-level statement would take its other members with it
        log.debug("fix_withheld", name=name, reason="shared_statement")
        return None

    delete = deletion_range(source.text, statement)
    edits = [TextEdit(delete, ""), TextEdit(replace, body)]
    return tuple(sorted(edits, key=lambda e: e.range.start))


def _annotation_type(annotation: Any) -> Any | None:
    for child in annotation.named_children:
        if child.type != "comment":
            return child
    return None


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping *edits* to *text* in a single pass.

    Raises:
        RewriteError: If two edits overlap.
    """
    ordered = sorted(edits, key=lambda e: (e.range.start, e.range.end))
    parts: list[str] = []
    cursor = 0
    previous: TextEdit | None = None
    for edit in ordered:
        if previous is not None and edit.range.start < previous.range.end:
            raise RewriteError.overlapping_edits(previous.range.as_tuple(), edit.range.as_tuple())
        parts.append(text[cursor : edit.range.start])
        parts.append(edit.replacement)
        cursor = edit.range.end
        previous = edit
    parts.append(text[cursor:])
    return "".join(parts)
