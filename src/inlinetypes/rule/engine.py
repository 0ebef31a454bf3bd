"""Rule entry point: syntax tree in, diagnostics out.

Each call analyzes one file from scratch; nothing is shared between calls
except the (stateless) default parser used by ``analyze_text``.
"""

from __future__ import annotations

from functools import cache

from inlinetypes.core.logging import get_logger
from inlinetypes.parsing.treesitter import SourceFile, TreeSitterParser
from inlinetypes.rule.eligibility import classify
from inlinetypes.rule.models import MESSAGE_TEMPLATE, Diagnostic, EligibilityResult, TextEdit
from inlinetypes.rule.rewrite import compute_fix
from inlinetypes.rule.usage import collect_usage

log = get_logger("rule.engine")


def analyze(source: SourceFile) -> list[Diagnostic]:
    """Report every single-use type declaration inlinable into a parameter."""
    index = collect_usage(source)
    diagnostics = [
        _report(source, result, compute_fix(source, result)) for result in classify(index)
    ]
    log.debug(
        "file_analyzed",
        path=source.path,
        declarations=len(index.declarations),
        diagnostics=len(diagnostics),
    )
    return diagnostics


def analyze_text(text: str, *, language: str = "typescript") -> list[Diagnostic]:
    """Parse and analyze in-memory source text."""
    return analyze(_default_parser().parse_text(text, language=language))


@cache
def _default_parser() -> TreeSitterParser:
    return TreeSitterParser()


def _report(
    source: SourceFile, result: EligibilityResult, fix: tuple[TextEdit, ...] | None
) -> Diagnostic:
    declaration = result.declaration
    line, column = source.position(declaration.source_range.start)
    return Diagnostic(
        path=source.path,
        name=declaration.name,
        location=declaration.source_range,
        line=line,
        column=column,
        message=MESSAGE_TEMPLATE.format(name=declaration.name),
        fix=fix,
    )
