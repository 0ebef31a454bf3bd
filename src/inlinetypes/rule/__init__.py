"""prefer-inline-type-parameters rule engine."""

from inlinetypes.rule.engine import analyze, analyze_text
from inlinetypes.rule.models import (
    RULE_ID,
    DeclarationKind,
    Diagnostic,
    EligibilityResult,
    Severity,
    TextEdit,
    TypeDeclaration,
    TypeReference,
    UsageIndex,
)
from inlinetypes.rule.rewrite import apply_edits

__all__ = [
    "RULE_ID",
    "DeclarationKind",
    "Diagnostic",
    "EligibilityResult",
    "Severity",
    "TextEdit",
    "TypeDeclaration",
    "TypeReference",
    "UsageIndex",
    "analyze",
    "analyze_text",
    "apply_edits",
]
