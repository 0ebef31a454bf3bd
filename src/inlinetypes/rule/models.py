"""Rule models - declarations, references, usage index and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from inlinetypes.parsing.treesitter import SourceRange

RULE_ID = "prefer-inline-type-parameters"
RULE_DOCS_URL = (
    "https://github.com/MohannadNaj/eslint-plugin-ts-inline-parameter-types/blob/main/"
    "README.md#rule-prefer-inline-type-parameters"
)
MESSAGE_TEMPLATE = (
    'Type "{name}" is only used once. Consider inlining it in the function parameters.'
)


class DeclarationKind(Enum):
    """Shape of a named type declaration."""

    ALIAS = "alias"
    INTERFACE = "interface"


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """A named type declaration recorded during the walk."""

    name: str
    kind: DeclarationKind
    has_type_parameters: bool
    is_exported: bool
    source_range: SourceRange
    # Alias right-hand side, or the interface member block including braces
    body_range: SourceRange | None
    # Program-level statement holding the declaration (the deletion unit)
    statement_range: SourceRange


@dataclass(frozen=True, slots=True, eq=False)
class TypeReference:
    """One syntactic occurrence of a name in type position."""

    name: str
    node: Any  # tree_sitter.Node (type_identifier)
    ancestors: tuple[Any, ...]  # root first, immediate parent last

    @property
    def parent(self) -> Any | None:
        return self.ancestors[-1] if self.ancestors else None


@dataclass
class UsageIndex:
    """Declarations and reference counts collected from one file."""

    declarations: dict[str, TypeDeclaration] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)
    references: dict[str, list[TypeReference]] = field(default_factory=dict)
    # Local names re-exported through ``export { Name }``
    exported_names: set[str] = field(default_factory=set)

    def record_declaration(self, declaration: TypeDeclaration) -> None:
        # Last declaration of a name wins; its usage entry starts at zero
        self.declarations[declaration.name] = declaration
        self.counts.setdefault(declaration.name, 0)

    def record_reference(self, reference: TypeReference) -> None:
        self.counts[reference.name] = self.counts.get(reference.name, 0) + 1
        self.references.setdefault(reference.name, []).append(reference)

    def usage_count(self, name: str) -> int:
        return self.counts.get(name, 0)


@dataclass(frozen=True, slots=True)
class EligibilityResult:
    """A single-use declaration whose reference types a function parameter."""

    declaration: TypeDeclaration
    reference: TypeReference
    annotation: Any  # tree_sitter.Node (the parameter's type_annotation)
    rewritable: bool


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``range`` of the original text with ``replacement``."""

    range: SourceRange
    replacement: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": list(self.range.as_tuple()), "text": self.replacement}


@dataclass
class Diagnostic:
    """A single finding of the rule."""

    path: str
    name: str  # declaration name
    location: SourceRange
    line: int
    column: int
    message: str
    code: str = RULE_ID
    severity: Severity = Severity.WARNING
    fix: tuple[TextEdit, ...] | None = None

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "line": self.line,
            "column": self.column,
            "range": list(self.location.as_tuple()),
            "message": self.message,
            "code": self.code,
            "severity": self.severity.value,
            "docs_url": RULE_DOCS_URL,
            "fix": [edit.to_dict() for edit in self.fix] if self.fix is not None else None,
        }
