"""Closed sets of tree-sitter-typescript node types consulted by the rule.

Every node kind the analysis dispatches on is named here; anything else is
treated as opaque structure and only walked through.
"""

from __future__ import annotations

PROGRAM = "program"

# -- Declarations --
TYPE_ALIAS_DECLARATION = "type_alias_declaration"
INTERFACE_DECLARATION = "interface_declaration"
DECLARATION_TYPES: frozenset[str] = frozenset({TYPE_ALIAS_DECLARATION, INTERFACE_DECLARATION})

EXTENDS_TYPE_CLAUSE = "extends_type_clause"

EXPORT_STATEMENT = "export_statement"
EXPORT_CLAUSE = "export_clause"

# -- Type references --
TYPE_IDENTIFIER = "type_identifier"
NESTED_TYPE_IDENTIFIER = "nested_type_identifier"
INFER_TYPE = "infer_type"

# Parents whose ``name`` field holds a type_identifier that declares, not uses
DECLARING_NAME_PARENTS: frozenset[str] = frozenset(
    {
        TYPE_ALIAS_DECLARATION,
        INTERFACE_DECLARATION,
        "class_declaration",
        "abstract_class_declaration",
        "class",
        "type_parameter",
        "mapped_type_clause",
    }
)

# -- Annotations and parameters --
TYPE_ANNOTATION = "type_annotation"
FORMAL_PARAMETERS = "formal_parameters"
PARAMETER_TYPES: frozenset[str] = frozenset({"required_parameter", "optional_parameter"})
# Children that turn a parameter into a constructor parameter property
PARAMETER_PROPERTY_MARKERS: frozenset[str] = frozenset(
    {"accessibility_modifier", "override_modifier", "readonly"}
)

IDENTIFIER = "identifier"
BINDING_PATTERN_TYPES: frozenset[str] = frozenset({"object_pattern", "array_pattern"})

# -- Functions --
FUNCTION_TYPES: frozenset[str] = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",  # function_expression before tree-sitter-typescript 0.21
        "generator_function",
        "arrow_function",
        "method_definition",
    }
)
