"""Eligibility classification for single-use type declarations.

A declaration qualifies when it is used exactly once, is neither exported
nor generic, and that one use lies inside the type annotation of a function
parameter. The use is *rewritable* when it is the whole annotation type
rather than a piece of a larger type within it.
"""

from __future__ import annotations

from typing import Any

from inlinetypes.core.logging import get_logger
from inlinetypes.parsing import node_types as nt
from inlinetypes.rule.models import EligibilityResult, TypeReference, UsageIndex

log = get_logger("rule.eligibility")


def classify(index: UsageIndex) -> list[EligibilityResult]:
    """Eligible declarations of *index*, ordered by declaration position."""
    results: list[EligibilityResult] = []

    for name, count in index.counts.items():
        declaration = index.declarations.get(name)
        if declaration is None or count != 1:
            continue
        if declaration.has_type_parameters:
            continue
        if declaration.is_exported or name in index.exported_names:
            continue

        references = index.references.get(name, [])
        if len(references) != 1:
            continue
        reference = references[0]

        annotation = find_parameter_annotation(reference)
        if annotation is None:
            continue

        rewritable = reference.parent == annotation
        log.debug("inline_candidate", name=name, rewritable=rewritable)
        results.append(
            EligibilityResult(
                declaration=declaration,
                reference=reference,
                annotation=annotation,
                rewritable=rewritable,
            )
        )

    results.sort(key=lambda r: r.declaration.source_range.start)
    return results


def find_parameter_annotation(reference: TypeReference) -> Any | None:
    """Nearest enclosing type_annotation that types a function parameter.

    Annotations owned by anything else (property signatures, parameters of
    function *types*, return types, variables, class fields) are passed over
    on the way out.
    """
    chain = reference.ancestors
    for depth in range(len(chain) - 1, 2, -1):
        node = chain[depth]
        if node.type != nt.TYPE_ANNOTATION:
            continue
        parameter, params, function = chain[depth - 1], chain[depth - 2], chain[depth - 3]
        if is_parameter_annotation(node, parameter, params, function):
            return node
    return None


def is_parameter_annotation(annotation: Any, parameter: Any, params: Any, function: Any) -> bool:
    if parameter.type not in nt.PARAMETER_TYPES:
        return False
    if parameter.child_by_field_name("type") != annotation:
        return False

    pattern = parameter.child_by_field_name("pattern")
    if pattern is None:
        return False
    if pattern.type != nt.IDENTIFIER and pattern.type not in nt.BINDING_PATTERN_TYPES:
        return False
    if any(child.type in nt.PARAMETER_PROPERTY_MARKERS for child in parameter.children):
        return False
    if parameter.child_by_field_name("value") is not None:
        # A default value wraps the binding; the parameter is no longer a plain pattern
        return False

    if params.type != nt.FORMAL_PARAMETERS or function.type not in nt.FUNCTION_TYPES:
        return False
    return function.child_by_field_name("parameters") == params
