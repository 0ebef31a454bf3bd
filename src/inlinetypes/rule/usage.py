"""Single walk over a syntax tree recording type declarations and references."""

from __future__ import annotations

from typing import Any

from inlinetypes.core.logging import get_logger
from inlinetypes.parsing import node_types as nt
from inlinetypes.parsing.treesitter import SourceFile
from inlinetypes.rule.models import DeclarationKind, TypeDeclaration, TypeReference, UsageIndex

log = get_logger("rule.usage")


def collect_usage(source: SourceFile) -> UsageIndex:
    """Walk *source* once, in document order, building its UsageIndex.

    Every ``type_identifier`` in a using position counts, wherever it sits:
    inside generic arguments, unions, other declarations' bodies (generic ones
    included) and the declaration's own body.
    """
    index = UsageIndex()
    stack: list[tuple[Any, tuple[Any, ...]]] = [(source.root_node, ())]

    while stack:
        node, ancestors = stack.pop()
        kind = node.type

        if kind in nt.DECLARATION_TYPES:
            declaration = _declaration(source, node, ancestors)
            if declaration is not None:
                index.record_declaration(declaration)
        elif kind == nt.TYPE_IDENTIFIER:
            if _is_type_use(node, ancestors):
                index.record_reference(
                    TypeReference(name=source.node_text(node), node=node, ancestors=ancestors)
                )
        elif kind == nt.EXPORT_STATEMENT:
            index.exported_names.update(_exported_local_names(source, node))

        children = node.named_children
        if children:
            child_ancestors = (*ancestors, node)
            stack.extend((child, child_ancestors) for child in reversed(children))

    return index


def _declaration(
    source: SourceFile, node: Any, ancestors: tuple[Any, ...]
) -> TypeDeclaration | None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None
    name = source.node_text(name_node)

    if node.child_by_field_name("type_parameters") is not None:
        log.debug("generic_declaration_skipped", name=name)
        return None

    if node.type == nt.TYPE_ALIAS_DECLARATION:
        kind = DeclarationKind.ALIAS
        body = node.child_by_field_name("value")
    else:
        kind = DeclarationKind.INTERFACE
        body = node.child_by_field_name("body")
        if any(child.type == nt.EXTENDS_TYPE_CLAUSE for child in node.named_children):
            # The member block alone would drop the inherited members
            body = None

    parent = ancestors[-1] if ancestors else None
    # ancestors[0] is the program; the statement below it is the deletion unit
    if len(ancestors) > 1 and ancestors[0].type == nt.PROGRAM:
        statement = ancestors[1]
    else:
        statement = node

    declaration = TypeDeclaration(
        name=name,
        kind=kind,
        has_type_parameters=False,
        is_exported=parent is not None and parent.type == nt.EXPORT_STATEMENT,
        source_range=source.node_range(node),
        body_range=source.node_range(body) if body is not None else None,
        statement_range=source.node_range(statement),
    )
    log.debug("type_declaration_recorded", name=name, kind=kind.value)
    return declaration


def _is_type_use(node: Any, ancestors: tuple[Any, ...]) -> bool:
    """False for type_identifiers that introduce a name rather than use one."""
    if not ancestors:
        return True
    parent = ancestors[-1]
    if parent.type == nt.NESTED_TYPE_IDENTIFIER:
        return False
    if parent.type == nt.INFER_TYPE:
        # ``infer U extends C``: U is introduced, C is used
        return parent.named_children[0] != node
    if parent.type in nt.DECLARING_NAME_PARENTS:
        return parent.child_by_field_name("name") != node
    return True


def _exported_local_names(source: SourceFile, node: Any) -> list[str]:
    """Local names listed in ``export { A, B as C }`` without a ``from`` clause."""
    if node.child_by_field_name("source") is not None:
        return []
    names: list[str] = []
    for child in node.named_children:
        if child.type != nt.EXPORT_CLAUSE:
            continue
        for specifier in child.named_children:
            name_node = specifier.child_by_field_name("name")
            if name_node is not None:
                names.append(source.node_text(name_node))
    return names
