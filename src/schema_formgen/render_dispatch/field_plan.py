"""Flat description of every field a schema renders."""

from __future__ import annotations

from dataclasses import dataclass

from schema_formgen.document_access import Path, child_path, to_path_key
from schema_formgen.schema_model import (
    ArrayNode,
    LazyNode,
    ObjectNode,
    SchemaNode,
    TupleNode,
)
from schema_formgen.schema_resolution import (
    is_field_required,
    is_required,
    iter_wrapper_chain,
    resolve_metadata,
)

from .dispatcher import resolve_dispatch_target, select_editor_for_target
from .template_kinds import EditorVariant, TemplateKind

ARRAY_ITEM_SEGMENT = "*"


@dataclass(frozen=True)
class FieldPlan:
    """Dispatch outcome for one schema location."""

    path_key: str
    template_kind: TemplateKind
    editor: EditorVariant
    required: bool
    title: str | None


def describe_fields(schema: SchemaNode) -> list[FieldPlan]:
    """Walk ``schema`` depth-first and describe each field.

    Array elements appear under a ``*`` segment. A reference that is already
    being walked is described but not descended into again.
    """
    plans: list[FieldPlan] = []
    _describe(schema, (), is_required(schema), frozenset(), plans)
    return plans


def _describe(
    node: SchemaNode,
    path: Path,
    required: bool,
    active_references: frozenset[int],
    plans: list[FieldPlan],
) -> None:
    references = {id(layer) for layer in iter_wrapper_chain(node) if isinstance(layer, LazyNode)}
    path_key = to_path_key(path)
    target = resolve_dispatch_target(node, path_key)
    plans.append(
        FieldPlan(
            path_key=path_key,
            template_kind=target.template_kind,
            editor=select_editor_for_target(node, target),
            required=required,
            title=resolve_metadata(node).title,
        )
    )
    if references & active_references:
        return
    active_references = active_references | references

    core = target.core
    if isinstance(core, ObjectNode):
        for name, field_node in core.fields.items():
            _describe(
                field_node,
                child_path(path, name),
                is_field_required(core, name),
                active_references,
                plans,
            )
    elif isinstance(core, TupleNode):
        for index, item in enumerate(core.items):
            _describe(item, child_path(path, index), True, active_references, plans)
    elif isinstance(core, ArrayNode):
        _describe(
            core.element,
            child_path(path, ARRAY_ITEM_SEGMENT),
            True,
            active_references,
            plans,
        )
