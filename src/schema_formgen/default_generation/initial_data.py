"""Initial document synthesis from a schema."""

from __future__ import annotations

import logging

from schema_formgen.document_access import ABSENT, FormDocument
from schema_formgen.schema_model import (
    NO_VALUE,
    ArrayNode,
    BigIntegerNode,
    BooleanNode,
    DateNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
    kind_name,
)
from schema_formgen.schema_resolution import (
    MalformedDefaultProducer,
    UnresolvableReference,
    UnsupportedSchemaKind,
    find_declared_default,
    is_optional,
    iter_wrapper_chain,
)

LOGGER = logging.getLogger(__name__)


def generate_default(node: SchemaNode) -> FormDocument:
    """Return the minimal initial value for ``node``.

    Declared defaults win, optional fields and plain scalars are ``ABSENT``,
    containers are built recursively. A reference that is re-entered while its
    own default is being built raises ``UnresolvableReference``.
    """
    return _generate(node, frozenset())


def _generate(node: SchemaNode, active_references: frozenset[int]) -> FormDocument:
    try:
        declared = find_declared_default(node)
    except MalformedDefaultProducer as exc:
        LOGGER.warning("Treating field as absent: %s", exc, exc_info=exc.__cause__)
        return ABSENT
    if declared is not NO_VALUE:
        return declared

    if is_optional(node):
        return ABSENT

    layers = tuple(iter_wrapper_chain(node))
    active_references = _enter_references(layers, active_references)
    core = layers[-1]

    if isinstance(core, StringNode | NumberNode | BooleanNode | BigIntegerNode | DateNode):
        return ABSENT
    if isinstance(core, NullNode):
        return None
    if isinstance(core, ArrayNode):
        if core.min_size:
            return [_generate(core.element, active_references) for _ in range(core.min_size)]
        return []
    if isinstance(core, ObjectNode):
        result: dict[str, FormDocument] = {}
        for name, field_node in core.fields.items():
            value = _generate(field_node, active_references)
            if value is not ABSENT:
                result[name] = value
        return result
    if isinstance(core, UnionNode):
        if not core.options:
            return ABSENT
        return _generate(core.options[0], active_references)
    if isinstance(core, TupleNode):
        return [_generate(item, active_references) for item in core.items]
    if isinstance(core, EnumNode):
        for value in core.entries.values():
            return value
        return ABSENT
    if isinstance(core, LiteralNode):
        return core.values[0]

    LOGGER.warning("%s", UnsupportedSchemaKind(kind_name(core)))
    return ABSENT


def _enter_references(
    layers: tuple[SchemaNode, ...], active_references: frozenset[int]
) -> frozenset[int]:
    entered = set(active_references)
    for layer in layers:
        if isinstance(layer, LazyNode):
            if id(layer) in active_references:
                label = layer.name or "<lazy>"
                raise UnresolvableReference(
                    f"Reference {label!r} is required by its own default value."
                )
            entered.add(id(layer))
    return frozenset(entered)
