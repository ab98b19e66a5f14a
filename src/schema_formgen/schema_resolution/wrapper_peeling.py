"""Wrapper-chain walking shared by unwrapping, requiredness and defaults."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from schema_formgen.schema_model import (
    NO_METADATA,
    NO_VALUE,
    ConcreteNode,
    DefaultNode,
    LazyNode,
    NonOptionalNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    PrefaultNode,
    ReadonlyNode,
    SchemaMetadata,
    SchemaNode,
)

from .resolution_errors import MalformedDefaultProducer, UnresolvableReference

_TRANSPARENT_FOR_OPTIONALITY = (NullableNode, DefaultNode, PrefaultNode, ReadonlyNode)


def peel_one_layer(node: SchemaNode) -> SchemaNode | None:
    """Return the node directly wrapped by ``node``, or None for a concrete node."""
    if isinstance(
        node,
        OptionalNode | NullableNode | DefaultNode | PrefaultNode | ReadonlyNode | NonOptionalNode,
    ):
        return node.inner
    if isinstance(node, LazyNode):
        return resolve_reference(node)
    return None


def resolve_reference(node: LazyNode) -> SchemaNode:
    """Invoke the getter of a lazy reference."""
    try:
        return node.getter()
    except UnresolvableReference:
        raise
    except Exception as exc:
        raise UnresolvableReference(
            f"Reference {_reference_label(node)} could not be resolved: {exc}"
        ) from exc


def iter_wrapper_chain(node: SchemaNode) -> Iterator[SchemaNode]:
    """Yield ``node`` and every layer beneath it, ending with the concrete node."""
    entered: set[int] = set()
    current: SchemaNode | None = node
    while current is not None:
        if isinstance(current, LazyNode):
            if id(current) in entered:
                raise UnresolvableReference(
                    f"Reference {_reference_label(current)} resolves to itself."
                )
            entered.add(id(current))
        yield current
        current = peel_one_layer(current)


def unwrap(node: SchemaNode) -> ConcreteNode:
    """Strip every wrapper layer and return the first concrete node."""
    layer = node
    for layer in iter_wrapper_chain(node):
        pass
    return layer  # type: ignore[return-value]


def is_optional(node: SchemaNode) -> bool:
    """Return True when the first non-transparent wrapper is ``optional``.

    ``nullable``, ``default``, ``prefault`` and ``readonly`` do not decide
    optionality themselves, the walk continues into their inner node. Any
    other node, wrapper or not, ends the walk as required.
    """
    current = node
    while isinstance(current, _TRANSPARENT_FOR_OPTIONALITY):
        current = current.inner
    return isinstance(current, OptionalNode)


def is_required(node: SchemaNode) -> bool:
    return not is_optional(node)


def is_field_required(parent: ObjectNode, name: str) -> bool:
    """Requiredness of one object field, honouring the object's required names."""
    required_names = parent.required_names or frozenset()
    field_node = parent.fields.get(name)
    if field_node is None:
        return False
    return name in required_names and is_required(field_node)


def find_declared_default(node: SchemaNode) -> Any:
    """Return the declared default reachable without crossing ``optional``.

    Only ``default``, ``prefault``, ``nullable`` and ``readonly`` layers are
    peeled. Returns ``NO_VALUE`` when nothing is declared.

    Raises:
      MalformedDefaultProducer: If a default producer raises.
    """
    current = node
    while True:
        if isinstance(current, DefaultNode | PrefaultNode):
            if current.producer is not None:
                try:
                    return current.producer()
                except Exception as exc:
                    raise MalformedDefaultProducer(
                        f"Default producer {current.producer!r} failed: {exc}"
                    ) from exc
            if current.value is not NO_VALUE:
                return copy.deepcopy(current.value)
            current = current.inner
        elif isinstance(current, NullableNode | ReadonlyNode):
            current = current.inner
        else:
            return NO_VALUE


def resolve_metadata(node: SchemaNode) -> SchemaMetadata:
    """Merge metadata of every wrapper layer, outer layers winning."""
    merged = NO_METADATA
    for layer in iter_wrapper_chain(node):
        if not layer.metadata.is_empty:
            merged = layer.metadata.overlay(merged) if not merged.is_empty else layer.metadata
    return merged


def _reference_label(node: LazyNode) -> str:
    return repr(node.name) if node.name else f"<lazy {id(node):#x}>"
