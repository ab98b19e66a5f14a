"""Schema model exports."""

from .schema_metadata import NO_METADATA, PresentationHint, SchemaMetadata
from .schema_nodes import (
    NO_VALUE,
    WRAPPER_TYPES,
    ArrayNode,
    BigIntegerNode,
    BooleanNode,
    ConcreteNode,
    DateNode,
    DefaultNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NonOptionalNode,
    NullableNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PrefaultNode,
    ReadonlyNode,
    ScalarNode,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
    UnsupportedNode,
    WrapperNode,
    kind_name,
)

__all__ = [
    "NO_METADATA",
    "NO_VALUE",
    "WRAPPER_TYPES",
    "ArrayNode",
    "BigIntegerNode",
    "BooleanNode",
    "ConcreteNode",
    "DateNode",
    "DefaultNode",
    "EnumNode",
    "LazyNode",
    "LiteralNode",
    "NonOptionalNode",
    "NullableNode",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "OptionalNode",
    "PrefaultNode",
    "PresentationHint",
    "ReadonlyNode",
    "ScalarNode",
    "SchemaMetadata",
    "SchemaNode",
    "StringNode",
    "TupleNode",
    "UnionNode",
    "UnsupportedNode",
    "WrapperNode",
    "kind_name",
]
