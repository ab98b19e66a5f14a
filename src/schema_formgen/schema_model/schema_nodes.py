"""Schema node variants.

Every node is an immutable dataclass. Wrapper nodes own exactly one inner node
(``LazyNode`` owns a getter producing it); leaves and composites describe the
structural kind of a field.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, TypeAlias

from .schema_metadata import NO_METADATA, SchemaMetadata


class _NoValue:
    """Marker for a default wrapper without a literal value."""

    _instance: _NoValue | None = None

    def __new__(cls) -> _NoValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE = _NoValue()


@dataclass(frozen=True)
class _Node:
    metadata: SchemaMetadata = field(default=NO_METADATA, kw_only=True)


# -- Wrappers ---------------------------------------------------------------


@dataclass(frozen=True)
class OptionalNode(_Node):
    inner: SchemaNode


@dataclass(frozen=True)
class NullableNode(_Node):
    inner: SchemaNode


@dataclass(frozen=True)
class DefaultNode(_Node):
    """Declared default; ``producer`` is called instead of using ``value`` when set."""

    inner: SchemaNode
    value: Any = NO_VALUE
    producer: Callable[[], Any] | None = None


@dataclass(frozen=True)
class PrefaultNode(_Node):
    """Default applied before parsing; same shape as ``DefaultNode``."""

    inner: SchemaNode
    value: Any = NO_VALUE
    producer: Callable[[], Any] | None = None


@dataclass(frozen=True)
class ReadonlyNode(_Node):
    inner: SchemaNode


@dataclass(frozen=True)
class NonOptionalNode(_Node):
    inner: SchemaNode


@dataclass(frozen=True, eq=False)
class LazyNode(_Node):
    """Deferred reference; ``getter`` returns the referenced node."""

    getter: Callable[[], SchemaNode]
    name: str | None = None

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


# -- Leaves -----------------------------------------------------------------


@dataclass(frozen=True)
class StringNode(_Node):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None


@dataclass(frozen=True)
class NumberNode(_Node):
    minimum: float | None = None
    maximum: float | None = None
    integer: bool = False


@dataclass(frozen=True)
class BooleanNode(_Node):
    pass


@dataclass(frozen=True)
class BigIntegerNode(_Node):
    minimum: int | None = None
    maximum: int | None = None


@dataclass(frozen=True)
class DateNode(_Node):
    minimum: date | None = None
    maximum: date | None = None


@dataclass(frozen=True)
class NullNode(_Node):
    pass


@dataclass(frozen=True)
class LiteralNode(_Node):
    """One literal value, or a set of interchangeable ones (first is canonical)."""

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("LiteralNode requires at least one value.")


@dataclass(frozen=True)
class EnumNode(_Node):
    """Ordered key -> value entries; declaration order is significant."""

    entries: Mapping[str, Any]


@dataclass(frozen=True)
class UnsupportedNode(_Node):
    """A kind the schema source declared but this engine has no variant for."""

    kind_name: str


# -- Composites -------------------------------------------------------------


@dataclass(frozen=True)
class ArrayNode(_Node):
    element: SchemaNode
    min_size: int | None = None
    max_size: int | None = None


@dataclass(frozen=True)
class ObjectNode(_Node):
    """Ordered fields; ``required_names`` defaults to every declared field."""

    fields: Mapping[str, SchemaNode]
    required_names: frozenset[str] | None = None

    def __post_init__(self) -> None:
        if self.required_names is None:
            object.__setattr__(self, "required_names", frozenset(self.fields))


@dataclass(frozen=True)
class TupleNode(_Node):
    items: tuple[SchemaNode, ...]


@dataclass(frozen=True)
class UnionNode(_Node):
    options: tuple[SchemaNode, ...]


WrapperNode: TypeAlias = (
    OptionalNode
    | NullableNode
    | DefaultNode
    | PrefaultNode
    | ReadonlyNode
    | NonOptionalNode
    | LazyNode
)

ScalarNode: TypeAlias = StringNode | NumberNode | BooleanNode | BigIntegerNode | DateNode

ConcreteNode: TypeAlias = (
    ScalarNode
    | NullNode
    | LiteralNode
    | EnumNode
    | UnsupportedNode
    | ArrayNode
    | ObjectNode
    | TupleNode
    | UnionNode
)

SchemaNode: TypeAlias = WrapperNode | ConcreteNode

WRAPPER_TYPES: tuple[type, ...] = (
    OptionalNode,
    NullableNode,
    DefaultNode,
    PrefaultNode,
    ReadonlyNode,
    NonOptionalNode,
    LazyNode,
)


def kind_name(node: SchemaNode) -> str:
    """Return a short, human readable kind label for diagnostics."""
    if isinstance(node, UnsupportedNode):
        return node.kind_name
    return type(node).__name__.removesuffix("Node").lower()
