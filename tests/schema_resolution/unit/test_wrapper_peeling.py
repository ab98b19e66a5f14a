"""Wrapper peeling, requiredness and metadata resolution tests."""

from __future__ import annotations

import pytest
from schema_formgen.schema_model import (
    NO_VALUE,
    DefaultNode,
    LazyNode,
    NonOptionalNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PrefaultNode,
    PresentationHint,
    ReadonlyNode,
    SchemaMetadata,
    StringNode,
)
from schema_formgen.schema_resolution import (
    MalformedDefaultProducer,
    UnresolvableReference,
    find_declared_default,
    is_field_required,
    is_optional,
    is_required,
    peel_one_layer,
    resolve_metadata,
    unwrap,
)

_WRAPPED_SAMPLES = [
    StringNode(),
    OptionalNode(StringNode()),
    NullableNode(OptionalNode(NumberNode())),
    DefaultNode(OptionalNode(StringNode()), value="x"),
    OptionalNode(DefaultNode(StringNode(), value="x")),
    PrefaultNode(ReadonlyNode(StringNode()), value="y"),
    NonOptionalNode(OptionalNode(StringNode())),
    ReadonlyNode(NullableNode(StringNode())),
    LazyNode(getter=lambda: OptionalNode(NumberNode(minimum=1))),
]


def test_unwrap_strips_every_wrapper_kind() -> None:
    core = NumberNode(minimum=0, maximum=10)
    node = OptionalNode(
        NullableNode(
            DefaultNode(
                PrefaultNode(ReadonlyNode(NonOptionalNode(LazyNode(getter=lambda: core)))), value=3
            )
        )
    )

    assert unwrap(node) is core


@pytest.mark.parametrize("node", _WRAPPED_SAMPLES)
def test_unwrap_is_idempotent(node) -> None:
    assert unwrap(unwrap(node)) == unwrap(node)


@pytest.mark.parametrize("node", _WRAPPED_SAMPLES)
def test_is_required_is_complement_of_is_optional(node) -> None:
    assert is_required(node) is (not is_optional(node))


def test_optional_found_through_transparent_wrappers() -> None:
    assert is_optional(OptionalNode(StringNode()))
    assert is_optional(NullableNode(OptionalNode(StringNode())))
    assert is_optional(DefaultNode(OptionalNode(StringNode()), value="a"))
    assert is_optional(PrefaultNode(OptionalNode(StringNode()), value="a"))
    assert is_optional(ReadonlyNode(OptionalNode(StringNode())))


def test_non_optional_and_leaves_are_required() -> None:
    assert is_required(StringNode())
    assert is_required(NullableNode(StringNode()))
    assert is_required(NonOptionalNode(OptionalNode(StringNode())))
    assert is_required(LazyNode(getter=lambda: OptionalNode(StringNode())))


def test_field_requiredness_honours_required_names() -> None:
    parent = ObjectNode(
        fields={"name": StringNode(), "nickname": StringNode(), "age": OptionalNode(NumberNode())},
        required_names=frozenset({"name", "age"}),
    )

    assert is_field_required(parent, "name")
    assert not is_field_required(parent, "nickname")
    assert not is_field_required(parent, "age")
    assert not is_field_required(parent, "missing")


def test_object_required_names_default_to_all_fields() -> None:
    parent = ObjectNode(fields={"a": StringNode(), "b": OptionalNode(StringNode())})

    assert parent.required_names == frozenset({"a", "b"})
    assert is_field_required(parent, "a")
    assert not is_field_required(parent, "b")


def test_peel_one_layer_returns_none_for_concrete_nodes() -> None:
    inner = StringNode()

    assert peel_one_layer(OptionalNode(inner)) is inner
    assert peel_one_layer(inner) is None


def test_declared_default_is_found_through_nullable_and_readonly() -> None:
    node = NullableNode(ReadonlyNode(DefaultNode(StringNode(), value="hello")))

    assert find_declared_default(node) == "hello"


def test_declared_default_is_not_found_through_optional() -> None:
    node = OptionalNode(DefaultNode(StringNode(), value="hello"))

    assert find_declared_default(node) is NO_VALUE


def test_declared_default_producer_is_invoked() -> None:
    calls: list[int] = []

    def produce() -> list[str]:
        calls.append(1)
        return ["fresh"]

    node = PrefaultNode(StringNode(), producer=produce)

    assert find_declared_default(node) == ["fresh"]
    assert calls == [1]


def test_declared_default_values_are_copied() -> None:
    shared = {"tags": []}
    node = DefaultNode(ObjectNode(fields={}), value=shared)

    produced = find_declared_default(node)
    produced["tags"].append("x")

    assert shared == {"tags": []}


def test_failing_default_producer_raises_malformed_default_producer() -> None:
    def explode() -> str:
        raise RuntimeError("boom")

    with pytest.raises(MalformedDefaultProducer, match="boom"):
        find_declared_default(DefaultNode(StringNode(), producer=explode))


def test_self_referencing_lazy_chain_is_unresolvable() -> None:
    holder: dict[str, LazyNode] = {}
    holder["self"] = LazyNode(getter=lambda: OptionalNode(holder["self"]), name="Loop")

    with pytest.raises(UnresolvableReference, match="Loop"):
        unwrap(holder["self"])


def test_failing_lazy_getter_is_unresolvable() -> None:
    def missing() -> StringNode:
        raise KeyError("Address")

    with pytest.raises(UnresolvableReference, match="Address"):
        unwrap(LazyNode(getter=missing, name="Address"))


def test_metadata_merges_wrapper_layers_with_outer_layers_winning() -> None:
    node = OptionalNode(
        DefaultNode(
            NumberNode(
                minimum=0,
                maximum=150,
                metadata=SchemaMetadata(title="Inner", description="The age."),
            ),
            value=30,
            metadata=SchemaMetadata(presentation_hint=PresentationHint("range")),
        ),
        metadata=SchemaMetadata(title="Age"),
    )

    metadata = resolve_metadata(node)

    assert metadata.title == "Age"
    assert metadata.description == "The age."
    assert metadata.presentation_hint == PresentationHint("range")
