"""Default document generation tests."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from schema_formgen.default_generation import generate_default
from schema_formgen.document_access import ABSENT
from schema_formgen.schema_model import (
    ArrayNode,
    BigIntegerNode,
    BooleanNode,
    DateNode,
    DefaultNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NullableNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PrefaultNode,
    ReadonlyNode,
    StringNode,
    TupleNode,
    UnionNode,
    UnsupportedNode,
)
from schema_formgen.schema_resolution import UnresolvableReference


@pytest.mark.parametrize(
    "node",
    [StringNode(), NumberNode(), BooleanNode(), BigIntegerNode(), DateNode()],
)
def test_scalars_without_declared_default_are_absent(node) -> None:
    assert generate_default(node) is ABSENT


def test_declared_default_wins_over_structure() -> None:
    assert generate_default(DefaultNode(NumberNode(), value=30)) == 30
    assert generate_default(NullableNode(PrefaultNode(StringNode(), value="x"))) == "x"
    assert generate_default(ReadonlyNode(DefaultNode(DateNode(), value=date(2024, 1, 2)))) == date(
        2024, 1, 2
    )


def test_default_producer_result_is_used() -> None:
    node = DefaultNode(ArrayNode(StringNode()), producer=lambda: ["a", "b"])

    assert generate_default(node) == ["a", "b"]


def test_optional_field_without_default_is_absent() -> None:
    node = OptionalNode(ObjectNode(fields={"a": ArrayNode(StringNode())}))

    assert generate_default(node) is ABSENT


def test_default_outside_optional_still_applies() -> None:
    assert generate_default(DefaultNode(OptionalNode(StringNode()), value="kept")) == "kept"


def test_enum_default_is_first_declared_value() -> None:
    node = EnumNode({"B": "b", "A": "a"})

    assert generate_default(node) == "b"
    assert generate_default(EnumNode({"A": "a", "B": "b"})) == "a"


def test_array_with_min_size_repeats_element_default() -> None:
    assert generate_default(ArrayNode(StringNode(), min_size=2)) == [ABSENT, ABSENT]
    assert generate_default(ArrayNode(EnumNode({"x": 1}), min_size=3)) == [1, 1, 1]


def test_array_without_min_size_is_empty() -> None:
    assert generate_default(ArrayNode(ObjectNode(fields={}))) == []


def test_min_size_elements_are_independent_values() -> None:
    element = ObjectNode(fields={"tags": ArrayNode(StringNode())})
    result = generate_default(ArrayNode(element, min_size=2))
    result[0]["tags"].append("only-first")

    assert result[1] == {"tags": []}


def test_object_omits_absent_fields_and_keeps_the_rest() -> None:
    node = ObjectNode(
        fields={
            "firstName": StringNode(),
            "age": OptionalNode(NumberNode()),
            "ageAlt": DefaultNode(NumberNode(minimum=0, maximum=150), value=30),
            "friends": ArrayNode(StringNode()),
            "employment": ObjectNode(fields={"role": StringNode()}),
            "status": EnumNode({"ACTIVE": "active", "RETIRED": "retired"}),
        }
    )

    assert generate_default(node) == {
        "ageAlt": 30,
        "friends": [],
        "employment": {},
        "status": "active",
    }


def test_union_uses_first_option() -> None:
    node = UnionNode((ObjectNode(fields={"kind": LiteralNode(("card",))}), StringNode()))

    assert generate_default(node) == {"kind": "card"}


def test_tuple_defaults_every_slot_in_order() -> None:
    node = TupleNode((StringNode(), EnumNode({"CA": "CA", "NY": "NY"}), LiteralNode((7, 8))))

    assert generate_default(node) == [ABSENT, "CA", 7]


def test_null_node_defaults_to_none() -> None:
    assert generate_default(NullNode()) is None


def test_lazy_reference_is_resolved() -> None:
    target = ObjectNode(fields={"items": ArrayNode(StringNode(), min_size=1)})

    assert generate_default(LazyNode(getter=lambda: target)) == {"items": [ABSENT]}


def test_recursive_schema_terminates_when_recursion_is_not_required() -> None:
    nodes: dict[str, ObjectNode] = {}
    reference = LazyNode(getter=lambda: nodes["person"], name="person")
    nodes["person"] = ObjectNode(
        fields={"name": StringNode(), "friends": ArrayNode(reference)},
    )

    assert generate_default(reference) == {"friends": []}


def test_required_self_reference_fails_fast() -> None:
    nodes: dict[str, ObjectNode] = {}
    reference = LazyNode(getter=lambda: nodes["node"], name="node")
    nodes["node"] = ObjectNode(fields={"next": reference})

    with pytest.raises(UnresolvableReference, match="node"):
        generate_default(reference)


def test_sibling_references_to_same_definition_are_allowed() -> None:
    address = ObjectNode(fields={"zip": DefaultNode(StringNode(), value="00000")})
    reference = LazyNode(getter=lambda: address, name="address")
    node = ObjectNode(fields={"home": reference, "work": reference})

    assert generate_default(node) == {"home": {"zip": "00000"}, "work": {"zip": "00000"}}


def test_failing_producer_leaves_field_absent_and_logs(caplog) -> None:
    def explode() -> str:
        raise ValueError("no clock")

    node = ObjectNode(
        fields={
            "createdAt": DefaultNode(StringNode(), producer=explode),
            "count": DefaultNode(NumberNode(), value=1),
        }
    )

    with caplog.at_level(logging.WARNING, logger="schema_formgen"):
        result = generate_default(node)

    assert result == {"count": 1}
    assert "no clock" in caplog.text


def test_unsupported_kind_is_absent_and_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="schema_formgen"):
        result = generate_default(ObjectNode(fields={"blob": UnsupportedNode("binary")}))

    assert result == {}
    assert "Unsupported schema type: binary" in caplog.text
