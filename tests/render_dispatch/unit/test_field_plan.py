"""Field plan walk tests."""

from __future__ import annotations

from schema_formgen.render_dispatch import EditorVariant, TemplateKind, describe_fields
from schema_formgen.schema_model import (
    ArrayNode,
    LazyNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaMetadata,
    SchemaNode,
    StringNode,
)


def test_describe_fields_walks_objects_and_arrays() -> None:
    schema = ObjectNode(
        fields={
            "firstName": StringNode(metadata=SchemaMetadata(title="First name")),
            "nickname": OptionalNode(StringNode()),
            "friends": ArrayNode(ObjectNode(fields={"age": NumberNode(minimum=0, maximum=120)})),
        }
    )

    plans = describe_fields(schema)

    assert [plan.path_key for plan in plans] == [
        "/",
        "/firstName",
        "/nickname",
        "/friends",
        "/friends/*",
        "/friends/*/age",
    ]
    by_key = {plan.path_key: plan for plan in plans}
    assert by_key["/firstName"].title == "First name"
    assert by_key["/nickname"].required is False
    assert by_key["/friends"].editor is EditorVariant.LIST
    assert by_key["/friends/*"].template_kind is TemplateKind.OBJECT
    assert by_key["/friends/*/age"].editor is EditorVariant.RANGE


def test_fields_outside_required_names_are_optional() -> None:
    schema = ObjectNode(
        fields={"a": StringNode(), "b": StringNode()}, required_names=frozenset({"a"})
    )

    required = {plan.path_key: plan.required for plan in describe_fields(schema)}

    assert required == {"/": True, "/a": True, "/b": False}


def test_recursive_reference_is_described_once_per_cycle() -> None:
    definitions: dict[str, SchemaNode] = {}
    person_ref = LazyNode(lambda: definitions["person"], name="person")
    definitions["person"] = ObjectNode(
        fields={"name": StringNode(), "friends": ArrayNode(person_ref)}
    )

    plans = describe_fields(definitions["person"])

    assert [plan.path_key for plan in plans] == [
        "/",
        "/name",
        "/friends",
        "/friends/*",
        "/friends/*/name",
        "/friends/*/friends",
        "/friends/*/friends/*",
    ]
