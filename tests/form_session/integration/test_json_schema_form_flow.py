"""End-to-end form flow over a JSON Schema document."""

from __future__ import annotations

import pytest
from schema_formgen.form_session import FormController, FormSettings, JsonSchemaValidator
from schema_formgen.schema_loading import SchemaLoadError, read_json_schema

PERSON_SCHEMA = {
    "type": "object",
    "required": ["firstName", "email", "friends", "employment"],
    "properties": {
        "firstName": {"type": "string", "minLength": 1},
        "email": {"type": "string", "format": "email"},
        "age": {"type": "integer", "minimum": 0, "default": 30},
        "friends": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {"name": {"type": "string", "minLength": 1}},
            },
        },
        "employment": {
            "type": "object",
            "required": ["role"],
            "properties": {"role": {"enum": ["chef", "waiter"]}},
        },
    },
}


def _controller(*, format_checks: bool = True) -> FormController:
    validator = JsonSchemaValidator(PERSON_SCHEMA, format_checks=format_checks)
    return FormController(
        read_json_schema(PERSON_SCHEMA), settings=FormSettings(validator=validator)
    )


def test_default_document_reports_missing_fields_per_path() -> None:
    controller = _controller()

    assert controller.document == {
        "age": 30,
        "friends": [],
        "employment": {"role": "chef"},
    }
    outcome = controller.submit()

    assert set(outcome.errors) == {"/firstName", "/email"}
    assert controller.errors_at(("email",))[0].code == "required"


def test_nested_issues_are_routed_to_their_fields() -> None:
    controller = _controller()
    controller.set_value_at(("firstName",), "Ada")
    controller.set_value_at(("email",), "not-an-email")
    controller.add_item(("friends",))
    controller.remove_value_at(("employment", "role"))

    outcome = controller.submit()

    assert set(outcome.errors) == {"/email", "/friends/0/name", "/employment/role"}
    assert controller.errors_at(("friends", 0, "name"))[0].code == "required"
    assert controller.errors_at(("email",))[0].code == "format"


def test_format_checks_can_be_disabled() -> None:
    controller = _controller(format_checks=False)
    controller.set_value_at(("firstName",), "Ada")
    controller.set_value_at(("email",), "not-an-email")

    assert controller.submit().is_valid is True


def test_completed_document_is_valid() -> None:
    controller = _controller()
    controller.set_value_at(("firstName",), "Ada")
    controller.set_value_at(("email",), "ada@example.com")
    controller.add_item(("friends",), factory=lambda: {"name": "Bob"})
    controller.set_value_at(("employment", "role"), "waiter")

    outcome = controller.submit()

    assert outcome.is_valid is True
    assert outcome.document["friends"] == [{"name": "Bob"}]


def test_invalid_json_schema_is_rejected() -> None:
    with pytest.raises(SchemaLoadError, match="Invalid JSON Schema"):
        JsonSchemaValidator({"type": "object", "minProperties": "two"})
