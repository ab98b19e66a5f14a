"""``jsonschema``-backed issue validator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.validators import Draft7Validator, validator_for

from schema_formgen.document_access import FormDocument, to_plain_data
from schema_formgen.error_indexing import ValidationIssue, issues_from_jsonschema_errors
from schema_formgen.schema_loading import SchemaLoadError


class JsonSchemaValidator:
    """Validate documents against a raw JSON Schema and report flat issues."""

    def __init__(self, schema: Mapping[str, Any], *, format_checks: bool = True) -> None:
        validator_cls = validator_for(schema, default=Draft7Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaLoadError(f"Invalid JSON Schema: {exc.message}") from exc
        self._validator = validator_cls(
            schema, format_checker=FormatChecker() if format_checks else None
        )

    def __call__(self, document: FormDocument) -> list[ValidationIssue]:
        return issues_from_jsonschema_errors(self._validator.iter_errors(to_plain_data(document)))
