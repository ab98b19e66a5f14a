"""Adapters from validator-specific locators to ``ValidationIssue``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from jsonschema.exceptions import ValidationError as JsonSchemaError

from schema_formgen.document_access import PathSegment, normalize_path

from .issue_models import REQUIRED_CODE, ValidationIssue

_REQUIRED_MESSAGE = re.compile(r"^(?P<quote>['\"])(?P<name>.+)(?P=quote) is a required property$")


def issue_from_field_path(
    path: Sequence[PathSegment], message: str, code: str | None = None
) -> ValidationIssue:
    """Build an issue from a field-name array locator, e.g. ``["friends", 0, "name"]``."""
    return ValidationIssue(path=normalize_path(path), message=message, code=code)


def issue_from_instance_path(
    instance_path: str,
    message: str,
    keyword: str | None = None,
    missing_property: str | None = None,
) -> ValidationIssue:
    """Build an issue from a JSON-pointer instance path, e.g. ``/friends/0/name``."""
    segments = [_unescape_pointer(part) for part in instance_path.split("/")[1:]]
    return ValidationIssue(
        path=normalize_path(segments),
        message=message,
        code=keyword,
        missing_field=missing_property if keyword == REQUIRED_CODE else None,
    )


def issues_from_jsonschema_errors(errors: Iterable[JsonSchemaError]) -> list[ValidationIssue]:
    """Adapt ``jsonschema`` errors, keeping their order."""
    return [_issue_from_jsonschema_error(error) for error in errors]


def _issue_from_jsonschema_error(error: JsonSchemaError) -> ValidationIssue:
    keyword = error.validator if isinstance(error.validator, str) else None
    missing_field = None
    if keyword == REQUIRED_CODE:
        missing_field = _missing_property(error)
    return ValidationIssue(
        path=normalize_path(list(error.absolute_path)),
        message=error.message,
        code=keyword,
        missing_field=missing_field,
    )


def _missing_property(error: JsonSchemaError) -> str | None:
    match = _REQUIRED_MESSAGE.match(error.message)
    if match:
        return match.group("name")
    instance = error.instance if isinstance(error.instance, dict) else {}
    declared = error.validator_value if isinstance(error.validator_value, list) else []
    missing = [name for name in declared if name not in instance]
    return missing[0] if len(missing) == 1 else None


def _unescape_pointer(part: str) -> str:
    return part.replace("~1", "/").replace("~0", "~")
