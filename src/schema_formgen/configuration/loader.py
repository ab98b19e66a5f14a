"""Configuration loader service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_formgen.document_access import ABSENT, FormDocument
from schema_formgen.form_session import FormMode, FormSettings, JsonSchemaValidator
from schema_formgen.render_dispatch import TemplateRegistry
from schema_formgen.schema_loading import (
    SchemaLoadError,
    load_schema_file,
    load_schema_text,
    read_json_schema,
)

from .form_configuration import FormConfiguration, SchemaSource, ValidationSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_form_configuration(config_path: Path | str) -> FormConfiguration:
    """Load and validate the form configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema_source = _parse_schema_section(parsed.get("schema"), path.parent)
    try:
        schema = read_json_schema(schema_source.document)
    except SchemaLoadError as exc:
        raise ConfigurationError(str(exc)) from exc

    return FormConfiguration(
        path=path,
        schema_source=schema_source,
        schema=schema,
        initial_data=_parse_initial_data_section(parsed.get("initial_data"), path.parent),
        mode=_parse_mode(parsed.get("mode", FormMode.EDIT.value)),
        validation=_parse_validation_section(parsed.get("validation")),
    )


def build_form_settings(
    configuration: FormConfiguration, templates: TemplateRegistry[Any] | None = None
) -> FormSettings:
    """Build the controller settings, including a JSON Schema validator."""
    try:
        validator = JsonSchemaValidator(
            configuration.schema_source.document,
            format_checks=configuration.validation.format_checks,
        )
    except SchemaLoadError as exc:
        raise ConfigurationError(str(exc)) from exc
    return FormSettings(mode=configuration.mode, validator=validator, templates=templates)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSource:
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    try:
        if inline:
            if isinstance(inline, Mapping):
                return SchemaSource(document=inline, source_path=None)
            if not isinstance(inline, str):
                raise ConfigurationError("Schema inline value must be a string or a mapping.")
            return SchemaSource(document=load_schema_text(inline), source_path=None)
        if path_value:
            if not isinstance(path_value, str):
                raise ConfigurationError("Schema path must be a string.")
            schema_path = _resolve_path(base_path, path_value)
            return SchemaSource(document=load_schema_file(schema_path), source_path=schema_path)
    except SchemaLoadError as exc:
        raise ConfigurationError(str(exc)) from exc
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_initial_data_section(value: Any, base_path: Path) -> FormDocument:
    if value is None:
        return ABSENT
    section = _require_mapping(value, "initial_data")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline is not None and path_value:
        raise ConfigurationError("initial_data must not set both inline and path.")
    if inline is not None:
        return inline
    if not path_value:
        return ABSENT
    if not isinstance(path_value, str):
        raise ConfigurationError("initial_data.path must be a string.")
    return load_document_file(_resolve_path(base_path, path_value))


def load_document_file(path: Path | str) -> FormDocument:
    """Read a JSON or YAML form document."""
    document_path = Path(path)
    if not document_path.exists():
        raise ConfigurationError(f"Document file not found: {document_path}")
    text = document_path.read_text(encoding="utf-8")
    try:
        if document_path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse document {document_path}: {exc}") from exc


def _parse_mode(value: Any) -> FormMode:
    if not isinstance(value, str):
        raise ConfigurationError("mode must be a string.")
    try:
        return FormMode(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in FormMode)
        raise ConfigurationError(f"mode must be one of: {allowed}.") from exc


def _parse_validation_section(value: Any) -> ValidationSettings:
    section = value or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError("validation must be a mapping.")
    format_checks = section.get("format_checks", True)
    if not isinstance(format_checks, bool):
        raise ConfigurationError("validation.format_checks must be true or false.")
    return ValidationSettings(format_checks=format_checks)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
