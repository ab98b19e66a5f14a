"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schema_formgen.document_access import FormDocument
from schema_formgen.form_session import FormMode
from schema_formgen.schema_model import SchemaNode


@dataclass(frozen=True)
class SchemaSource:
    """Raw JSON Schema document and where it came from."""

    document: Mapping[str, Any]
    source_path: Path | None


@dataclass(frozen=True)
class ValidationSettings:
    """Options for the JSON Schema validator."""

    format_checks: bool


@dataclass(frozen=True)
class FormConfiguration:
    """Top-level form configuration aggregate."""

    path: Path
    schema_source: SchemaSource
    schema: SchemaNode
    initial_data: FormDocument
    mode: FormMode
    validation: ValidationSettings
