"""Schema loading exports."""

from .json_schema_reader import (
    SchemaLoadError,
    load_schema_file,
    load_schema_text,
    read_json_schema,
)

__all__ = [
    "SchemaLoadError",
    "load_schema_file",
    "load_schema_text",
    "read_json_schema",
]
