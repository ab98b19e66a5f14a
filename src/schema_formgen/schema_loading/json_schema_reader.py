"""Translation of form-oriented JSON Schema documents into schema nodes."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from schema_formgen.schema_model import (
    NO_METADATA,
    ArrayNode,
    BooleanNode,
    DefaultNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PresentationHint,
    ReadonlyNode,
    SchemaMetadata,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
    UnsupportedNode,
)

_DEFINITION_PREFIXES = ("#/definitions/", "#/$defs/")
_ROOT_REFERENCE = "#"


class SchemaLoadError(Exception):
    """Raised when schema text cannot be turned into schema nodes."""


def load_schema_text(text: str, source_name: str = "<inline>") -> Mapping[str, Any]:
    """Parse JSON or YAML schema text into a mapping."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Invalid schema in {source_name}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise SchemaLoadError(f"Schema root in {source_name} must be a mapping.")
    return parsed


def load_schema_file(path: Path | str) -> Mapping[str, Any]:
    """Read a ``.json``, ``.yaml`` or ``.yml`` schema file."""
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaLoadError(f"Schema file not found: {schema_path}")
    text = schema_path.read_text(encoding="utf-8")
    if schema_path.suffix.lower() == ".json":
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid schema in {schema_path}: {exc}") from exc
        if not isinstance(parsed, Mapping):
            raise SchemaLoadError(f"Schema root in {schema_path} must be a mapping.")
        return parsed
    return load_schema_text(text, str(schema_path))


def read_json_schema(document: Mapping[str, Any]) -> SchemaNode:
    """Build a schema node tree from a JSON Schema document.

    ``$ref`` pointers into ``definitions``/``$defs`` (or ``#`` for the root)
    become lazy references, so recursive definitions are representable.
    """
    return _JsonSchemaReader(document).read(document)


class _JsonSchemaReader:
    def __init__(self, root: Mapping[str, Any]) -> None:
        self._root = root
        self._definitions: dict[str, Any] = {}
        for section in ("definitions", "$defs"):
            definitions = root.get(section) or {}
            if not isinstance(definitions, Mapping):
                raise SchemaLoadError(f"'{section}' must be a mapping.")
            self._definitions.update(definitions)
        self._resolved: dict[str, SchemaNode] = {}

    def read(self, node: Any, *, optional: bool = False) -> SchemaNode:
        if isinstance(node, bool):
            return UnsupportedNode("any" if node else "never")
        if not isinstance(node, Mapping):
            raise SchemaLoadError(f"Schema nodes must be mappings, got {type(node).__name__}.")

        reference = node.get("$ref")
        schema = self._reference(reference) if reference else self._read_structure(node)
        if optional:
            schema = OptionalNode(schema)
        if node.get("readOnly") is True:
            schema = ReadonlyNode(schema)
        if "default" in node:
            schema = DefaultNode(schema, value=node["default"])

        metadata = _read_metadata(node)
        if metadata is not NO_METADATA:
            schema = replace(schema, metadata=metadata)
        return schema

    def _reference(self, reference: Any) -> LazyNode:
        if not isinstance(reference, str):
            raise SchemaLoadError("$ref must be a string.")
        if reference == _ROOT_REFERENCE:
            return LazyNode(getter=lambda: self._definition(_ROOT_REFERENCE), name=reference)
        for prefix in _DEFINITION_PREFIXES:
            if reference.startswith(prefix):
                name = reference[len(prefix) :]
                if name not in self._definitions:
                    raise SchemaLoadError(f"Unresolved $ref: {reference}")
                return LazyNode(getter=lambda: self._definition(name), name=name)
        raise SchemaLoadError(f"Only local definition references are supported: {reference}")

    def _definition(self, name: str) -> SchemaNode:
        if name not in self._resolved:
            source = self._root if name == _ROOT_REFERENCE else self._definitions[name]
            self._resolved[name] = self.read(source)
        return self._resolved[name]

    def _read_structure(self, node: Mapping[str, Any]) -> SchemaNode:
        if "const" in node:
            return LiteralNode((node["const"],))
        if "enum" in node:
            values = node["enum"]
            if not isinstance(values, Sequence) or isinstance(values, str) or not values:
                raise SchemaLoadError("'enum' must be a non-empty list.")
            return EnumNode(_enum_entries(values))
        for keyword in ("anyOf", "oneOf"):
            if keyword in node:
                options = node[keyword]
                if not isinstance(options, Sequence) or isinstance(options, str):
                    raise SchemaLoadError(f"'{keyword}' must be a list of schemas.")
                return UnionNode(tuple(self.read(option) for option in options))

        declared = node.get("type")
        if isinstance(declared, list):
            if not declared:
                raise SchemaLoadError("'type' list must not be empty.")
            if len(declared) == 1:
                return self._read_typed(node, declared[0])
            return UnionNode(tuple(self._read_typed(node, name) for name in declared))
        if isinstance(declared, str):
            return self._read_typed(node, declared)
        if declared is not None:
            raise SchemaLoadError("'type' must be a string or a list of strings.")
        if "properties" in node:
            return self._read_typed(node, "object")
        if "items" in node or "prefixItems" in node:
            return self._read_typed(node, "array")
        return UnsupportedNode("untyped")

    def _read_typed(self, node: Mapping[str, Any], type_name: Any) -> SchemaNode:
        if type_name == "string":
            return StringNode(
                min_length=node.get("minLength"),
                max_length=node.get("maxLength"),
                pattern=node.get("pattern"),
                format=node.get("format"),
            )
        if type_name in ("number", "integer"):
            return NumberNode(
                minimum=node.get("minimum"),
                maximum=node.get("maximum"),
                integer=type_name == "integer",
            )
        if type_name == "boolean":
            return BooleanNode()
        if type_name == "null":
            return NullNode()
        if type_name == "object":
            return self._read_object(node)
        if type_name == "array":
            return self._read_array(node)
        return UnsupportedNode(str(type_name))

    def _read_object(self, node: Mapping[str, Any]) -> ObjectNode:
        properties = node.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise SchemaLoadError("'properties' must be a mapping.")
        required = node.get("required") or []
        if not isinstance(required, Sequence) or isinstance(required, str):
            raise SchemaLoadError("'required' must be a list of property names.")
        required_names = frozenset(str(name) for name in required)
        fields = {
            str(name): self.read(child, optional=str(name) not in required_names)
            for name, child in properties.items()
        }
        return ObjectNode(fields=fields, required_names=required_names)

    def _read_array(self, node: Mapping[str, Any]) -> SchemaNode:
        items = node.get("prefixItems", node.get("items"))
        if isinstance(items, Sequence) and not isinstance(items, str):
            return TupleNode(tuple(self.read(item) for item in items))
        element = self.read(items) if items is not None else UnsupportedNode("untyped")
        return ArrayNode(
            element=element,
            min_size=node.get("minItems"),
            max_size=node.get("maxItems"),
        )


def _enum_entries(values: Sequence[Any]) -> dict[str, Any]:
    """Key each value by its JSON text; repeated values keep their first position."""
    entries: dict[str, Any] = {}
    for value in values:
        entries.setdefault(json.dumps(value, sort_keys=True, default=str), value)
    return entries


def _read_metadata(node: Mapping[str, Any]) -> SchemaMetadata:
    title = node.get("title")
    description = node.get("description")
    hint = None
    ui_schema = node.get("uiSchema")
    if isinstance(ui_schema, Mapping) and isinstance(ui_schema.get("component"), str):
        options = ui_schema.get("props")
        hint = PresentationHint(
            kind=ui_schema["component"],
            options=dict(options) if isinstance(options, Mapping) else {},
        )
    if title is None and description is None and hint is None:
        return NO_METADATA
    return SchemaMetadata(
        title=str(title) if title is not None else None,
        description=str(description) if description is not None else None,
        presentation_hint=hint,
    )
