"""Schema metadata tests."""

from __future__ import annotations

from schema_formgen.schema_model import NO_METADATA, PresentationHint, SchemaMetadata


def test_metadata_defaults_are_empty_read_only_mappings() -> None:
    hint = PresentationHint("range")
    metadata = SchemaMetadata(title="Age")

    assert dict(hint.options) == {}
    assert dict(metadata.extras) == {}
    assert NO_METADATA.is_empty
    assert not metadata.is_empty


def test_overlay_keeps_outer_values_and_merges_extras() -> None:
    inner = SchemaMetadata(title="Inner", description="Kept", extras={"a": 1, "b": 1})
    outer = SchemaMetadata(title="Outer", presentation_hint=PresentationHint("textarea"))

    merged = inner.overlay(outer)

    assert merged.title == "Outer"
    assert merged.description == "Kept"
    assert merged.presentation_hint == PresentationHint("textarea")
    assert dict(merged.extras) == {"a": 1, "b": 1}
