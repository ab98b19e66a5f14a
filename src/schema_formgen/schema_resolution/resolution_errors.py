"""Schema resolution failures."""

from __future__ import annotations


class SchemaResolutionError(Exception):
    """Base class for failures while walking a schema."""


class UnresolvableReference(SchemaResolutionError):
    """Raised when a lazy reference cannot be resolved or resolves into a cycle."""


class MalformedDefaultProducer(SchemaResolutionError):
    """Raised when a declared default producer fails."""


class UnsupportedSchemaKind(SchemaResolutionError):
    """Diagnostic for a schema kind with no handling; never fatal."""

    def __init__(self, kind: str, path_key: str | None = None) -> None:
        location = f" at path: {path_key}" if path_key is not None else ""
        super().__init__(f"Unsupported schema type: {kind}{location}")
        self.kind = kind
        self.path_key = path_key
