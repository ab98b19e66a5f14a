"""Schema resolution exports."""

from .resolution_errors import (
    MalformedDefaultProducer,
    SchemaResolutionError,
    UnresolvableReference,
    UnsupportedSchemaKind,
)
from .wrapper_peeling import (
    find_declared_default,
    is_field_required,
    is_optional,
    is_required,
    iter_wrapper_chain,
    peel_one_layer,
    resolve_metadata,
    resolve_reference,
    unwrap,
)

__all__ = [
    "MalformedDefaultProducer",
    "SchemaResolutionError",
    "UnresolvableReference",
    "UnsupportedSchemaKind",
    "find_declared_default",
    "is_field_required",
    "is_optional",
    "is_required",
    "iter_wrapper_chain",
    "peel_one_layer",
    "resolve_metadata",
    "resolve_reference",
    "unwrap",
]
