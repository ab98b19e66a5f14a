"""Author-supplied metadata attached to schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class PresentationHint:
    """Explicit editor request, e.g. ``PresentationHint("range")``."""

    kind: str
    options: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)


@dataclass(frozen=True)
class SchemaMetadata:
    """Opaque, read-only metadata bag of one schema node."""

    title: str | None = None
    description: str | None = None
    presentation_hint: PresentationHint | None = None
    extras: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @property
    def is_empty(self) -> bool:
        return (
            self.title is None
            and self.description is None
            and self.presentation_hint is None
            and not self.extras
        )

    def overlay(self, outer: SchemaMetadata) -> SchemaMetadata:
        """Return metadata where every value set on ``outer`` wins over this one."""
        return SchemaMetadata(
            title=outer.title if outer.title is not None else self.title,
            description=outer.description if outer.description is not None else self.description,
            presentation_hint=(
                outer.presentation_hint
                if outer.presentation_hint is not None
                else self.presentation_hint
            ),
            extras={**self.extras, **outer.extras},
        )


NO_METADATA = SchemaMetadata()
