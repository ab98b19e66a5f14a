"""Path segments and their canonical string keys."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

PathSegment: TypeAlias = str | int
Path: TypeAlias = tuple[PathSegment, ...]

ROOT_KEY = "/"


def to_path_key(path: Iterable[PathSegment]) -> str:
    """Serialize a path to its canonical ``/``-joined key; the root is ``/``."""
    return ROOT_KEY + "/".join(str(segment) for segment in path)


def parse_path_key(key: str) -> Path:
    """Parse a canonical key back to segments; all-digit segments become ints."""
    return tuple(_parse_segment(part) for part in key.split("/") if part)


def normalize_path(path: str | Iterable[PathSegment]) -> Path:
    """Accept either a canonical key or an iterable of segments."""
    if isinstance(path, str):
        return parse_path_key(path)
    return tuple(_parse_segment(segment) for segment in path)


def child_path(path: Iterable[PathSegment], segment: PathSegment) -> Path:
    return (*tuple(path), segment)


def is_index_segment(segment: object) -> bool:
    if isinstance(segment, bool):
        return False
    if isinstance(segment, int):
        return segment >= 0
    return isinstance(segment, str) and _is_ascii_digits(segment)


def _parse_segment(segment: PathSegment) -> PathSegment:
    if isinstance(segment, str) and _is_ascii_digits(segment):
        return int(segment)
    return segment


def _is_ascii_digits(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()
