"""Path-addressed reads and copy-on-write updates over form documents."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any

from .document_values import ABSENT, FormDocument
from .path_model import Path, PathSegment, is_index_segment, to_path_key


class InvalidPath(Exception):
    """Raised when a path cannot be traversed in the given document."""


class MoveDirection(str, Enum):
    """Direction for moving an array item."""

    UP = "up"
    DOWN = "down"


def get_value(document: FormDocument, path: Sequence[PathSegment]) -> FormDocument:
    """Return a copy of the value at ``path`` or ``ABSENT`` when nothing is there.

    Raises:
      InvalidPath: If the path runs through a scalar value.
    """
    return copy.deepcopy(_lookup(document, tuple(path)))


def set_value(
    document: FormDocument, path: Sequence[PathSegment], value: FormDocument
) -> FormDocument:
    """Return a new document with ``value`` stored at ``path``.

    Missing containers along the way are created: a list when the next segment
    is an index, a mapping otherwise. Setting ``ABSENT`` on a mapping key
    removes the key.

    Raises:
      InvalidPath: If the path runs through a scalar value.
    """
    segments = tuple(path)
    stored = copy.deepcopy(value)
    if not segments:
        return stored
    return _assign(document, segments, 0, stored)


def remove_value(document: FormDocument, path: Sequence[PathSegment]) -> FormDocument:
    """Return a new document without the value at ``path``.

    List entries are deleted and later items shift left. Removing a path that
    does not exist returns the document unchanged.
    """
    segments = tuple(path)
    if not segments:
        return ABSENT
    return _remove(document, segments, 0)


def move_item(
    document: FormDocument,
    array_path: Sequence[PathSegment],
    index: int,
    direction: MoveDirection | str,
) -> FormDocument:
    """Swap the item at ``index`` with its neighbour; no-op at either boundary."""
    items = _require_list(document, tuple(array_path))
    _check_index(items, index, array_path)
    step = -1 if MoveDirection(direction) is MoveDirection.UP else 1
    target = index + step
    if target < 0 or target >= len(items):
        return document
    reordered = list(items)
    reordered[index], reordered[target] = reordered[target], reordered[index]
    return set_value(document, array_path, reordered)


def remove_item(
    document: FormDocument, array_path: Sequence[PathSegment], index: int
) -> FormDocument:
    """Delete the item at ``index``; subsequent items shift left."""
    items = _require_list(document, tuple(array_path))
    _check_index(items, index, array_path)
    return set_value(document, array_path, [*items[:index], *items[index + 1 :]])


def add_item(
    document: FormDocument,
    array_path: Sequence[PathSegment],
    factory: Callable[[], FormDocument],
) -> FormDocument:
    """Append ``factory()`` to the array at ``array_path`` (created when missing)."""
    items = _require_list(document, tuple(array_path))
    return set_value(document, array_path, [*items, factory()])


def _lookup(document: FormDocument, path: Path) -> FormDocument:
    current = document
    for depth, segment in enumerate(path):
        if current is None or current is ABSENT:
            return ABSENT
        _ensure_container(current, path, depth)
        current = _child(current, segment, path, depth)
    return current


def _assign(container: Any, path: Path, depth: int, value: FormDocument) -> FormDocument:
    segment = path[depth]
    if container is None or container is ABSENT:
        container = [] if is_index_segment(segment) else {}
    _ensure_container(container, path, depth)

    if depth + 1 < len(path):
        value = _assign(_child(container, segment, path, depth), path, depth + 1, value)

    if isinstance(container, Mapping):
        updated_mapping = dict(container)
        key = str(segment)
        if value is ABSENT:
            updated_mapping.pop(key, None)
        else:
            updated_mapping[key] = value
        return updated_mapping

    updated_list = list(container)
    index = _list_index(segment, path, depth)
    if index >= len(updated_list):
        updated_list.extend([ABSENT] * (index - len(updated_list) + 1))
    updated_list[index] = value
    return updated_list


def _remove(container: Any, path: Path, depth: int) -> FormDocument:
    if container is None or container is ABSENT:
        return container
    _ensure_container(container, path, depth)
    segment = path[depth]

    if depth + 1 < len(path):
        child = _child(container, segment, path, depth)
        if child is ABSENT:
            return container
        replacement = _remove(child, path, depth + 1)
        return _assign(container, path[: depth + 1], depth, replacement)

    if isinstance(container, Mapping):
        return {key: item for key, item in container.items() if key != str(segment)}
    index = _list_index(segment, path, depth)
    return [item for position, item in enumerate(container) if position != index]


def _child(container: Any, segment: PathSegment, path: Path, depth: int) -> FormDocument:
    if isinstance(container, Mapping):
        return container.get(str(segment), ABSENT)
    index = _list_index(segment, path, depth)
    return container[index] if index < len(container) else ABSENT


def _ensure_container(value: Any, path: Path, depth: int) -> None:
    if not isinstance(value, Mapping | list):
        raise InvalidPath(
            f"Cannot read {path[depth]!r} from {type(value).__name__} value at "
            f"{to_path_key(path[:depth])} (path {to_path_key(path)})."
        )


def _list_index(segment: PathSegment, path: Path, depth: int) -> int:
    if not is_index_segment(segment):
        raise InvalidPath(
            f"Array at {to_path_key(path[:depth])} requires a non-negative index, "
            f"got {segment!r}."
        )
    return int(segment)


def _require_list(document: FormDocument, path: Path) -> list[FormDocument]:
    items = _lookup(document, path)
    if items is None or items is ABSENT:
        return []
    if not isinstance(items, list):
        raise InvalidPath(
            f"Expected an array at {to_path_key(path)}, found {type(items).__name__}."
        )
    return items


def _check_index(items: list[FormDocument], index: int, array_path: Sequence[PathSegment]) -> None:
    if isinstance(index, bool) or not 0 <= index < len(items):
        raise InvalidPath(
            f"Index {index!r} is out of range for array of length {len(items)} "
            f"at {to_path_key(array_path)}."
        )
