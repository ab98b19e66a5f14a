"""Form document value helpers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any, Final, TypeAlias


class _Absent(Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent.ABSENT
"""No value at all; distinct from ``None`` which is an explicit null."""

FormDocument: TypeAlias = Any


def is_absent(value: object) -> bool:
    return value is ABSENT


def to_plain_data(value: FormDocument) -> FormDocument:
    """Return a JSON-compatible copy of a document.

    Absent object entries are dropped, absent list slots become ``None`` and
    dates become ISO-8601 strings. Big integers stay Python ints.
    """
    if value is ABSENT:
        return None
    if isinstance(value, Mapping):
        return {
            str(key): to_plain_data(item) for key, item in value.items() if item is not ABSENT
        }
    if isinstance(value, list | tuple):
        return [to_plain_data(item) for item in value]
    if isinstance(value, date):
        return value.isoformat()
    return value
