"""Document access exports."""

from .document_values import ABSENT, FormDocument, is_absent, to_plain_data
from .path_accessor import (
    InvalidPath,
    MoveDirection,
    add_item,
    get_value,
    move_item,
    remove_item,
    remove_value,
    set_value,
)
from .path_model import (
    ROOT_KEY,
    Path,
    PathSegment,
    child_path,
    is_index_segment,
    normalize_path,
    parse_path_key,
    to_path_key,
)

__all__ = [
    "ABSENT",
    "FormDocument",
    "InvalidPath",
    "MoveDirection",
    "Path",
    "PathSegment",
    "ROOT_KEY",
    "add_item",
    "child_path",
    "get_value",
    "is_absent",
    "is_index_segment",
    "move_item",
    "normalize_path",
    "parse_path_key",
    "remove_item",
    "remove_value",
    "set_value",
    "to_path_key",
    "to_plain_data",
]
