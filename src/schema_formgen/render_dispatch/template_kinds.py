"""Closed set of rendering capabilities."""

from __future__ import annotations

from enum import Enum


class TemplateKind(str, Enum):
    """Renderer family a schema node requires."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIG_INTEGER = "big_integer"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    TUPLE = "tuple"
    ENUM = "enum"
    UNSUPPORTED = "unsupported"


class EditorVariant(str, Enum):
    """Concrete editor chosen within a ``TemplateKind``."""

    TEXT_INPUT = "text_input"
    TEXTAREA = "textarea"
    EMAIL_INPUT = "email_input"
    URL_INPUT = "url_input"
    DATE_INPUT = "date_input"
    DATETIME_INPUT = "datetime_input"
    NUMBER_INPUT = "number_input"
    RANGE = "range"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    CHECKBOX_GROUP = "checkbox_group"
    LIST = "list"
    FIELDSET = "fieldset"
    FIXED_LIST = "fixed_list"
    LITERAL_CHOICE = "literal_choice"
    OPTION_SWITCHER = "option_switcher"
    PLACEHOLDER = "placeholder"
