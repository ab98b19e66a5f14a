"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .form_configuration import FormConfiguration, SchemaSource, ValidationSettings
from .loader import (
    ConfigurationError,
    build_form_settings,
    load_document_file,
    load_form_configuration,
)

__all__ = [
    "FormConfiguration",
    "SchemaSource",
    "ValidationSettings",
    "ConfigurationError",
    "build_form_settings",
    "load_document_file",
    "load_form_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
