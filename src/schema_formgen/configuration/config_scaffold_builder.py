"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "form.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Form configuration template for schema-formgen.
# Replace every <REQUIRED> placeholder before running defaults, fields or validate.
# Replace <OPTIONAL> placeholders only when your form needs them.

schema:
  # Provide either an inline JSON Schema (JSON or YAML text) or a schema path.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

initial_data:
  # Omit this section to start from the defaults synthesized from the schema.
  # path: "<OPTIONAL>"
  # inline: {}

# edit or readonly
mode: edit

validation:
  format_checks: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML form configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder form configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Form configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
