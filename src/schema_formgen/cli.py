"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from schema_formgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    FormConfiguration,
    build_form_settings,
    load_document_file,
    load_form_configuration,
    write_placeholder_configuration,
)
from schema_formgen.default_generation import generate_default
from schema_formgen.document_access import to_plain_data
from schema_formgen.error_indexing import ErrorIndex
from schema_formgen.form_session import FormController
from schema_formgen.render_dispatch import describe_fields
from schema_formgen.schema_resolution import SchemaResolutionError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-formgen")
@click.option("--verbose", is_flag=True, default=False, help="Log diagnostics to stderr.")
def cli(verbose: bool) -> None:
    """Schema-driven form data utility."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON form configuration file",
)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML form configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML form configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="defaults")
@_CONFIG_OPTION
def defaults(config_path: str) -> None:
    """Print the initial document synthesized from the configured schema."""
    configuration = _load(config_path)
    try:
        document = generate_default(configuration.schema)
    except SchemaResolutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(_to_json(to_plain_data(document)))


@cli.command(name="fields")
@_CONFIG_OPTION
def fields(config_path: str) -> None:
    """Print the template kind and editor chosen for every schema field."""
    configuration = _load(config_path)
    try:
        plans = describe_fields(configuration.schema)
    except SchemaResolutionError as exc:
        raise CliError(str(exc)) from exc
    for plan in plans:
        required = "required" if plan.required else "optional"
        click.echo(
            "\t".join(
                (
                    plan.path_key,
                    plan.template_kind.value,
                    plan.editor.value,
                    required,
                    plan.title or "",
                )
            )
        )


@cli.command(name="validate")
@_CONFIG_OPTION
@click.option(
    "--document",
    "document_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional JSON/YAML document to validate instead of the configured initial data",
)
def validate(config_path: str, document_path: str | None) -> None:
    """Validate a document and print its issues grouped by field path."""
    configuration = _load(config_path)
    try:
        initial_data = (
            load_document_file(document_path) if document_path else configuration.initial_data
        )
        controller = FormController(
            configuration.schema,
            settings=build_form_settings(configuration),
            initial_data=initial_data,
        )
        outcome = controller.submit()
    except (ConfigurationError, SchemaResolutionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(_to_json(_error_index_payload(outcome.errors)))
    if not outcome.is_valid:
        raise click.exceptions.Exit(1)


def _load(config_path: str) -> FormConfiguration:
    try:
        return load_form_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _error_index_payload(errors: ErrorIndex) -> dict[str, list[dict[str, str | None]]]:
    return {
        key: [{"message": issue.message, "code": issue.code} for issue in bucket]
        for key, bucket in errors.items()
    }


def _to_json(value: object) -> str:
    return json.dumps(value, indent=2, default=str)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
