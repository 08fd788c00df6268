"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from schema_ref_resolver.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_ref_resolver.resolution import SchemaResolver
from schema_ref_resolver.schema_documents import (
    SchemaDocumentError,
    dump_schema_document,
    load_schema_document,
    write_schema_document,
)
from schema_ref_resolver.schema_registry import JsonObject


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-ref-resolver")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """Bundle JSON Schema documents into one document with local $ref values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML resolver configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML resolver configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON resolver configuration file",
)
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the root JSON Schema document",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the resolved document (defaults to stdout)",
)
@click.option(
    "--merge-definitions",
    "merge",
    required=False,
    default=None,
    type=click.BOOL,
    help="Override merge_definitions from the configuration (true/false).",
)
def resolve_schema(
    config_path: str, schema_path: str, output_path: str | None, merge: bool | None
) -> None:
    """Resolve the root schema against the configured external schemas."""
    try:
        configuration = load_configuration(config_path)
        root_schema = load_schema_document(schema_path)
    except (ConfigurationError, SchemaDocumentError, OSError) as exc:
        raise CliError(str(exc)) from exc
    options = configuration.options
    if merge is not None:
        options = replace(options, merge_definitions=merge)
    _emit(SchemaResolver(options).resolve(root_schema), output_path)


@cli.command(name="definitions")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON resolver configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the definitions document (defaults to stdout)",
)
def export_definitions(config_path: str, output_path: str | None) -> None:
    """Export every configured external schema as a definitions document."""
    try:
        configuration = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _emit(SchemaResolver(configuration.options).definitions(), output_path)


def _emit(document: JsonObject, output_path: str | None) -> None:
    try:
        if output_path is None:
            click.echo(dump_schema_document(document), nl=False)
            return
        resolved_output = write_schema_document(document, output_path)
    except (SchemaDocumentError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
