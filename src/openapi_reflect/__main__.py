"""CLI entry point for openapi-reflect."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .config import Config
from .exceptions import OpenApiReflectError
from .schema_gen.naming import NAMING_STRATEGIES, get_naming_strategy
from .schema_gen.schema_generator_service import SchemaGeneratorService
from .utils.logging_setup import configure_logging


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="OPENAPI_REFLECT_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Falls back to the Config object's level
    help="Override the logging level (e.g., DEBUG, INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """openapi-reflect - Generates OpenAPI schemas from Python types."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env if present)
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


def _emit(text: str, output_file: Optional[str]) -> None:
    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(text)
        except IOError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
        click.echo(f"Schema written to {output_file}", err=True)
    else:
        click.echo(text)


@cli.command()
@click.argument("type_reference")
@click.option(
    "--naming", "-n",
    type=click.Choice(sorted(NAMING_STRATEGIES), case_sensitive=False),
    default=None,
    help="Property naming strategy. Defaults to the configured one."
)
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "yaml"], case_sensitive=False), default=None)
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Write the schema to this file instead of stdout."
)
@click.pass_context
def schema(ctx: click.Context, type_reference: str, naming: Optional[str], output_format: Optional[str], output_file: Optional[str]) -> None:
    """Generates the schema of TYPE_REFERENCE ('package.module:TypeName')."""
    config: Config = ctx.obj["config"]
    service = SchemaGeneratorService(config, get_naming_strategy(naming) if naming else None)

    try:
        type_ = service.resolve_type(type_reference)
    except (ImportError, AttributeError, OpenApiReflectError) as e:
        click.echo(f"Cannot resolve type '{type_reference}': {e}", err=True)
        sys.exit(1)

    try:
        text = service.render(service.schema_for(type_), output_format)
    except OpenApiReflectError as e:
        click.echo(f"Schema generation failed: {e}", err=True)
        sys.exit(1)
    _emit(text, output_file)


@cli.command("import-schema")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "yaml"], case_sensitive=False), default=None)
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Write the schema to this file instead of stdout."
)
@click.pass_context
def import_schema(ctx: click.Context, path: str, output_format: Optional[str], output_file: Optional[str]) -> None:
    """Converts the JSON Schema document at PATH into an OpenAPI schema."""
    config: Config = ctx.obj["config"]
    service = SchemaGeneratorService(config)

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
        imported = service.import_schema(document)
    except (ValueError, OpenApiReflectError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
        click.echo(f"Cannot import JSON Schema from {path}: {e}", err=True)
        sys.exit(1)
    _emit(service.render(imported, output_format), output_file)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"openapi-reflect v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
