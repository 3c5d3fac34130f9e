"""Command-line interface for hive2parquet."""

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import Config, LogLevel, OutputFormat
from .logger import create_logger
from .service import ConversionService


def validate_input_file(ctx, param, value):
    """Validate input file exists and has correct extension."""
    if value is None:
        return None

    path = Path(value)
    if not path.exists():
        raise click.BadParameter(f"Input file does not exist: {value}")

    if path.suffix.lower() != ".json":
        raise click.BadParameter(f"Input file must have .json extension: {value}")

    return path


@click.command()
@click.version_option(__version__)
@click.option(
    "--input", "-i",
    required=True,
    callback=validate_input_file,
    help="Path to JSON column definition file"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    help="Write the schema to this file instead of stdout"
)
@click.option(
    "--format", "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Schema rendering: Parquet text notation or JSON"
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel]),
    default=LogLevel.WARN.value,
    help="Logging level"
)
@click.option(
    "--pretty/--compact",
    default=True,
    help="Indent JSON output (default: pretty)"
)
def main(
    input: Path,
    output: Optional[Path],
    output_format: str,
    log_level: str,
    pretty: bool,
) -> None:
    """Convert a Hive table schema into a Parquet message type.

    Examples:
        # Print the Parquet schema
        hive2parquet --input columns.json

        # Write the schema as JSON
        hive2parquet --input columns.json --format json --output schema.json
    """
    config = Config.from_cli_args(
        input_file=input,
        output_file=output,
        output_format=output_format,
        log_level=log_level,
        pretty=pretty,
    )

    logger = create_logger(level=config.logging.level, component="cli",
                           destination=config.logging.destination)

    errors = config.validate()
    if errors:
        logger.error("Configuration validation failed", errors=errors)
        for error in errors:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)

    logger.info(
        "Starting hive2parquet conversion",
        inputFile=str(config.input_file),
        outputFormat=config.output_format.value,
    )

    try:
        result = ConversionService(config).run()
    except KeyboardInterrupt:
        logger.info("Conversion interrupted by user")
        click.echo("\nConversion interrupted by user", err=True)
        sys.exit(130)

    if not result.success:
        click.echo("✗ Conversion failed:", err=True)
        for error in result.errors:
            click.echo(f"  {error}", err=True)
        sys.exit(1)

    if config.output_file is None:
        click.echo(result.rendered, nl=False)
    else:
        click.echo(f"✓ Schema written to {config.output_file}", err=True)
        click.echo(f"  Columns: {result.statistics['columns']}", err=True)


if __name__ == "__main__":
    main()
