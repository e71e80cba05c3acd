#!/usr/bin/env python3
"""
Main CLI for the Font Directory Generator
=========================================

This CLI discovers the latest font directory and generates the family
lookup data file.
"""

import logging
import sys
from pathlib import Path

import click

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

try:
    from src.font_directory.core.config import DirectoryConfig, create_session
    from src.font_directory.core.exceptions import FontDirectoryError
    from src.font_directory.core.models import FontStyle, OutputTable
    from src.font_directory.directory.pipeline import run_pipeline
    from src.font_directory.directory.prober import VersionProber
    from src.font_directory.directory.writer import write_output
except ImportError as e:
    logger.exception(f"Import failed: {e}")
    logger.exception(
        "Make sure you have all dependencies installed and the project is properly set up"
    )
    sys.exit(1)


def load_config(config_path: Path | None, **overrides) -> DirectoryConfig:
    """Load configuration and apply command line overrides that were given."""
    config = DirectoryConfig.from_env_and_yaml(yaml_path=config_path)
    updates = {key: value for key, value in overrides.items() if value is not None}
    return config.model_copy(update=updates) if updates else config


def apply_log_level(config: DirectoryConfig) -> None:
    """Use the configured log level unless --verbose was given."""
    ctx = click.get_current_context(silent=True)
    if ctx is not None and (ctx.find_root().obj or {}).get("verbose"):
        return
    logging.getLogger().setLevel(config.log_level)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, verbose):
    """Font Directory Generator CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the generated data file",
)
@click.option("--initial-version", type=click.IntRange(min=0), help="First version to probe")
@click.option("--no-progress", is_flag=True, help="Hide the download progress bar")
def generate(config, output, initial_version, no_progress):
    """Generate the font data file from the latest directory."""
    try:
        directory_config = load_config(
            config,
            output_path=output,
            initial_version=initial_version,
            show_progress=False if no_progress else None,
        )
        apply_log_level(directory_config)
    except FontDirectoryError as e:
        logger.exception(f"Configuration failed: {e}")
        sys.exit(1)

    result = run_pipeline(directory_config)
    if not result.success:
        logger.error(f"Error occurred in {result.stage} stage: {result.error}")
        if result.error.__cause__ is not None:
            logger.error(f"Caused by: {result.error.__cause__!r}")
        sys.exit(1)

    logger.info("Writing to JSON file")
    try:
        path = write_output(result.output, directory_config.output_path)
    except OSError as e:
        logger.exception(f"Failed to write {directory_config.output_path}: {e}")
        sys.exit(1)
    logger.info(f"Success! Wrote the data to {path}")


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option("--initial-version", type=click.IntRange(min=0), help="First version to probe")
def latest(config, initial_version):
    """Print the URL of the latest font directory."""
    try:
        directory_config = load_config(config, initial_version=initial_version)
        apply_log_level(directory_config)
        session = create_session(directory_config)
        try:
            url = VersionProber(directory_config, session).resolve_latest_url()
        finally:
            session.close()
    except FontDirectoryError as e:
        logger.exception(f"Discovery failed: {e}")
        sys.exit(1)

    click.echo(url)


@cli.command()
@click.argument("family")
@click.option(
    "--data",
    "-d",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=Path("src/data.json"),
    show_default=True,
    help="Generated data file",
)
@click.option("--italic", is_flag=True, help="Show italic weights")
def show(family, data, italic):
    """Show weight to file hash mappings of a family."""
    style = FontStyle.ITALIC if italic else FontStyle.NORMAL
    try:
        table = OutputTable.load(data)
        weights = table.weights(family, style)
    except FontDirectoryError as e:
        logger.error(f"Lookup failed: {e}")
        sys.exit(1)

    if not weights:
        click.echo(f"{family} has no {style.value} fonts")
        return

    click.echo(f"{family} ({style.value})")
    for weight in weights:
        click.echo(f"  {weight}: {table.font_hash(family, weight, style)}")


if __name__ == "__main__":
    cli()
