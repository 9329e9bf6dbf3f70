"""Command-line entry point.

This module is a thin wrapper that loads configuration and the
property dataset, then hands control to the interactive session.
"""

import logging
import sys

import click
import yaml

from prop_filter.app import PropFilterApp
from prop_filter.core.config import validate_config
from prop_filter.shell.config_loader import apply_env_overrides, load_config
from prop_filter.shell.dataset_loader import DatasetLoadError, load_properties


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging; logs go to stderr, results to stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to YAML config file (default: $CONFIG_PATH or config/config.yaml)",
)
@click.option(
    "--properties",
    "properties_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the JSON property dataset (overrides config)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides config)",
)
def cli(config_path: str | None, properties_path: str | None, log_level: str | None) -> None:
    """Prop Filter: interactively filter real-estate listings."""
    try:
        config = apply_env_overrides(load_config(config_path))
    except yaml.YAMLError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(1)

    if properties_path:
        config.properties_path = properties_path
    if log_level:
        config.log_level = log_level.upper()

    configure_logging(config.log_level)

    report = validate_config(config)
    for warning in report.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not report.ok:
        for error in report.errors:
            click.echo(f"Config error in {error.field}: {error.message}", err=True)
        sys.exit(1)

    try:
        properties = load_properties(config.properties_path)
    except DatasetLoadError as e:
        logger.debug("Dataset load failed", exc_info=True)
        click.echo(f"Error reading properties: {e}")
        sys.exit(1)

    app = PropFilterApp(properties, config)
    sys.exit(app.run())


if __name__ == "__main__":
    cli()
