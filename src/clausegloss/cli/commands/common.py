"""Options and helpers shared by the CLI commands."""

import sys
from collections.abc import Callable
from typing import Any

import click

from clausegloss.config.loader import ConfigLoader
from clausegloss.lib.errors import ConfigError, FileNotFoundError
from clausegloss.lib.logging_config import get_logger, setup_logging
from clausegloss.models.config import GlossaryConfig

logger = get_logger(__name__)


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --config, --verbose and --quiet to a command."""
    func = click.option(
        "--quiet", "-q", is_flag=True, help="Only log errors"
    )(func)
    func = click.option(
        "--verbose", "-v", is_flag=True, help="Enable debug logging"
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Path to a ClauseGloss YAML config file",
    )(func)
    return func


def load_runtime_config(
    config_path: str | None, verbose: bool, quiet: bool
) -> GlossaryConfig:
    """Load configuration and configure logging, exiting on config errors.

    Command-line flags take precedence over the verbose/quiet values in
    the configuration.
    """
    try:
        config = ConfigLoader().load(config_path)
    except (ConfigError, FileNotFoundError) as e:
        setup_logging(verbose=verbose, quiet=quiet)
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Failed to load configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(1)

    setup_logging(verbose=verbose or config.verbose, quiet=quiet or config.quiet)
    logger.debug(f"Effective configuration: {config.model_dump()}")
    return config
