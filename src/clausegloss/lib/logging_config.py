"""Logging configuration for ClauseGloss.

All loggers live under the ``clausegloss`` namespace so that the CLI can
raise or silence the whole package with a single call to setup_logging().
"""

import logging
import sys

ROOT_LOGGER_NAME = "clausegloss"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ClauseGloss namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger named ``name`` if it is already namespaced, otherwise
        ``clausegloss.<name>``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the ClauseGloss root logger.

    Quiet wins over verbose: quiet only lets errors through, verbose
    enables DEBUG, and the default level is WARNING.

    Args:
        verbose: Emit debug output.
        quiet: Suppress everything below ERROR.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Reconfiguring replaces our own handler instead of stacking a new one
    for handler in list(root.handlers):
        if getattr(handler, "_clausegloss_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._clausegloss_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
