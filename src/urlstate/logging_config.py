"""Logging setup for the urlstate command line.

Library modules only create ``logging.getLogger(__name__)`` loggers under
the ``urlstate`` namespace; handlers are installed here, by the CLI.
"""

import logging
import sys

_DEBUG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Send urlstate log records to stdout for a CLI run.

    Args:
        level: Name of the level for the ``urlstate`` loggers, e.g. "WARNING"
        debug: Force DEBUG and include logger names and line numbers
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=_DEBUG_FORMAT if debug else _DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("urlstate").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a urlstate module name."""
    return logging.getLogger(name)
