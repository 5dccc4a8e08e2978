"""
Logging setup for scripts and actions.

**Conceptual**: Library modules only ever call logging.getLogger(__name__) and
never configure handlers themselves. Entry points (actions/, main.py) call
configure_logging() once at startup so the log level comes from settings.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the "numtasks" logger hierarchy with a single stream handler.

    Calling this more than once replaces the handler instead of stacking a
    second one, so repeated calls (e.g. in tests) do not duplicate output.

    Args:
        level: Standard logging level name ("DEBUG", "INFO", "WARNING", ...).

    Returns:
        The configured "numtasks" package logger.
    """
    package_logger = logging.getLogger("numtasks")
    package_logger.setLevel(level.upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
