"""
Logging configuration for the ``autolinkgen`` CLI.

main.py calls ``setup_logging`` once. Handlers go on the ``autolinkgen``
package logger only, so a build tool that imports the generators keeps
its own root logging untouched. Modules log through
``logging.getLogger(__name__)``, which puts every record under that logger.

Console level: --debug / --verbose / --quiet  >  AUTOLINKGEN_LOG_LEVEL  >  WARNING.
AUTOLINKGEN_LOG_FILE adds a file handler at AUTOLINKGEN_LOG_FILE_LEVEL
(defaults to the console level).
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "autolinkgen"

# Warnings and errors read like CLI output; lower levels say where they came from
_CONSOLE_FORMATS = {
    logging.DEBUG: "%(levelname)s %(name)s:%(lineno)d: %(message)s",
    logging.INFO: "%(levelname)s %(name)s: %(message)s",
}
_CONSOLE_DEFAULT = "%(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call.

    Returns:
        The configured ``autolinkgen`` logger.
    """
    console_level = parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(_CONSOLE_FORMATS.get(console_level, _CONSOLE_DEFAULT))
    )
    logger.addHandler(console)

    logger_level = console_level
    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        logger.addHandler(fh)
        logger_level = min(logger_level, file_level)

    logger.setLevel(logger_level)
    logger.propagate = False
    return logger


def parse_level(level: str | None) -> int:
    """Map a level name to its constant; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
