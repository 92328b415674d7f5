"""
Logging Configuration
Sets up the package logger for builders, IO and the command line.

Builders get their own level, so `--builder-log-level DEBUG` traces every
built mesh while IO and the command line stay at INFO.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "spritemesh"
BUILDER_LOGGER = "spritemesh.builders"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    builder_level: Optional[int] = None,
) -> None:
    """
    Configures the logger for the 'spritemesh' namespace.

    Args:
        level: Logging level for the CLI and IO (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        builder_level: Level of the 'spritemesh.builders' loggers. Follows `level` when omitted.
    """
    if builder_level is None:
        builder_level = level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logging.getLogger(BUILDER_LOGGER).setLevel(builder_level)

    # Repeated calls (tests, CLI re-entry) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # Handlers pass whatever either logger lets through
    handler_level = min(level, builder_level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(
        f"Logging initialized (package {logging.getLevelName(level)}, "
        f"builders {logging.getLevelName(builder_level)})."
    )
