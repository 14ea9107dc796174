"""Logging setup for the house price maps.

Handlers live on the ``price_maps`` logger only; module loggers are its
children and propagate to it.
"""

import logging
from logging.handlers import RotatingFileHandler

from price_maps import map_config as config

PACKAGE_LOGGER = "price_maps"


def configure_logging(level=None, log_file=None):
    """Attach the rotating file and console handlers to the package logger.

    Handlers are attached on the first call only; later calls can still
    change the level.

    Args:
        level (str | int | None): Log level. Defaults to
            `map_config.get_log_level()` on first configuration.
        log_file (Path | None): Log file path. Defaults to
            `map_config.get_log_file()`.

    Returns:
        logging.Logger: The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if level is not None:
        package_logger.setLevel(level)

    if getattr(package_logger, "_price_maps_configured", False):
        return package_logger

    if level is None:
        package_logger.setLevel(config.get_log_level())

    log_path = log_file or config.get_log_file()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    ))
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))

    package_logger.addHandler(file_handler)
    package_logger.addHandler(console_handler)
    package_logger._price_maps_configured = True  # type: ignore[attr-defined]
    return package_logger


def get_logger(name):
    """Return a logger under the package logger, e.g. "app" -> "price_maps.app".

    Args:
        name (str): Module or component name.

    Returns:
        logging.Logger: Child logger sharing the package handlers.
    """
    configure_logging()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
