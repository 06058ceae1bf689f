"""Logging setup for the sitecheck CLI and service."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT_LOGGER = "sitecheck"
_CONSOLE_FORMAT = "[sitecheck] %(levelname)s %(message)s"
# Verbose runs also name the component (``checks.config``, ``content.duplicates``...).
_VERBOSE_CONSOLE_FORMAT = "[sitecheck] %(levelname)s %(component)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(component)s: %(message)s"


class _ComponentFilter(logging.Filter):
    """Expose the logger name relative to the ``sitecheck`` root as ``component``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{_ROOT_LOGGER}."
        name = record.name
        record.component = name[len(prefix):] if name.startswith(prefix) else name
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``sitecheck.<name>``, or the root sitecheck logger."""
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}" if name else _ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send sitecheck records to stderr and, optionally, to ``log_file``.

    Calling this again replaces the handlers installed by a previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter(_VERBOSE_CONSOLE_FORMAT if verbose else _CONSOLE_FORMAT)
    )
    handlers: list[logging.Handler] = [console]
    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(sink)

    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_ComponentFilter())
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
