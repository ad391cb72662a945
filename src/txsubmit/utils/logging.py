"""
Logging configuration for txsubmit.

All library loggers live under the ``txsubmit`` namespace and carry no
handlers until the application opts in with :func:`configure_logging`.
Structured context is passed through ``extra={...}`` and rendered by the
default formatter as ``key=value`` pairs.

Example:
    >>> from txsubmit.utils.logging import get_logger, configure_logging
    >>> configure_logging("DEBUG")
    >>> _logger = get_logger(__name__)
    >>> _logger.info("Transaction submitted", extra={"hash": "0xabc..."})
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "txsubmit"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ContextFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not context:
            return base
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{base} [{pairs}]"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the ``txsubmit`` namespace.

    Args:
        name: Module name (``__name__``). Names outside the namespace are
            nested under it.

    Returns:
        Configured ``logging.Logger``
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    Attach a handler to the library root logger.

    Calling this more than once replaces the previously installed handler.

    Args:
        level: Log level name or number
        fmt: Format string for the handler
        handler: Custom handler (defaults to a ``StreamHandler``)

    Returns:
        The ``txsubmit`` root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        if getattr(existing, "_txsubmit_handler", False):
            root.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(ContextFormatter(fmt))
    handler._txsubmit_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    set_level(level)
    return root


def set_level(level: Union[int, str]) -> None:
    """Set the level of the library root logger."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def disable_logging() -> None:
    """Silence all library logging."""
    logging.getLogger(ROOT_LOGGER_NAME).disabled = True


def enable_debug() -> None:
    """Re-enable library logging at DEBUG level."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.disabled = False
    set_level(logging.DEBUG)


__all__ = [
    "ROOT_LOGGER_NAME",
    "ContextFormatter",
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
]
