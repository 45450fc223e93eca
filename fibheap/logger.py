"""Logging setup shared by every module in the package.

Modules obtain their logger with ``logger = init_logger(__name__)``. All
package loggers hang off a single ``fibheap`` root that owns one stream
handler, so the level can be changed in one place with :func:`set_level`.
"""

import logging
import os
import sys

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"


def _resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Overridden by FIBHEAP_LOG_LEVEL or the CLI --log-level flag.
DEFAULT_LOG_LEVEL = _resolve_level(os.environ.get("FIBHEAP_LOG_LEVEL", "INFO"))

_root_logger = logging.getLogger("fibheap")
_default_handler = None


def _setup_logger():
    global _default_handler
    _root_logger.setLevel(DEFAULT_LOG_LEVEL)
    if _default_handler is None:
        if _root_logger.handlers:
            _default_handler = _root_logger.handlers[0]
        else:
            _default_handler = logging.StreamHandler(sys.stderr)
            _default_handler.setLevel(logging.DEBUG)
            _root_logger.addHandler(_default_handler)
    _default_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    _root_logger.propagate = False


_setup_logger()


def set_level(level) -> None:
    """Set the level of every package logger (name or ``logging`` constant)."""
    if isinstance(level, str):
        level = _resolve_level(level)
    _root_logger.setLevel(level)


def init_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
