"""
Logging configuration for logo_presets.

Logging is configured lazily: nothing is printed unless the application calls
set_verbosity() or configures the "logo_presets" logger itself.

Verbosity levels:
- 0 (default): WARNING only
- 1: INFO: user file loads, lookup misses and merged option contents
- 2: DEBUG: same + envelope validation and catalog loading
"""

import logging

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER_NAME = "logo_presets"

_log_options: bool = False


def set_verbosity(level: int) -> None:
    """Set logging verbosity (0, 1 or 2), attaching a stderr handler on first use."""
    global _log_options
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    if level <= 0:
        root.setLevel(logging.WARNING)
    elif level == 1:
        root.setLevel(logging.INFO)
    else:
        root.setLevel(logging.DEBUG)
    _log_options = level >= 1


def log_options() -> bool:
    """Return True if merged option contents should be logged (verbosity 1 or 2)."""
    return _log_options


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under logo_presets (e.g. logo_presets.core.loader)."""
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(ROOT_LOGGER_NAME + "." + name)


__all__ = ["get_logger", "log_options", "set_verbosity"]
