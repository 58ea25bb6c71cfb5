import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "LOG_LEVEL"

_LOGGING_CONFIGURED = False
_INSTALLED_HANDLERS: list[logging.Handler] = []


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "").strip() or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None) -> int:
    """
    Configures root logging once and returns the applied level.

    Arguments:
        level (str | int | None): Explicit level; falls back to LOG_LEVEL,
            then INFO.

    Returns:
        int: The numeric logging level now in effect.
    """
    global _LOGGING_CONFIGURED, _INSTALLED_HANDLERS
    resolved = _resolve_level(level)
    root_logger = logging.getLogger()
    if not _LOGGING_CONFIGURED:
        existing = list(root_logger.handlers)
        logging.basicConfig(format=LOG_FORMAT, level=resolved)
        _INSTALLED_HANDLERS = [
            handler for handler in root_logger.handlers if handler not in existing
        ]
        _LOGGING_CONFIGURED = True
    root_logger.setLevel(resolved)
    for handler in _INSTALLED_HANDLERS:
        handler.setLevel(resolved)
    return resolved


def get_logger(name: str) -> logging.Logger:
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logging.getLogger(name)
