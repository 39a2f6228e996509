import logging
import sys
import json

from .core.config import settings

_FORMAT = json.dumps(
    {
        "ts": "%(asctime)s",
        "lvl": "%(levelname)s",
        "mod": "%(name)s",
        "msg": "%(message)s",
    }
)

# Names of loggers configured by get_logger, so their level can be changed later.
_configured: set[str] = set()


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a JSON-configured logger writing to stderr.

    Stdout is left to reports and ``--json`` output.
    The level comes from ``settings.log_level`` (``PULSEAI_LOG_LEVEL``).
    Existing handlers are reused so repeated calls do not duplicate output.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    _configured.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Apply ``level`` to every logger created through :func:`get_logger`."""
    level = level.upper()
    for name in _configured:
        logging.getLogger(name).setLevel(level)
