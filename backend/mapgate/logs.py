"""Logging setup and the server/admin console channels.

Every module logs through its own ``mapgate.<area>.<module>`` logger. The
two channels below carry the operator-facing event stream: ``server`` for
routine traffic (only promoted to INFO when ``EXTRA_LOGGING`` is on) and
``admin`` for privileged actions, which are always reported.
"""

import logging

from mapgate.config import settings

server_logger = logging.getLogger("mapgate.server")
admin_logger = logging.getLogger("mapgate.admin")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_NOISY_LOGGERS = ("httpx", "uvicorn.access")


def configure_logging(level: str | None = None) -> None:
    """Configure the root handler once for the whole process."""
    logging.basicConfig(
        format=_LOG_FORMAT,
        level=level or settings.LOG_LEVEL,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def shorten_name(name: str) -> str:
    """Return the log-safe prefix of a username."""
    return name[:5]


def server_log(message: str, *args) -> None:
    level = logging.INFO if settings.EXTRA_LOGGING else logging.DEBUG
    server_logger.log(level, message, *args)


def admin_log(message: str, *args) -> None:
    admin_logger.info(message, *args)
