"""Process-wide logging for the time server.

One stdout handler on the root logger carries every module logger. Uvicorn's
server and access loggers are routed to the same stream; access lines go
through uvicorn's own access formatter so each request appears as
``client - "GET /time HTTP/1.1" 200``.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"
ACCESS_FORMAT = '%(asctime)s %(levelname)s:%(name)s:%(client_addr)s - "%(request_line)s" %(status_code)s'


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_FORMAT,
                "use_colors": False,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["access"], "propagate": False},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Install the handlers once; later calls are no-ops.

    Skipped whenever the root logger already has handlers, which covers
    repeated factory calls and pytest's capture handler.
    """
    if logging.getLogger().handlers:
        return
    dictConfig(_dict_config(level))


__all__ = ["configure_logging", "LOG_FORMAT", "ACCESS_FORMAT"]
