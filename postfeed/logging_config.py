"""
Logging configuration: one stdout handler for application and server logs,
and an access log that skips `GET /` health checks.
"""

import logging
from typing import Dict, Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RootPathAccessFilter(logging.Filter):
    """Filter to suppress `GET /` access lines."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out root path requests from uvicorn access logs."""
        if record.name == "uvicorn.access":
            # uvicorn passes (client, method, path, http_version, status) as args
            args = record.args
            if isinstance(args, tuple) and len(args) >= 3:
                if args[1] == "GET" and args[2] == "/":
                    return False
            elif '"GET / ' in record.getMessage():
                return False
        return True


def _logger(handler: str, level: str) -> Dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """
    Build a dictConfig mapping for the given level.

    `uvicorn.error` propagates into `uvicorn`; access lines go through their
    own handler so the root path filter touches nothing else.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"root_path": {"()": RootPathAccessFilter}},
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["root_path"],
            },
        },
        "loggers": {
            "uvicorn": _logger("default", level),
            "uvicorn.access": _logger("access", level),
        },
        "root": {"level": level, "handlers": ["default"]},
    }
