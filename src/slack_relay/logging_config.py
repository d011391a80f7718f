"""JSON logging for the relay process.

The web server and the Discord client share one process and one stdout.
Every record, from uvicorn, discord.py or the export pipeline, goes out as a
single JSON line tagged with ``service: slack-export-relay``. discord.py's
chatty gateway logger is held at WARNING.

Usage:
    from slack_relay.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "slack-export-relay",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        # discord.py logs every gateway heartbeat at INFO
        "discord": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return a copy of LOGGING_CONFIG with the root level set to ``level``."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    return config


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    All subsequent ``logging.getLogger()`` calls will emit JSON to stdout.
    """
    logging.config.dictConfig(build_logging_config(level))
