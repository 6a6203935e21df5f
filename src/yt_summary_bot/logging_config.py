"""JSON logging for the bot process.

Records go to stdout as one JSON object each, with ``severity``/``timestamp``/
``logger`` keys and a ``service`` tag, so a log collector can index them.
Fields passed via ``extra=`` are emitted alongside.
"""

import logging
import logging.config

SERVICE_NAME = "yt-summary-bot"

# Client libraries whose per-request INFO lines drown out the bot's own
NOISY_LOGGERS = ("httpx", "httpcore", "slack_sdk", "google_genai", "urllib3")


def build_logging_config(level: str = "INFO", service: str = SERVICE_NAME) -> dict:
    """Return a dictConfig mapping for the given root level.

    Unknown level names fall back to INFO. Noisy client libraries are held
    at WARNING unless the root level is DEBUG.
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    library_level = "DEBUG" if level_name == "DEBUG" else "WARNING"

    return {
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
                "static_fields": {"service": service},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": library_level} for name in NOISY_LOGGERS},
        "root": {"level": level_name, "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install JSON logging. Called once from the app lifespan."""
    logging.config.dictConfig(build_logging_config(level))
