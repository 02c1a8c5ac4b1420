"""
Logging configuration for the application.
"""
import logging
import logging.config
import sys


def build_logging_config(level="INFO", fmt="console"):
    """
    Build a dictConfig mapping for the application loggers.

    Args:
        level (str): Root log level.
        fmt (str): Formatter for the console handler, "json" or "console".

    Returns:
        dict: Configuration accepted by logging.config.dictConfig.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "json_ensure_ascii": False,
            },
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if fmt == "json" else "console",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "memberdesk": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


def configure_logging(level="INFO", fmt="console"):
    """
    Configure logging for the application.

    Returns:
        logging.Logger: The package logger.
    """
    logging.config.dictConfig(build_logging_config(level, fmt))
    return logging.getLogger("memberdesk")
