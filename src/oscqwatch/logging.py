# src/oscqwatch/logging.py
"""Console and structured JSON logging setup."""

from logging.config import dictConfig
from typing import Any, Dict

from .config import WatchdogConfig
from .errors import ConfigError

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(config: WatchdogConfig) -> None:
    """Configure the 'oscqwatch' logger and the root logger."""
    log_level = config.logging.level.upper()

    if config.logging.json_format:
        formatter: Dict[str, Any] = {
            '()': 'pythonjsonlogger.json.JsonFormatter',
            'format': JSON_FORMAT,
        }
    else:
        formatter = {'format': TEXT_FORMAT}

    try:
        dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': formatter,
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'default',
                    'stream': 'ext://sys.stderr',
                },
            },
            'loggers': {
                'oscqwatch': {
                    'handlers': ['console'],
                    'level': log_level,
                    'propagate': False,
                },
                # One line per poll otherwise.
                'httpx': {
                    'level': 'WARNING',
                },
                '': {  # Root logger
                    'handlers': ['console'],
                    'level': log_level,
                },
            },
        })
    except ValueError as e:
        raise ConfigError(f"Invalid logging configuration: {e}") from e
