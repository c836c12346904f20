"""Logging configuration for the application.

Production output is one key="value" line per record so storage fallbacks
and seeding runs can be grepped by backend or record id.
"""

import logging
import sys
from typing import Any, Dict, Optional

from app.config import Settings, get_settings

# Loggers of libraries that are noisy at INFO
QUIET_LOGGERS = {
    "uvicorn": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "alembic": logging.INFO,
}


class StructuredFormatter(logging.Formatter):
    """Formatter emitting key="value" pairs.

    Includes timestamp, level, logger, message and any ``extra`` fields.
    """

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    ) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured information.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return " ".join(
            f'{key}="{_escape(value)}"' for key, value in log_data.items()
        )


def _escape(value: Any) -> str:
    return str(value).replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup application logging configuration.

    Configures root logger with a stdout handler; structured output in
    production, plain text otherwise.

    Args:
        settings: Settings to use, defaults to the cached settings
    """
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.log_level)

    if settings.is_production:
        formatter: logging.Formatter = StructuredFormatter(
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    root_logger.info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "environment": settings.environment,
            "storage_backend": settings.storage_backend,
        },
    )
