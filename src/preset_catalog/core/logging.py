"""
Preset Catalog Logging Configuration
Structured logging setup with file rotation and catalog event loggers
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog
from pythonjsonlogger.json import JsonFormatter

from .config import get_settings


def setup_logging() -> logging.Logger:
    """Set up structured logging for the preset catalog"""
    settings = get_settings()

    # Create logs directory
    log_dir = Path(settings.LOG_FILE_PATH).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)

    if settings.is_development:
        console_formatter = logging.Formatter(
            '\033[92m%(asctime)s\033[0m - '
            '\033[94m%(name)s\033[0m - '
            '%(levelname)s - '
            '%(message)s',
            datefmt='%H:%M:%S'
        )
    else:
        console_formatter = JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(message)s'
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        settings.LOG_FILE_PATH,
        maxBytes=settings.LOG_MAX_SIZE,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(pathname)s %(lineno)d %(funcName)s %(message)s'
    ))
    root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if not settings.is_development
            else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Statement echo in development only
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.is_development else logging.WARNING
    )

    logger = logging.getLogger("preset_catalog")
    logger.info(f"Logging configured - Level: {settings.LOG_LEVEL}")

    return logger


class CatalogLogger:
    """Specialized logger for catalog mutations and store failures"""

    def __init__(self):
        self.logger = structlog.get_logger("preset_catalog.catalog")

    def log_preset_created(
        self,
        name: str,
        preset_type: str,
        is_factory_preset: bool
    ) -> None:
        """Log creation of a preset"""
        self.logger.info(
            "Preset created",
            name=name,
            type=preset_type,
            is_factory_preset=is_factory_preset
        )

    def log_preset_renamed(self, old_name: str, new_name: str) -> None:
        """Log rename of a preset"""
        self.logger.info(
            "Preset renamed",
            old_name=old_name,
            new_name=new_name,
            changed=old_name != new_name
        )

    def log_sound_renamed(
        self,
        preset_name: str,
        old_name: str,
        new_name: str
    ) -> None:
        """Log rename of a sound within its preset"""
        self.logger.info(
            "Sound renamed",
            preset_name=preset_name,
            old_name=old_name,
            new_name=new_name,
            changed=old_name != new_name
        )

    def log_conflict(self, entity: str, name: str, **kwargs: Any) -> None:
        """Log a rejected write that would break a uniqueness constraint"""
        self.logger.warning(
            "Uniqueness conflict",
            entity=entity,
            name=name,
            **kwargs
        )

    def log_store_error(self, operation: str, error: str) -> None:
        """Log an underlying data-access failure"""
        self.logger.error(
            "Store operation failed",
            operation=operation,
            error=error
        )


class RequestLogger:
    """Logger for inbound HTTP requests"""

    def __init__(self):
        self.logger = structlog.get_logger("preset_catalog.http")

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float
    ) -> None:
        """Log a completed HTTP request"""
        self.logger.info(
            f"{method} {path}",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=round(duration_ms, 2)
        )


catalog_logger = CatalogLogger()
request_logger = RequestLogger()

__all__ = [
    "setup_logging",
    "CatalogLogger",
    "RequestLogger",
    "catalog_logger",
    "request_logger"
]
