import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from singleton_idioms.config.schemas import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Renders structlog event dicts and adds caller information to the record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(log_format: str) -> DetailedFormatter:
    return DetailedFormatter(
        processor=structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        fmt=log_format,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the ConfigurationManager's
                logging section is used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from singleton_idioms.config.manager import get_config_manager
        config = get_config_manager().app_config.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    formatter = _build_formatter(config.format)
    handlers: List[logging.Handler] = []
    file_error: Optional[OSError] = None

    if config.to_file:
        try:
            log_dir = os.path.dirname(config.file.path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.file.path,
                maxBytes=config.file.max_size_mb * 1024 * 1024,
                backupCount=config.file.backup_count,
            )
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            # File logging is disabled, console logging continues
            file_error = e

    if config.to_stdout or (config.to_file and file_error is not None):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("singleton_idioms")
    if file_error is not None:
        logger.warning(
            "Could not open log file, file logging disabled",
            log_file=config.file.path,
            error=str(file_error),
        )

    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file.path if config.to_file and file_error is None else None,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


# Route structlog through stdlib logging until setup_logging installs handlers
_configure_structlog()
