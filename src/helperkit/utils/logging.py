"""Logging utility for helperkit"""

import json
import logging
import re
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.logging import RichHandler

from .paths import LOGS_DIR

LOGGER_NAME = "helperkit"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


## Custom JSON Formatter


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


## Log Masking


class SensitiveDataMasker:
    """Utility to mask email addresses and secrets in log messages."""

    EMAIL_PATTERN = re.compile(r"([^\s@'\"]+@[^\s@'\"]+\.[^\s@'\"]+)")

    SECRET_PATTERN = re.compile(
        r'((?:password|token|secret)["\']?\s*[:=]\s*["\']?)([^"\'}\s]+)',
        re.IGNORECASE,
    )

    MASK_STRATEGIES = {
        "full": lambda x: "[REDACTED]",
        "partial": lambda x: x[:3] + "*" * (len(x) - 6) + x[-3:]
        if len(x) > 6
        else "[REDACTED]",
    }

    def __init__(self, strategy: str = "full"):
        """Initialize masker with specified strategy."""

        self.strategy = strategy
        self.mask_func = self.MASK_STRATEGIES[strategy]

    def mask_string(self, text: str) -> str:
        """Mask sensitive data in a string message."""

        if not text or not isinstance(text, str):
            return text

        masked = self.EMAIL_PATTERN.sub(lambda m: self._mask_email(m.group(0)), text)
        masked = self.SECRET_PATTERN.sub(
            lambda m: m.group(1) + self.mask_func(m.group(2)), masked
        )

        return masked

    def _mask_email(self, email: str) -> str:
        """Mask an email address while preserving the first characters."""

        username, _, domain = email.partition("@")
        masked_username = username[0] + "***" if len(username) > 1 else "***"
        masked_domain = domain[0] + ("***" if len(domain) > 1 else "*")

        return f"{masked_username}@{masked_domain}"


class SensitiveDataFilter(logging.Filter):
    """Logging filter to mask sensitive data in log records."""

    def __init__(self, strategy: str = "full"):
        """Initialize filter with specified masking strategy."""

        super().__init__()
        self.masker = SensitiveDataMasker(strategy)

    def filter(self, record) -> bool:
        """Filter log record to mask sensitive data."""

        if record.args:
            record.msg = record.getMessage()
            record.args = None

        record.msg = self.masker.mask_string(record.msg)

        return True


## Main Log Manager


class LogManager:
    """Manages logging configuration and provides logger instances."""

    # handlers installed by any LogManager; only these are removed on reconfigure
    _installed_handlers: List[logging.Handler] = []

    def __init__(
        self,
        log_level: str = "INFO",
        console_level: str = "WARNING",
        log_to_file: bool = False,
        max_file_size: int = 5_242_880,
        backup_count: int = 5,
        log_dir: Optional[Path] = None,
    ):
        self.log_level = self._to_level(log_level)
        self.console_level = self._to_level(console_level)
        self.log_to_file = log_to_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.log_dir = log_dir or LOGS_DIR
        self.root_logger = logging.getLogger(LOGGER_NAME)
        self.root_logger.setLevel(self.log_level)
        self.root_logger.propagate = False
        self._setup_handlers()

    @staticmethod
    def _to_level(level: str) -> int:
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid logging level: {level}")
        return getattr(logging, level.upper())

    def _remove_installed_handlers(self) -> None:
        for handler in LogManager._installed_handlers:
            self.root_logger.removeHandler(handler)
            handler.close()
        LogManager._installed_handlers.clear()

    def _setup_handlers(self) -> None:
        """Setup console and optional file handlers with sensitive data filtering."""

        from .errors import FileSystemError

        sensitive_filter = SensitiveDataFilter(strategy="full")

        self._remove_installed_handlers()

        console_handler = RichHandler(
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        console_handler.setLevel(self.console_level)
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        console_handler.addFilter(sensitive_filter)
        self.root_logger.addHandler(console_handler)
        LogManager._installed_handlers.append(console_handler)

        if not self.log_to_file:
            return

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_dir / "helperkit.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding="utf-8",
            )

        except OSError as e:
            raise FileSystemError(
                f"Failed to create log file handler in {self.log_dir}: {str(e)}"
            ) from e

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        file_handler.addFilter(sensitive_filter)
        self.root_logger.addHandler(file_handler)
        LogManager._installed_handlers.append(file_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get a child logger of the helperkit logger."""

        if name and not name.startswith(LOGGER_NAME):
            name = f"{LOGGER_NAME}.{name}"

        return logging.getLogger(name or LOGGER_NAME)

    def set_level(self, level: str):
        """Set logging level at runtime"""

        self.log_level = self._to_level(level)
        self.root_logger.setLevel(self.log_level)


## Decorators for Logging


def log_call(func):
    """Decorator to log function calls with their duration."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(LOGGER_NAME)
        func_name = f"{func.__module__}.{func.__qualname__}"
        logger.debug(f"-> Entering {func_name}")
        start_time = datetime.now()

        try:
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Exiting {func_name} (Duration: {duration:.3f}s)")
            return result

        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Error in {func_name} after {duration:.3f}s: {e}")
            raise

    return wrapper


## Module-level LogManager Instance and Helper Functions

_log_manager: Optional[LogManager] = None


def init_logging(**settings: Any) -> LogManager:
    """Initialize (or reconfigure) the logging system."""

    global _log_manager

    if _log_manager is None or settings:
        _log_manager = LogManager(**settings)

    return _log_manager


def configure_from(logging_config: Dict[str, Any]) -> LogManager:
    """Reconfigure logging from a ``logging`` settings section."""

    return init_logging(
        log_level=logging_config.get("log_level", "INFO"),
        console_level=logging_config.get("console_level", "WARNING"),
        log_to_file=logging_config.get("log_to_file", False),
        max_file_size=logging_config.get("max_file_size", 5_242_880),
        backup_count=logging_config.get("backup_count", 5),
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance."""

    global _log_manager
    if _log_manager is None:
        _log_manager = init_logging()

    return _log_manager.get_logger(name)
