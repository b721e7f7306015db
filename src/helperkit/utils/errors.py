"""Centralized error handling for helperkit."""

import inspect
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, Optional

from helperkit.utils.logging import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    VALIDATION = "validation"
    NETWORK = "network"
    CONVERSION = "conversion"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


## Custom Exceptions


class HelperKitError(Exception):
    """Base exception for all helperkit errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise HelperKitError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Validation Errors


class ValidationError(HelperKitError):
    """Base exception for validation-related errors."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class InvalidInputError(ValidationError):
    """Exception for input that cannot be processed."""

    user_message = "Invalid input value"


class InvalidEmailAddressError(InvalidInputError):
    """Exception for invalid email addresses."""

    user_message = "Invalid email address"


## Network Errors


class NetworkError(HelperKitError):
    """Base exception for network-related errors."""

    category = ErrorCategory.NETWORK
    user_message = "A network error occurred"


class ResolutionFailureError(NetworkError):
    """Exception for failed DNS lookups."""

    user_message = "DNS resolution failed"


class ResolutionTimeoutError(ResolutionFailureError):
    """Exception for DNS lookups that ran out of time."""

    user_message = "DNS resolution timed out"


## Conversion Errors


class ConversionError(HelperKitError):
    """Base exception for value conversion errors."""

    category = ErrorCategory.CONVERSION
    user_message = "A conversion error occurred"


class ConstructionFailureError(ConversionError):
    """Exception when a date value cannot be constructed."""

    user_message = "Could not construct a date from the given value"


## File System Errors


class FileSystemError(HelperKitError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Configuration Errors


class ConfigurationError(HelperKitError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class MissingConfigError(ConfigurationError):
    """Exception for missing configuration settings."""

    user_message = "Missing configuration settings"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = True
    ) -> Dict[str, Any]:
        """Handle errors with logging and return a structured description."""
        if isinstance(error, HelperKitError):
            _get_logger().debug(f"{context}: {error.message}", extra={"details": error.details})
            if log_traceback:
                _get_logger().exception(error)
            return error.to_dict()
        else:
            _get_logger().debug(f"{context}: {str(error)}")
            if log_traceback:
                _get_logger().exception(error)
            return {
                "error_type": "UnknownError",
                "category": ErrorCategory.UNKNOWN.value,
                "message": str(error),
                "details": {"context": context},
            }

    @staticmethod
    def wrap(func):
        """Decorator turning unexpected exceptions into HelperKitError."""
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)

                except HelperKitError:
                    raise

                except Exception as e:
                    raise HelperKitError(
                        message=f"Unexpected error: {str(e)}",
                        details={"function": func.__name__},
                    ) from e

            return async_wrapper
        else:

            @wraps(func)
            def sync_wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)

                except HelperKitError:
                    raise

                except Exception as e:
                    raise HelperKitError(
                        message=f"Unexpected error: {str(e)}",
                        details={"function": func.__name__},
                    ) from e

            return sync_wrapper


## Sentinel Adapters


def returns_sentinel(default: Any, context: Optional[str] = None):
    """Decorator collapsing any failure of the wrapped call into ``default``.

    Works for plain functions and coroutine functions. Cancellation of a
    coroutine is not a failure and propagates unchanged.
    """

    def decorator(func: Callable):
        label = context or func.__name__

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)

                except Exception as e:
                    ErrorHandler.handle(e, label, log_traceback=False)
                    return default

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except Exception as e:
                ErrorHandler.handle(e, label, log_traceback=False)
                return default

        return sync_wrapper

    return decorator


def safe_execute(func: Callable, *args, default=None, context: str = "", **kwargs):
    """Execute a function safely with error handling."""
    if inspect.iscoroutinefunction(func):
        return _safe_execute_async(
            func, *args, default=default, context=context, **kwargs
        )
    else:
        try:
            return func(*args, **kwargs)

        except Exception as e:
            ErrorHandler.handle(e, context, log_traceback=False)
            return default


async def _safe_execute_async(func, *args, default, context, **kwargs):
    """Internal async safe execute helper."""
    try:
        return await func(*args, **kwargs)

    except Exception as e:
        ErrorHandler.handle(e, context, log_traceback=False)
        return default


def format_error_message(error: Exception) -> str:
    """Format an error message for display."""
    if isinstance(error, HelperKitError):
        return error.message
    else:
        return "An unexpected error occurred - check logs for details."
