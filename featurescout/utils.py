"""
Utilities shared by the discovery pipeline.

Includes:
- Configurable logging
- Exception types
- Data validation
- Helpers for async operations
- Async timing context manager
- String and selector helpers
"""

import asyncio
import logging
import re
import time
from typing import Any, Optional, Union


# Logging configuration
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Returns a logger configured for the module.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (default: INFO)

    Returns:
        Configured logger
    """
    if not name.startswith("featurescout"):
        name = f"featurescout.{name}"
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# Exceptions
class FeatureScoutError(Exception):
    """Base exception for pipeline errors."""
    pass


class ValidationError(FeatureScoutError):
    """Raised for invalid configuration or input data."""
    pass


class StepExecutionError(FeatureScoutError):
    """A generated test step could not be performed."""

    def __init__(self, step_description: str, cause: Exception):
        self.step_description = step_description
        self.cause = cause
        super().__init__(f"{step_description}: {cause}")


class AssertionFailedError(FeatureScoutError):
    """A generated assertion did not hold."""
    pass


# Data validation
def validate_not_empty(value: Any, field_name: str) -> Any:
    """
    Validates that a value is not empty.

    Args:
        value: Value to validate
        field_name: Field name (for the error message)

    Returns:
        The validated value

    Raises:
        ValidationError: If the value is empty
    """
    if value is None:
        raise ValidationError(f"{field_name} cannot be None")

    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{field_name} cannot be an empty string")

    if isinstance(value, (list, dict)) and len(value) == 0:
        raise ValidationError(f"{field_name} cannot be empty")

    return value


def validate_positive(value: Union[int, float], field_name: str) -> Union[int, float]:
    """
    Validates that a number is positive.

    Raises:
        ValidationError: If the value is not a positive number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number, got {type(value)}")

    if value <= 0:
        raise ValidationError(f"{field_name} must be positive, got {value}")

    return value


def validate_in_range(
    value: Union[int, float],
    field_name: str,
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
) -> Union[int, float]:
    """
    Validates that a number lies within a range.

    Args:
        value: Value to validate
        field_name: Field name
        min_value: Minimum value (inclusive)
        max_value: Maximum value (inclusive)

    Returns:
        The validated value

    Raises:
        ValidationError: If out of range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")

    if min_value is not None and value < min_value:
        raise ValidationError(f"{field_name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValidationError(f"{field_name} must be <= {max_value}, got {value}")

    return value


# Async helpers
async def gather_with_errors(
    *coros,
    return_exceptions: bool = True,
) -> list[Any]:
    """
    Runs several coroutines concurrently and collects their results.

    Args:
        *coros: Coroutines to run
        return_exceptions: If True, exceptions are returned instead of raised

    Returns:
        Results in argument order (or exceptions if return_exceptions=True)

    When return_exceptions is False, the first error cancels the
    coroutines still running before it is re-raised.
    """
    tasks = [asyncio.ensure_future(c) for c in coros]
    if return_exceptions:
        return await asyncio.gather(*tasks, return_exceptions=True)

    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


# Context managers
class AsyncTimingContext:
    """Async context manager that measures execution time."""

    def __init__(self, name: str = "operation", logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger
        self.start_time = None
        self.end_time = None
        self.duration_ms = 0

    async def __aenter__(self):
        self.start_time = time.perf_counter()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        self.duration_ms = int((self.end_time - self.start_time) * 1000)

        if self.logger:
            self.logger.debug(f"{self.name} completed in {self.duration_ms}ms")

        return False


# Sanitization
def sanitize_filename(filename: str) -> str:
    """
    Sanitizes a file name, replacing anything that is not alphanumeric.

    Args:
        filename: File name

    Returns:
        Sanitized name
    """
    return re.sub(r"[^A-Za-z0-9_-]", "_", filename.strip())


def truncate_string(s: str, max_length: int = 100, suffix: str = "") -> str:
    """
    Truncates a string, optionally keeping a suffix.

    Args:
        s: String to truncate
        max_length: Maximum length of the result
        suffix: Suffix appended when truncating

    Returns:
        Truncated string
    """
    if len(s) <= max_length:
        return s
    return s[:max_length - len(suffix)] + suffix


# Selector helpers
_CSS_IDENTIFIER = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")


def is_css_identifier(value: str) -> bool:
    """True if value can be used verbatim after '#' or '.'."""
    return bool(_CSS_IDENTIFIER.match(value))


def css_escape(value: str) -> str:
    """Backslash-escapes characters not allowed in a CSS identifier."""
    escaped = re.sub(r"([^A-Za-z0-9_-])", r"\\\1", value)
    if escaped[:1].isdigit():
        escaped = f"\\3{escaped[0]} {escaped[1:]}"
    return escaped


def quote_attribute(value: str) -> str:
    """Escapes a value for use inside a double-quoted attribute selector."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
