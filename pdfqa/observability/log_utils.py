"""
Logging utilities for safe structured logging.

Keeps user-typed text and long chunk contents from flooding log lines.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert any value to a bounded string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({len(value)} keys)"
    else:
        val_str = str(value)

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR level with bounded context values.

    The traceback is attached only when DEBUG is enabled.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context key-value pairs
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context["error_type"] = type(exc).__name__
    safe_context["error_msg"] = safe_log_value(str(exc))
    rendered = ", ".join(f"{key}={val}" for key, val in safe_context.items())
    logger.error(
        f"{message} | {rendered}",
        exc_info=exc if logger.isEnabledFor(logging.DEBUG) else None,
    )
