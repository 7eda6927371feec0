"""Utility functions for starkscript."""

from starkscript.utils.exceptions import (
    ErrorCategory,
    RequestValidationError,
    SignerError,
    StarkscriptError,
    classify_exception,
    sanitize_error_message,
)
from starkscript.utils.logging_utils import ensure_rotating_log_file, remove_log_file_sink

__all__ = [
    "ErrorCategory",
    "RequestValidationError",
    "SignerError",
    "StarkscriptError",
    "classify_exception",
    "sanitize_error_message",
    "ensure_rotating_log_file",
    "remove_log_file_sink",
]
