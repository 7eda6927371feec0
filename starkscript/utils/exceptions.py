"""
Exception hierarchy and error handling utilities for starkscript.

Provides:
- Exception classes with error codes raised at the pipeline seams
- Error categorization (validation, retryable, fatal, ...)
- Safe error message formatting (no RPC keys leaking into logs)

Exceptions never cross the public ``invoke`` boundary; the orchestrator
converts them into taxonomy values (see ``starkscript.core.errors``).
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    PROTOCOL = "protocol"


class StarkscriptError(Exception):
    """Base exception for all starkscript errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class RequestValidationError(StarkscriptError):
    """Invoke arguments rejected before anything is sent."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", category=ErrorCategory.VALIDATION, details=details)
        self.field = field


class SignerError(StarkscriptError):
    """The account collaborator could not produce a signed envelope."""

    def __init__(self, message: str, account: str | None = None):
        details = {"account": account} if account else {}
        super().__init__(message, code="SIGNER_ERROR", category=ErrorCategory.FATAL, details=details)


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"&]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
]

# Node providers put the key in the last path segment: /v2/<key>, /rpc/v0_7/<key>
_URL_KEY_PATTERN = re.compile(r"(https?://[^\s/]+(?:/[^\s/]+)*/)[a-zA-Z0-9_-]{24,}(?=[\s'\",:)]|$)")


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials (API keys in RPC URLs, bearer tokens) from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return _URL_KEY_PATTERN.sub(lambda m: m.group(1) + replacement, sanitized)


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory, bool]:
    """
    Classify an exception and return (error_code, category, should_retry).

    Used for exceptions that escape a collaborator without being one of
    the pipeline's own exception types.
    """
    if isinstance(exc, StarkscriptError):
        return exc.code, exc.category, exc.category is ErrorCategory.RETRYABLE

    if isinstance(exc, TimeoutError):
        return "TIMEOUT", ErrorCategory.TIMEOUT, False

    if isinstance(exc, ConnectionError):
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.PROTOCOL, False

    if isinstance(exc, (ValueError, TypeError)):
        return "INVALID_VALUE", ErrorCategory.VALIDATION, False

    if isinstance(exc, KeyError):
        return "MISSING_KEY", ErrorCategory.PROTOCOL, False

    return "INTERNAL_ERROR", ErrorCategory.FATAL, False
