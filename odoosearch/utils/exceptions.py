"""
Exception hierarchy and error handling utilities for odoosearch.

Provides:
- Custom exception classes with error codes
- Error categorization (retryable, fatal, permission, ...)
- Safe error message formatting (no credential leak)
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any

ACCESS_DENIED_SUBCODES = frozenset(
    {
        "odoo.exceptions.AccessDenied",
        "odoo.http.SessionExpiredException",
    }
)


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    PERMISSION = "permission"
    TIMEOUT = "timeout"


class OdooSearchError(Exception):
    """Base exception for all odoosearch errors."""

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

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(OdooSearchError):
    """Input validation error."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", category=ErrorCategory.VALIDATION, details=details)


class TransportError(OdooSearchError):
    """The HTTP exchange with the backend failed (network error or non-2xx status)."""

    def __init__(self, message: str, status: int | None = None):
        retryable = status is None or status >= 500
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            category=ErrorCategory.RETRYABLE if retryable else ErrorCategory.FATAL,
            details={"status": status},
        )
        self.status = status


class RemoteError(OdooSearchError):
    """The backend answered with an ``error`` envelope."""

    def __init__(self, message: str, subcode: str | None = None):
        is_auth = subcode in ACCESS_DENIED_SUBCODES
        super().__init__(
            message,
            code="AUTH_FAILED" if is_auth else "REMOTE_ERROR",
            category=ErrorCategory.PERMISSION if is_auth else ErrorCategory.FATAL,
            details={"subcode": subcode},
        )
        self.subcode = subcode

    @property
    def is_access_denied(self) -> bool:
        return self.subcode in ACCESS_DENIED_SUBCODES


class EmptyAuthError(OdooSearchError):
    """Login call succeeded but did not return a usable session id."""

    def __init__(self, database: str, login: str):
        super().__init__(
            f"Login for '{login}' on database '{database}' returned no session",
            code="EMPTY_AUTH",
            category=ErrorCategory.PERMISSION,
            details={"database": database, "login": login},
        )


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-fA-F0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory]:
    """
    Classify an exception and return (error_code, category).

    Returns:
        Tuple of (error_code, category)
    """
    exc_str = str(exc).lower()

    if isinstance(exc, OdooSearchError):
        return exc.code, exc.category

    if isinstance(exc, asyncio.TimeoutError):
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, ConnectionError):
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, (ValueError, KeyError, TypeError)):
        return "INVALID_VALUE", ErrorCategory.VALIDATION

    if "timeout" in exc_str or "timed out" in exc_str:
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if "unauthorized" in exc_str or "401" in exc_str or "access denied" in exc_str:
        return "UNAUTHORIZED", ErrorCategory.PERMISSION

    if "connection" in exc_str or "network" in exc_str:
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE

    return "INTERNAL_ERROR", ErrorCategory.FATAL


def user_message(exc: BaseException, default: str) -> str:
    """Message suitable for a user-facing notification; ``default`` for unrecognised shapes."""
    if isinstance(exc, OdooSearchError):
        return sanitize_error_message(exc.message)
    text = str(exc).strip()
    if isinstance(exc, Exception) and text:
        return sanitize_error_message(text)
    return default
