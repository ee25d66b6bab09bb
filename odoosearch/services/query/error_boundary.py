"""Error-boundary helpers: turn query failures into a notification plus an empty result."""

from __future__ import annotations

from typing import Any, Callable

from odoosearch.utils.exceptions import (
    OdooSearchError,
    classify_exception,
    sanitize_error_message,
    user_message,
)

SEARCH_ERROR_TITLE = "Search Error"

Notify = Callable[[str, str], Any]


def odoosearch_error_result(
    *,
    operation: str,
    exc: OdooSearchError,
    log_warning: Callable[..., None],
    notify: Notify,
) -> list[Any]:
    """Report a recognised client/backend error and degrade to no results."""
    log_warning("Query {} failed with {}: {}", operation, exc.code, exc.message)
    notify(SEARCH_ERROR_TITLE, user_message(exc, f"Failed to search {operation}"))
    return []


def unhandled_exception_result(
    *,
    operation: str,
    exc: Exception,
    log_exception: Callable[..., None],
    notify: Notify,
) -> list[Any]:
    """Report an unexpected exception and degrade to no results; blank messages get a generic one."""
    code, category = classify_exception(exc)
    sanitized = sanitize_error_message(str(exc))
    log_exception("Query {} failed with [{}/{}]: {}", operation, code, category.value, sanitized)
    notify(SEARCH_ERROR_TITLE, user_message(exc, f"Failed to search {operation}"))
    return []
