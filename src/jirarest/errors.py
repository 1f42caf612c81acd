"""Error taxonomy & redaction helpers.

Four families of failure reach callers of the resource clients:

- transport errors: ``requests.RequestException`` subclasses, surfaced unchanged
- application errors: non-2xx responses, raised as :class:`RestClientError`
- deserialization errors: a 2xx body the parsers cannot understand
- unsupported operations: server capabilities the API does not expose

Public API:
- classify_error(exc) -> ErrorInfo
- redact(text) -> str
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import requests

_SENSITIVE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(?i)(authorization:\s*basic\s+)[A-Za-z0-9+/=]+"),
    re.compile(r"ATATT[A-Za-z0-9_\-=]{20,}"),  # Atlassian API tokens
    re.compile(r"(?<=://)[^/\s:@]+:[^/\s@]+(?=@)"),  # user:password@host
]

_REDACTION_PLACEHOLDER = "<redacted>"

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_SERVER_ERROR = 500


@dataclass(frozen=True)
class ErrorCollection:
    """Error body returned by the server for a failed request."""

    status: int | None
    error_messages: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)


class JiraClientError(RuntimeError):
    """Base class for every error raised by this library."""


class RestClientError(JiraClientError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_collections: Sequence[ErrorCollection] = (),
        response_text: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_collections = list(error_collections)
        self.response_text = response_text

    @property
    def error_messages(self) -> list[str]:
        return [msg for coll in self.error_collections for msg in coll.error_messages]

    @property
    def errors(self) -> dict[str, str]:
        merged: dict[str, str] = {}
        for coll in self.error_collections:
            merged.update(coll.errors)
        return merged


class PermissionDeniedError(RestClientError):
    """401/403 responses: the credentials may not perform the operation."""


class DeserializationError(JiraClientError):
    """A successful response whose JSON does not match the expected shape."""

    def __init__(self, message: str, *, field: str | None = None, type_name: str | None = None):
        super().__init__(message)
        self.field = field
        self.type_name = type_name


class InputValidationError(JiraClientError, ValueError):
    """A request input is missing a field the server requires."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


class UnsupportedOperationError(JiraClientError, NotImplementedError):
    """The remote API offers no endpoint for this operation."""


@dataclass
class ErrorInfo:
    category: str
    message: str
    original_type: str
    status_code: int | None = None
    details: dict[str, Any] | None = None


def redact(text: str) -> str:
    """Mask credentials that may leak through URLs, headers or response bodies."""
    if not text:
        return text
    redacted = text
    for pat in _SENSITIVE_PATTERNS:
        if pat.groups:
            redacted = pat.sub(lambda m: m.group(1) + _REDACTION_PLACEHOLDER, redacted)
        else:
            redacted = pat.sub(_REDACTION_PLACEHOLDER, redacted)
    return redacted


def _http_category(status: int | None) -> str:
    if status in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN):
        return "http.permission"
    if status == HTTP_NOT_FOUND:
        return "http.not_found"
    if status is not None and status >= HTTP_SERVER_ERROR:
        return "http.server"
    return "http.client"


def classify_error(exc: BaseException) -> ErrorInfo:
    """Map an exception onto a coarse category for reporting.

    ``PermissionDeniedError`` is checked through its status code so that a
    plain ``RestClientError`` carrying 401/403 lands in the same bucket.
    """
    msg = redact(str(exc))
    name = exc.__class__.__name__
    if isinstance(exc, RestClientError):
        details: dict[str, Any] = {}
        if exc.error_messages:
            details["error_messages"] = exc.error_messages
        if exc.errors:
            details["errors"] = exc.errors
        return ErrorInfo(
            _http_category(exc.status_code),
            msg,
            name,
            status_code=exc.status_code,
            details=details or None,
        )
    if isinstance(exc, DeserializationError):
        return ErrorInfo("deserialization", msg, name, details={"field": exc.field})
    if isinstance(exc, InputValidationError):
        return ErrorInfo("validation", msg, name, details={"field": exc.field})
    if isinstance(exc, UnsupportedOperationError):
        return ErrorInfo("unsupported", msg, name)
    if isinstance(exc, requests.RequestException):
        return ErrorInfo("transport", msg, name)
    return ErrorInfo("generic", msg, name)


def summarize_collections(collections: Sequence[ErrorCollection]) -> str:
    parts: list[str] = []
    for coll in collections:
        parts.extend(coll.error_messages)
        parts.extend(f"{key}: {value}" for key, value in coll.errors.items())
    return "; ".join(parts)


def coerce_errors(raw: Mapping[str, Any]) -> dict[str, str]:
    return {str(k): str(v) for k, v in raw.items()}


__all__ = [
    "ErrorCollection",
    "ErrorInfo",
    "JiraClientError",
    "RestClientError",
    "PermissionDeniedError",
    "DeserializationError",
    "InputValidationError",
    "UnsupportedOperationError",
    "classify_error",
    "redact",
    "summarize_collections",
    "coerce_errors",
]
