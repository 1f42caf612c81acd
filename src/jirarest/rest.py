"""Request/response marshalling shared by every resource client.

``AbstractRestClient`` turns "URI + optional input + parser" into one
transport call plus a continuation which either parses the body or raises the
translated error. The continuation runs on the transport's worker thread.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any, TypeVar
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .errors import (
    HTTP_FORBIDDEN,
    HTTP_UNAUTHORIZED,
    DeserializationError,
    ErrorCollection,
    PermissionDeniedError,
    RestClientError,
    coerce_errors,
    redact,
    summarize_collections,
)
from .logging import get_logger
from .promise import Promise
from .transport import HttpTransport, RawResponse

T = TypeVar("T")
E = TypeVar("E")

REST_API_PATH = "rest/api/latest"
_ERROR_TEXT_LIMIT = 500


def build_uri(base: str, *segments: Any, **query: Any) -> str:
    """Append quoted path segments and non-``None`` query parameters to ``base``.

    Segments are stringified (ids may be ints); a list value in ``query`` is
    joined with commas, matching the server's ``expand``/``fields`` syntax.
    """
    scheme, netloc, path, existing_query, fragment = urlsplit(base)
    parts = [path.rstrip("/")]
    for segment in segments:
        parts.append(quote(str(segment).strip("/"), safe=""))
    new_path = "/".join(parts)
    params: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        elif isinstance(value, bool):
            value = "true" if value else "false"
        params.append((key, str(value)))
    encoded = urlencode(params)
    if existing_query and encoded:
        encoded = f"{existing_query}&{encoded}"
    elif existing_query:
        encoded = existing_query
    return urlunsplit((scheme, netloc, new_path, encoded, fragment))


def _extract_error_collection(status: int, payload: Any) -> ErrorCollection | None:
    if not isinstance(payload, Mapping):
        return None
    messages = payload.get("errorMessages")
    errors = payload.get("errors")
    if messages is None and errors is None:
        return None
    if messages is not None and not (
        isinstance(messages, list) and all(isinstance(m, str) for m in messages)
    ):
        return None
    if errors is not None and not isinstance(errors, Mapping):
        return None
    return ErrorCollection(
        status=status,
        error_messages=list(messages or []),
        errors=coerce_errors(errors or {}),
    )


def translate_error(response: RawResponse) -> RestClientError:
    """Build the typed error for a non-2xx response.

    A recognised error body (``errorMessages`` list and/or ``errors`` map) is
    carried verbatim; anything else leaves the messages empty and keeps the raw
    text in ``response_text``.
    """
    try:
        payload = json.loads(response.text) if response.text else None
    except ValueError:
        payload = None
    collection = _extract_error_collection(response.status_code, payload)
    collections = [collection] if collection is not None else []
    detail = summarize_collections(collections) if collections else response.text.strip()
    message = f"{response.status_code} from {redact(response.uri)}"
    if detail:
        message = f"{message}: {detail[:_ERROR_TEXT_LIMIT]}"
    error_cls = (
        PermissionDeniedError
        if response.status_code in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN)
        else RestClientError
    )
    return error_cls(
        message,
        status_code=response.status_code,
        error_collections=collections,
        response_text=response.text,
    )


def decode_json(response: RawResponse) -> Any:
    try:
        return json.loads(response.text)
    except ValueError as exc:
        raise DeserializationError(
            f"response from {redact(response.uri)} is not valid JSON: {exc}"
        ) from exc


class AbstractRestClient:
    """Holds the shared transport and the four request/continuation shapes."""

    def __init__(self, transport: HttpTransport):
        self._transport = transport
        self.logger = get_logger()

    def _ensure_success(self, response: RawResponse) -> RawResponse:
        if not response.is_success:
            error = translate_error(response)
            self.logger.log_error(
                "request failed",
                error=str(error),
                status=response.status_code,
                uri=response.uri,
            )
            raise error
        return response

    def _parse_with(self, parser: Callable[[Any], T]) -> Callable[[RawResponse], T]:
        def _handle(response: RawResponse) -> T:
            return parser(decode_json(self._ensure_success(response)))

        return _handle

    def _discard(self, response: RawResponse) -> None:
        self._ensure_success(response)

    @staticmethod
    def _encode(entity: E, generator: Callable[[E], Any]) -> str:
        return json.dumps(generator(entity))

    def _get_and_parse(self, uri: str, parser: Callable[[Any], T]) -> Promise[T]:
        return self._transport.get(uri).then(self._parse_with(parser))

    def _post_and_parse(
        self,
        uri: str,
        entity: E,
        generator: Callable[[E], Any],
        parser: Callable[[Any], T],
    ) -> Promise[T]:
        body = self._encode(entity, generator)
        return self._transport.post(uri, body).then(self._parse_with(parser))

    def _put_and_parse(
        self,
        uri: str,
        entity: E,
        generator: Callable[[E], Any],
        parser: Callable[[Any], T],
    ) -> Promise[T]:
        body = self._encode(entity, generator)
        return self._transport.put(uri, body).then(self._parse_with(parser))

    def _post(
        self,
        uri: str,
        entity: E | None = None,
        generator: Callable[[E], Any] | None = None,
    ) -> Promise[None]:
        body = self._encode(entity, generator) if generator is not None else None
        return self._transport.post(uri, body).then(self._discard)

    def _put(self, uri: str, entity: E, generator: Callable[[E], Any]) -> Promise[None]:
        body = self._encode(entity, generator)
        return self._transport.put(uri, body).then(self._discard)

    def _delete(self, uri: str) -> Promise[None]:
        return self._transport.delete(uri).then(self._discard)


__all__ = [
    "AbstractRestClient",
    "REST_API_PATH",
    "build_uri",
    "decode_json",
    "translate_error",
]
