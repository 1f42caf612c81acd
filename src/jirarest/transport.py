"""HTTP transport adapter shared by every resource client.

Each call performs exactly one round trip on a worker thread and returns a
:class:`~jirarest.promise.Promise` of the raw response. Status codes are not
interpreted here; ``requests`` exceptions (connection refused, timeouts)
propagate through the promise unchanged.
"""

from __future__ import annotations

import json
import threading
import time
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from .logging import get_logger
from .promise import Promise

USER_AGENT = "jirarest/0.2.0"
JSON_CONTENT_TYPE = "application/json"
HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 299


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    text: str
    uri: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return HTTP_SUCCESS_MIN <= self.status_code <= HTTP_SUCCESS_MAX

    def json(self) -> Any:
        return json.loads(self.text)


class HttpTransport:
    """Issues GET/POST/PUT/DELETE calls through a pooled ``requests.Session``.

    ``session`` may be injected (tests pass a stub); a transport that builds its
    own session also closes it. ``timeout`` is forwarded to ``requests`` only when
    set.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        max_workers: int = 4,
        timeout: float | None = None,
        auth: tuple[str, str] | None = None,
        verify: bool = True,
        headers: Mapping[str, str] | None = None,
    ):
        self._owns_session = session is None
        self._session = session if session is not None else self._build_session(max_workers)
        if auth is not None:
            self._session.auth = auth
        if not verify:
            self._session.verify = False
        self._session.headers.setdefault("Accept", JSON_CONTENT_TYPE)
        self._session.headers.setdefault("User-Agent", USER_AGENT)
        for key, value in (headers or {}).items():
            self._session.headers[key] = value
        self.timeout = timeout
        self._workers = threading.local()
        self._executor = ThreadPoolExecutor(
            max_workers=max(1, max_workers),
            thread_name_prefix="jirarest-http",
            initializer=self._mark_worker,
        )
        self._closed = False
        self._lock = threading.Lock()
        self.logger = get_logger()

    @staticmethod
    def _build_session(pool_size: int) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _perform(
        self, method: str, uri: str, body: str | bytes | None, content_type: str | None
    ) -> RawResponse:
        headers = dict(self._session.headers)
        if body is not None and content_type:
            headers["Content-Type"] = content_type
        self.logger.log_request(method, uri)
        start = time.perf_counter()
        response = self._session.request(
            method,
            uri,
            data=body,
            headers=headers,
            timeout=self.timeout,
        )
        duration_ms = (time.perf_counter() - start) * 1000
        self.logger.log_response(method, uri, response.status_code, duration_ms)
        return RawResponse(
            status_code=response.status_code,
            text=response.text or "",
            uri=uri,
            headers=dict(response.headers or {}),
        )

    def request(
        self,
        method: str,
        uri: str,
        body: str | bytes | None = None,
        content_type: str | None = JSON_CONTENT_TYPE,
    ) -> Promise[RawResponse]:
        with self._lock:
            if self._closed:
                raise RuntimeError("transport is closed")
            future = self._executor.submit(self._perform, method, uri, body, content_type)
        return Promise(future)

    def get(self, uri: str) -> Promise[RawResponse]:
        return self.request("GET", uri)

    def post(
        self, uri: str, body: str | bytes | None = None, content_type: str = JSON_CONTENT_TYPE
    ) -> Promise[RawResponse]:
        return self.request("POST", uri, body, content_type)

    def put(
        self, uri: str, body: str | bytes | None = None, content_type: str = JSON_CONTENT_TYPE
    ) -> Promise[RawResponse]:
        return self.request("PUT", uri, body, content_type)

    def delete(self, uri: str) -> Promise[RawResponse]:
        return self.request("DELETE", uri)

    def _mark_worker(self) -> None:
        self._workers.active = True

    def _on_worker_thread(self) -> bool:
        return getattr(self._workers, "active", False)

    def close(self) -> None:
        """Stop accepting requests and release the pool.

        Waits for in-flight requests, except when called from a continuation
        running on one of this transport's workers, where joining would
        deadlock; the pool then winds down on its own.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=not self._on_worker_thread())
        if self._owns_session:
            self._session.close()
        self.logger.debug("transport closed")


__all__ = ["HttpTransport", "RawResponse", "USER_AGENT"]
