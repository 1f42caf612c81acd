"""Pytest configuration for jirarest tests.

Ensures the in-repo `src` directory is on `sys.path` so the package can be
imported without an editable install (`pip install -e .`).
"""

from __future__ import annotations

import json
import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

_TEST_START_TIMES: dict[str, float] = {}
_TEST_DURATIONS: list[tuple[str, float]] = []

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Ensure pytest-asyncio plugin is loaded explicitly so @pytest.mark.asyncio tests run
pytest_plugins = ["pytest_asyncio"]

SERVER = "http://jira.example.com"
API = f"{SERVER}/rest/api/latest"


@dataclass
class DummyResponse:
    status_code: int
    payload: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        payload = self.payload
        if payload is None:
            return ""
        if isinstance(payload, (dict, list)):
            return json.dumps(payload)
        return str(payload)


class DummySession:
    """Stands in for ``requests.Session``; replies from a queue or a route function."""

    def __init__(
        self,
        responses: list[DummyResponse] | None = None,
        route: Callable[[str, str, Any], DummyResponse] | None = None,
    ):
        self._responses = list(responses or [])
        self._route = route
        self._lock = threading.Lock()
        self.request_log: list[tuple[str, str, dict[str, Any]]] = []
        self.headers: dict[str, str] = {}
        self.auth: Any = None
        self.verify: Any = True
        self.closed = False

    def request(
        self,
        method: str,
        url: str,
        *,
        data: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> DummyResponse:
        with self._lock:
            self.request_log.append(
                (method, url, {"data": data, "headers": headers, "timeout": timeout})
            )
            if self._route is not None:
                return self._route(method, url, data)
            if not self._responses:
                raise AssertionError("No response queued for request")
            return self._responses.pop(0)

    def close(self) -> None:
        self.closed = True

    def body(self, index: int) -> Any:
        data = self.request_log[index][2]["data"]
        return json.loads(data) if data is not None else None


@pytest.fixture
def make_client():
    """Build a ``JiraRestClient`` over a dummy session; closed at teardown."""
    from jirarest.facade import JiraRestClient
    from jirarest.transport import HttpTransport

    created: list[JiraRestClient] = []

    def _make(*responses: DummyResponse, route=None):
        session = DummySession(list(responses), route=route)
        client = JiraRestClient(SERVER, HttpTransport(session))
        created.append(client)
        return client, session

    yield _make
    for client in created:
        client.destroy()


# --- Timing utilities to help identify slow/stalling tests ---


def pytest_runtest_setup(item):  # type: ignore
    _TEST_START_TIMES[item.nodeid] = time.perf_counter()


def pytest_runtest_teardown(item):  # type: ignore
    start = _TEST_START_TIMES.pop(item.nodeid, None)
    if start is not None:
        duration = time.perf_counter() - start
        _TEST_DURATIONS.append((item.nodeid, duration))


def pytest_sessionfinish(session, exitstatus):  # type: ignore
    if not _TEST_DURATIONS:
        return
    slow = sorted(_TEST_DURATIONS, key=lambda x: x[1], reverse=True)[:10]
    print("\n=== Slowest Tests (top 10) ===")
    for nodeid, secs in slow:
        print(f"{secs:0.3f}s  {nodeid}")
    total_time = sum(d for _, d in _TEST_DURATIONS)
    print(
        f"Total recorded test time: {total_time:0.3f}s over {len(_TEST_DURATIONS)} tests"
    )
