from __future__ import annotations

import threading

import pytest
from conftest import API, SERVER, DummyResponse, DummySession

from jirarest import JiraRestClient, Promise
from jirarest.config import config_from_mapping
from jirarest.issue_client import IssueRestClient
from jirarest.metadata_client import MetadataRestClient
from jirarest.transport import HttpTransport


def test_facade_exposes_all_clients_on_shared_transport(make_client):
    client, _ = make_client()
    clients = [
        client.issue_client,
        client.session_client,
        client.user_client,
        client.project_client,
        client.component_client,
        client.metadata_client,
        client.search_client,
        client.version_client,
        client.project_roles_client,
        client.audit_client,
    ]
    assert all(c._transport is client.transport for c in clients)
    assert client.base_uri == API


class _ConcurrentSession(DummySession):
    """Does not serialize requests, unlike the base dummy."""

    def request(self, method, url, *, data=None, headers=None, timeout=None):
        self.request_log.append((method, url, {"data": data}))
        return self._route(method, url, data)


def test_concurrent_requests_from_independent_clients():
    barrier = threading.Barrier(2, timeout=5)

    def _route(method, url, data):
        # both requests must be in flight at once to pass the barrier
        barrier.wait()
        if url.endswith("/serverInfo"):
            return DummyResponse(200, {"baseUrl": SERVER, "version": "5.0", "buildNumber": 1})
        return DummyResponse(200, {"self": f"{API}/issue/1", "key": "TST-1", "fields": {}})

    session = _ConcurrentSession(route=_route)
    with HttpTransport(session, max_workers=2) as transport:
        metadata = MetadataRestClient(API, transport)
        issues = IssueRestClient(API, transport)
        info, issue = Promise.all(
            [metadata.get_server_info(), issues.get_issue("TST-1")]
        ).claim(timeout=5)

    assert info.version == "5.0"
    assert issue.key == "TST-1"


def test_destroy_closes_transport():
    session = DummySession()
    client = JiraRestClient(SERVER, HttpTransport(session))
    with client:
        pass
    assert client.transport.closed
    with pytest.raises(RuntimeError):
        client.metadata_client.get_server_info()


def test_custom_api_path():
    with JiraRestClient(f"{SERVER}/", HttpTransport(DummySession()), api_path="/rest/api/2/") as client:
        assert client.base_uri == f"{SERVER}/rest/api/2"
        assert client.server_uri == SERVER


def test_from_config_builds_authenticated_transport(monkeypatch):
    for var in ("JIRA_USERNAME", "JIRA_PASSWORD", "JIRA_API_TOKEN"):
        monkeypatch.delenv(var, raising=False)
    cfg = config_from_mapping(
        {
            "server": {"url": SERVER},
            "auth": {"username": "admin", "password": "secret"},
            "transport": {"timeout": 7},
            "environment": {"load_dotenv": False},
        }
    )
    session = DummySession([DummyResponse(200, {"baseUrl": SERVER, "version": "5.0", "buildNumber": 1})])

    with JiraRestClient.from_config(cfg, session=session) as client:
        client.metadata_client.get_server_info().claim()

    assert session.auth == ("admin", "secret")
    assert session.request_log[0][2]["timeout"] == 7.0


def test_from_config_takes_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("JIRA_USERNAME", "envuser")
    monkeypatch.delenv("JIRA_PASSWORD", raising=False)
    monkeypatch.setenv("JIRA_API_TOKEN", "tok")
    cfg = config_from_mapping({"server": {"url": SERVER}, "environment": {"load_dotenv": False}})
    session = DummySession()

    with JiraRestClient.from_config(cfg, session=session):
        pass

    assert session.auth == ("envuser", "tok")
