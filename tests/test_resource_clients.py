"""Project, role, version, user, session and audit clients."""

from __future__ import annotations

import pytest
from conftest import API, SERVER, DummyResponse

from jirarest.domain import VersionPosition
from jirarest.errors import RestClientError
from jirarest.inputs import VersionInput

ROLE_URIS = {
    "Developers": f"{API}/project/TST/role/10001",
    "Users": f"{API}/project/TST/role/10000",
}


def _role(name: str, uri: str) -> dict:
    return {
        "self": uri,
        "name": name,
        "id": uri.rsplit("/", 1)[1],
        "actors": [{"id": 1, "displayName": "Admin", "type": "atlassian-user-role-actor", "name": "admin"}],
    }


def test_projects(make_client):
    client, session = make_client(
        DummyResponse(200, [{"self": f"{API}/project/TST", "key": "TST", "name": "Test"}]),
        DummyResponse(200, {"self": f"{API}/project/TST", "key": "TST", "lead": {"self": "u", "name": "admin"}}),
    )
    projects = client.project_client.get_all_projects().claim()
    project = client.project_client.get_project("TST").claim()

    assert [p.key for p in projects] == ["TST"]
    assert project.lead is not None and project.lead.name == "admin"
    assert session.request_log[1][1] == f"{API}/project/TST"


def test_get_roles_fetches_every_role(make_client):
    def _route(method, url, data):
        if url == f"{API}/project/TST/role":
            return DummyResponse(200, ROLE_URIS)
        for name, uri in ROLE_URIS.items():
            if url == uri:
                return DummyResponse(200, _role(name, uri))
        return DummyResponse(404, {"errorMessages": ["no such role"]})

    client, session = make_client(route=_route)
    roles = client.project_roles_client.get_roles(f"{API}/project/TST").claim(timeout=5)

    assert sorted(role.name for role in roles) == ["Developers", "Users"]
    assert roles[0].actors[0].name == "admin"
    assert len(session.request_log) == 3


def test_get_roles_fails_when_one_role_fails(make_client):
    def _route(method, url, data):
        if url.endswith("/role"):
            return DummyResponse(200, ROLE_URIS)
        return DummyResponse(404, {"errorMessages": ["gone"]})

    client, _ = make_client(route=_route)
    with pytest.raises(RestClientError):
        client.project_roles_client.get_roles(f"{API}/project/TST").claim(timeout=5)


def test_get_role_by_id(make_client):
    uri = ROLE_URIS["Users"]
    client, session = make_client(DummyResponse(200, _role("Users", uri)))
    role = client.project_roles_client.get_role_by_id(f"{API}/project/TST", 10000).claim()
    assert role.id == 10000
    assert session.request_log[0][1] == uri


def test_version_lifecycle(make_client):
    version = {"self": f"{API}/version/10000", "id": "10000", "name": "1.0", "released": False}
    client, session = make_client(
        DummyResponse(201, version),
        DummyResponse(200, {"self": "x", "issuesFixedCount": 3, "issuesAffectedCount": 1}),
        DummyResponse(200, {"issuesUnresolvedCount": 2}),
        DummyResponse(200, version),
        DummyResponse(200, version),
        DummyResponse(204),
    )
    versions = client.version_client
    uri = version["self"]

    created = versions.create_version(VersionInput("TST", "1.0")).claim()
    counts = versions.get_version_related_issues_count(uri).claim()
    unresolved = versions.get_num_unresolved_issues(uri).claim()
    versions.move_version(uri, VersionPosition.FIRST).claim()
    versions.move_version_after(uri, f"{API}/version/10001").claim()
    versions.remove_version(uri, move_fix_issues_to_uri=f"{API}/version/10001").claim()

    assert created.name == "1.0"
    assert (counts.num_fix_issues, counts.num_affected_issues) == (3, 1)
    assert unresolved == 2
    assert session.body(3) == {"position": "First"}
    assert session.body(4) == {"after": f"{API}/version/10001"}
    assert session.request_log[5][0] == "DELETE"
    assert "moveFixIssuesTo=" in session.request_log[5][1]
    assert "moveAffectedIssuesTo" not in session.request_log[5][1]


def test_users(make_client):
    user = {"self": f"{API}/user?username=fred", "name": "fred", "emailAddress": "fred@example.com"}
    client, session = make_client(DummyResponse(200, user), DummyResponse(200, [user]))

    fetched = client.user_client.get_user("fred").claim()
    found = client.user_client.find_users("fr", max_results=5).claim()

    assert fetched.email_address == "fred@example.com"
    assert [u.name for u in found] == ["fred"]
    assert session.request_log[0][1] == f"{API}/user?username=fred&expand=groups"
    assert session.request_log[1][1] == f"{API}/user/search?username=fr&maxResults=5"


def test_current_session_lives_outside_rest_api(make_client):
    client, session = make_client(
        DummyResponse(
            200,
            {
                "self": f"{API}/user?username=admin",
                "name": "admin",
                "loginInfo": {"failedLoginCount": 0, "loginCount": 12, "previousLoginTime": "2012-01-01T10:00:00.000+0000"},
            },
        )
    )
    current = client.session_client.get_current_session().claim()

    assert current.username == "admin"
    assert current.login_info is not None and current.login_info.login_count == 12
    assert session.request_log[0][1] == f"{SERVER}/rest/auth/latest/session"


def test_audit_records(make_client):
    client, session = make_client(DummyResponse(200, {"offset": 0, "limit": 5, "total": 0, "records": []}))
    records = client.audit_client.get_audit_records(limit=5, filter="user").claim()

    assert records.total == 0
    assert session.request_log[0][1] == f"{API}/auditing/record?limit=5&filter=user"
